# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""HTTP translation backend built on ``httpx``."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any
from urllib.parse import quote, urljoin

import httpx
import structlog

from localefly.kernel.exceptions import TranslationBackendException

logger = structlog.get_logger("localefly.i18n")


class FetchBackend:
    """Fetches translation namespaces as JSON over HTTP.

    *path_pattern* is resolved against *base_url* after substituting the
    ``{locale}`` and ``{namespace}`` tokens, e.g. ``/locales/{locale}/{namespace}.json``.
    ``Accept: application/json`` is sent unless *headers* override it.

    Pass *client* to reuse a shared ``httpx.AsyncClient`` (connection pooling,
    custom transports); otherwise one is opened per load.
    """

    def __init__(
        self,
        base_url: str,
        path_pattern: str,
        headers: Mapping[str, str] | None = None,
        *,
        client: httpx.AsyncClient | None = None,
        timeout: float = 5.0,
    ) -> None:
        self._base_url = base_url
        self._path_pattern = path_pattern
        self._headers = httpx.Headers(headers or {})
        self._headers.setdefault("Accept", "application/json")
        self._client = client
        self._timeout = timeout

    def url_for(self, namespace: str, locale: str) -> str:
        path = self._path_pattern.format(locale=quote(locale), namespace=quote(namespace))
        return urljoin(self._base_url, path)

    async def load(self, namespace: str, locale: str) -> Mapping[str, Any]:
        url = self.url_for(namespace, locale)
        try:
            if self._client is not None:
                response = await self._client.get(url, headers=self._headers)
            else:
                async with httpx.AsyncClient(timeout=self._timeout) as client:
                    response = await client.get(url, headers=self._headers)
            response.raise_for_status()
            data = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            raise TranslationBackendException(
                f"Cannot fetch translations from {url}: {exc}",
                locale=locale,
                namespace=namespace,
            ) from exc

        if not isinstance(data, dict):
            raise TranslationBackendException(
                f"Expected a JSON object from {url}, got {type(data).__name__}",
                locale=locale,
                namespace=namespace,
            )

        logger.debug("translations_loaded", locale=locale, namespace=namespace, backend="fetch")
        return data
