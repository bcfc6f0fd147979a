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
"""In-memory translation backend."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from localefly.kernel.exceptions import TranslationBackendException


class InMemoryBackend:
    """Serves translations from a ``{locale: {namespace: mapping}}`` structure.

    Useful for tests and for applications that bundle their translations.
    """

    def __init__(self, data: Mapping[str, Mapping[str, Mapping[str, Any]]]) -> None:
        self._data = data

    async def load(self, namespace: str, locale: str) -> Mapping[str, Any]:
        try:
            return self._data[locale][namespace]
        except KeyError as exc:
            raise TranslationBackendException(
                f"No translations for namespace '{namespace}' in locale '{locale}'",
                locale=locale,
                namespace=namespace,
            ) from exc
