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
"""Locale resolution — protocol and header-only resolvers."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol, runtime_checkable

from localefly.negotiation.client_locales import get_client_locales
from localefly.negotiation.matcher import pick


@runtime_checkable
class LocaleResolver(Protocol):
    """Port for determining the locale from an incoming request synchronously."""

    def resolve_locale(self, request: Any) -> str: ...


class AcceptHeaderLocaleResolver:
    """Resolves the locale from the ``Accept-Language`` header alone.

    The client's preferred known locale is matched against
    *supported_languages*, strictly and then loosely. When the header is
    missing or nothing matches it falls back to *fallback_language*.
    """

    def __init__(self, supported_languages: Sequence[str], fallback_language: str) -> None:
        self._supported = tuple(supported_languages)
        self._fallback = fallback_language

    def resolve_locale(self, request: Any) -> str:
        locale = get_client_locales(request)
        if not locale:
            return self._fallback
        return (
            pick(self._supported, locale)
            or pick(self._supported, locale, loose=True)
            or self._fallback
        )


class FixedLocaleResolver:
    """Always returns a pre-configured locale, ignoring the request."""

    def __init__(self, locale: str = "en") -> None:
        self._locale = locale

    def resolve_locale(self, request: Any) -> str:  # noqa: ARG002
        return self._locale
