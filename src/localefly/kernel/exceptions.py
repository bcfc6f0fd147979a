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
"""Unified exception hierarchy for Localefly.

All library exceptions inherit from LocaleflyException, enabling unified
error handling across modules.

Categories:
- LanguageTagParseException: a weighted-tag string could not be parsed at all
- ConfigurationException: invalid detection setup (fatal, caught at integration time)
- TranslationBackendException: a translation backend failed to load a namespace
"""

from __future__ import annotations


# =============================================================================
# Base Exception
# =============================================================================


class LocaleflyException(Exception):
    """Base exception for all Localefly errors.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "LOCALE_CONFIG").
        context: Arbitrary key-value pairs for error context and debugging.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.context: dict = context if context is not None else {}


# =============================================================================
# Negotiation Exceptions
# =============================================================================


class LanguageTagParseException(LocaleflyException, ValueError):
    """The input does not contain a single parseable language tag."""

    def __init__(self, raw: str | None) -> None:
        super().__init__(
            f"Invalid Accept-Language header: {raw!r}",
            code="LOCALE_PARSE",
            context={"raw": raw},
        )


class ConfigurationException(LocaleflyException):
    """Detection configuration violates one of its construction invariants."""

    def __init__(self, message: str, context: dict | None = None) -> None:
        super().__init__(message, code="LOCALE_CONFIG", context=context)


class LocaleFinderNotConfiguredException(ConfigurationException):
    """The ``custom`` source was requested but no ``find_locale`` resolver exists."""

    def __init__(self) -> None:
        super().__init__(
            "You tried to find a locale using `find_locale` but it is not defined. "
            "Change your order to not include `custom` or provide a find_locale function."
        )


# =============================================================================
# Translation Backend Exceptions
# =============================================================================


class TranslationBackendException(LocaleflyException):
    """A translation backend could not load the requested namespace."""

    def __init__(self, message: str, *, locale: str, namespace: str) -> None:
        super().__init__(
            message,
            code="TRANSLATION_BACKEND",
            context={"locale": locale, "namespace": namespace},
        )
