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
"""Client locale extraction from the ``Accept-Language`` request header."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import structlog
from babel import Locale
from babel.core import UnknownLocaleError, parse_locale

from localefly.kernel.exceptions import LanguageTagParseException
from localefly.negotiation.matcher import pick
from localefly.negotiation.tags import format_language_tag, parse

logger = structlog.get_logger("localefly.negotiation")

ACCEPT_LANGUAGE = "accept-language"


def get_headers(request_or_headers: Any) -> Any:
    """Return the headers of a request, or the object itself if it already is one."""
    headers = getattr(request_or_headers, "headers", None)
    return request_or_headers if headers is None else headers


def get_header(headers: Any, name: str) -> str | None:
    """Case-insensitive header lookup over Starlette ``Headers`` or plain mappings."""
    if headers is None:
        return None
    value = headers.get(name)
    if value is None and isinstance(headers, Mapping):
        lowered = name.lower()
        value = next((v for k, v in headers.items() if str(k).lower() == lowered), None)
    return value


def is_valid_locale(identifier: str) -> bool:
    """Return ``True`` if *identifier* names a locale Babel can serve.

    The tag must be structurally valid. It is accepted when Babel has data
    for it as written or, failing that, for its primary language. So
    ``de-US`` passes on the strength of ``de``, while ``true`` is rejected.
    """
    try:
        language = parse_locale(identifier, sep="-")[0]
    except (ValueError, TypeError):
        return False

    for candidate in (identifier, language):
        try:
            Locale.parse(candidate, sep="-")
        except (ValueError, TypeError, UnknownLocaleError):
            continue
        return True
    return False


def get_client_locales(request_or_headers: Any) -> str | None:
    """Return the client's preferred known locale from ``Accept-Language``.

    Wildcards are dropped and every remaining tag is checked against Babel's
    locale data, so tokens like ``true`` are ignored instead of raising. The
    surviving candidates are matched against the raw header, which yields the
    highest-quality one in the casing the client sent.

    Returns ``None`` when the header is missing, unparseable or names no known
    locale.
    """
    accept_language = get_header(get_headers(request_or_headers), ACCEPT_LANGUAGE)
    if not accept_language:
        return None

    try:
        languages = parse(accept_language)
    except LanguageTagParseException:
        return None

    candidates: list[str] = []
    for lang in languages:
        if lang.is_wildcard:
            continue
        candidate = format_language_tag(lang)
        if is_valid_locale(candidate):
            candidates.append(candidate)
        else:
            logger.debug("invalid_locale_candidate", candidate=candidate)

    return pick(candidates, languages)
