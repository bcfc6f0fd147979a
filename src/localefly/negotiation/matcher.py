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
"""Best-match picking of a supported language for a set of requested tags."""

from __future__ import annotations

from collections.abc import Sequence

from localefly.negotiation.tags import LanguageTag, parse, split_subtags


def pick(
    supported_languages: Sequence[str],
    accept_language: str | Sequence[LanguageTag] | None,
    *,
    loose: bool = False,
) -> str | None:
    """Return the supported language that best matches *accept_language*.

    Requested tags are visited in quality order. For each one the supported
    languages are scanned in declaration order and the first whose primary
    subtag matches wins. In strict mode a requested script or region must also
    match; in loose mode the primary subtag alone is enough. Comparison is
    case-insensitive and the winner is returned exactly as declared.

    *accept_language* may be a raw header (parsed here, so it can raise
    :class:`~localefly.kernel.exceptions.LanguageTagParseException`) or tags
    already sorted by :func:`~localefly.negotiation.tags.parse`.

    Returns ``None`` when nothing matches or either input is empty. A
    whitespace-only header counts as empty.
    """
    if not supported_languages or not accept_language:
        return None
    if isinstance(accept_language, str) and not accept_language.strip():
        return None

    requested = parse(accept_language) if isinstance(accept_language, str) else accept_language

    supported = [
        (language, *(_lower(part) for part in split_subtags(language)))
        for language in supported_languages
    ]

    for lang in requested:
        code = lang.code.lower()
        script = _lower(lang.script)
        region = _lower(lang.region)

        for language, supported_code, supported_script, supported_region in supported:
            if code != supported_code:
                continue
            if loose:
                return language
            if (not script or script == supported_script) and (not region or region == supported_region):
                return language

    return None


def _lower(value: str | None) -> str | None:
    return value.lower() if value else value
