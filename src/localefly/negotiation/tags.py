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
"""Weighted language-tag parsing for ``Accept-Language`` style strings."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Protocol

from localefly.kernel.exceptions import LanguageTagParseException

# One entry: a primary subtag (or the ``*`` wildcard) followed by up to two
# alphanumeric subtags and an optional quality parameter. Commas never match,
# so consecutive matches are the comma-separated entries.
_ENTRY_RE = re.compile(
    r"[ ]*((([a-zA-Z]+(-[a-zA-Z0-9]+){0,2})|\*)(;[ ]*q=[0-1](\.[0-9]+)?[ ]*)?)*"
)
_QUALITY_RE = re.compile(r"q=([0-9]+(?:\.[0-9]+)?)")

WILDCARD = "*"


class _Subtags(Protocol):
    code: str
    script: str | None
    region: str | None


@dataclass(frozen=True)
class LanguageTag:
    """A parsed language tag with its quality weight.

    Attributes:
        code: Primary subtag, or ``*`` for the wildcard.
        script: Script subtag; only set for three-part tags (``zh-Hant-CN``).
        region: Region subtag; ``None`` for single-part tags.
        quality: Preference weight in ``[0, 1]``.
    """

    code: str
    script: str | None = None
    region: str | None = None
    quality: float = 1.0

    @property
    def is_wildcard(self) -> bool:
        return self.code == WILDCARD

    def __str__(self) -> str:
        return format_language_tag(self)


def split_subtags(tag: str) -> tuple[str, str | None, str | None]:
    """Split *tag* into ``(code, script, region)``.

    Three hyphen-separated parts mean ``code-script-region``; two parts mean
    ``code-region``.
    """
    bits = tag.split("-")
    if len(bits) == 3:
        return bits[0], bits[1], bits[2]
    return bits[0], None, bits[1] if len(bits) > 1 else None


def format_language_tag(tag: _Subtags) -> str:
    """Serialize a tag back into ``code[-script][-region]`` form."""
    parts = [tag.code]
    if tag.script:
        parts.append(tag.script)
    if tag.region:
        parts.append(tag.region)
    return "-".join(parts)


def parse(accept_language: str | None) -> list[LanguageTag]:
    """Parse a weighted-tag string into tags sorted by descending quality.

    Whitespace around entries and around ``;q=`` is tolerated, and malformed
    fragments are skipped on a best-effort basis. Entries with equal quality
    keep their input order.

    Raises:
        LanguageTagParseException: If no entry at all can be extracted.
    """
    languages: list[LanguageTag] = []

    for match in _ENTRY_RE.finditer(accept_language or ""):
        entry = match.group(0).strip()
        if not entry:
            continue

        tag, _, params = entry.partition(";")
        code, script, region = split_subtags(tag.strip())
        languages.append(
            LanguageTag(
                code=code,
                script=script,
                region=region,
                quality=_parse_quality(params),
            )
        )

    if not languages:
        raise LanguageTagParseException(accept_language)

    return sorted(languages, key=lambda lang: -lang.quality)


def _parse_quality(params: str) -> float:
    match = _QUALITY_RE.search(params)
    if match is None:
        return 1.0
    return min(float(match.group(1)), 1.0)
