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
"""RequestCookie — reads a named cookie out of a raw ``Cookie`` header."""

from __future__ import annotations

from urllib.parse import quote, unquote

from starlette.requests import cookie_parser


class RequestCookie:
    """Cookie reader for the detection cascade.

    ``await RequestCookie("lng").parse("lng=es; theme=dark")`` returns ``"es"``.
    Missing headers or cookies yield ``None``.
    """

    def __init__(self, name: str) -> None:
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    async def parse(self, cookie_header: str | None) -> str | None:
        if not cookie_header:
            return None
        value = cookie_parser(cookie_header).get(self._name)
        return unquote(value) if value is not None else None

    def serialize(self, value: str, *, max_age: int | None = None, path: str = "/") -> str:
        """Render a ``Set-Cookie`` header value storing *value*."""
        parts = [f"{self._name}={quote(value)}", f"Path={path}", "SameSite=Lax"]
        if max_age is not None:
            parts.append(f"Max-Age={max_age}")
        return "; ".join(parts)
