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
"""Outbound ports consumed by the detection cascade."""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Sequence
from typing import Any, Protocol, runtime_checkable

# Custom resolver: receives the request, returns one locale, several, or nothing.
LocaleFinder = Callable[[Any], Awaitable[str | Sequence[str] | None]]


@runtime_checkable
class CookieReader(Protocol):
    """Reads a locale preference out of a raw ``Cookie`` header."""

    async def parse(self, cookie_header: str | None) -> Any: ...


@runtime_checkable
class Session(Protocol):
    """Key/value view of a loaded session."""

    def get(self, key: str) -> Any: ...


@runtime_checkable
class SessionStorage(Protocol):
    """Loads the session identified by a raw ``Cookie`` header."""

    async def get_session(self, cookie_header: str | None) -> Session: ...
