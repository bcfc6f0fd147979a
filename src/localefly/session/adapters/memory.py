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
"""In-memory session store with optional TTL expiry."""

from __future__ import annotations

import asyncio
import time
from typing import Any


class InMemorySessionStore:
    """Dict-backed session store guarded by an ``asyncio.Lock``.

    Suitable for development, testing, and single-process applications.
    """

    def __init__(self) -> None:
        self._entries: dict[str, tuple[dict[str, Any], float | None]] = {}
        self._lock = asyncio.Lock()

    async def get(self, session_id: str) -> dict[str, Any] | None:
        """Return a copy of the session data, or ``None`` if missing or expired."""
        async with self._lock:
            entry = self._entries.get(session_id)
            if entry is None:
                return None
            data, expires_at = entry
            if expires_at is not None and time.monotonic() > expires_at:
                del self._entries[session_id]
                return None
            return dict(data)

    async def save(self, session_id: str, data: dict[str, Any], ttl: int | None = None) -> None:
        """Store *data*; entries without *ttl* never expire."""
        async with self._lock:
            expires_at = time.monotonic() + ttl if ttl is not None else None
            self._entries[session_id] = (dict(data), expires_at)

    async def delete(self, session_id: str) -> None:
        async with self._lock:
            self._entries.pop(session_id, None)
