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
"""CookieSessionStorage — loads sessions identified by a cookie."""

from __future__ import annotations

import uuid

from starlette.requests import cookie_parser

from localefly.session.ports.outbound import SessionStore
from localefly.session.session import Session

_DEFAULT_COOKIE_NAME = "localefly_session"


class CookieSessionStorage:
    """Session storage for the detection cascade.

    Reads the session id from *cookie_name* in the raw ``Cookie`` header and
    loads its data from the :class:`SessionStore`. A missing cookie or an
    unknown id yields a new, empty session.
    """

    def __init__(
        self,
        store: SessionStore,
        cookie_name: str = _DEFAULT_COOKIE_NAME,
        ttl: int | None = None,
    ) -> None:
        self._store = store
        self._cookie_name = cookie_name
        self._ttl = ttl

    @property
    def cookie_name(self) -> str:
        return self._cookie_name

    async def get_session(self, cookie_header: str | None) -> Session:
        session_id = cookie_parser(cookie_header).get(self._cookie_name) if cookie_header else None

        if session_id:
            data = await self._store.get(session_id)
            if data is not None:
                return Session(session_id, data)

        return Session(uuid.uuid4().hex, is_new=True)

    async def commit_session(self, session: Session) -> str:
        """Persist *session* and return the ``Set-Cookie`` value pointing at it."""
        await self._store.save(session.id, session.data(), self._ttl)
        return f"{self._cookie_name}={session.id}; Path=/; HttpOnly; SameSite=Lax"

    async def destroy_session(self, session: Session) -> None:
        await self._store.delete(session.id)
