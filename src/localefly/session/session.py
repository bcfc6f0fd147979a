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
"""Session — key/value view over one stored session."""

from __future__ import annotations

from typing import Any


class Session:
    """Session data loaded by :class:`~localefly.session.storage.CookieSessionStorage`.

    Attributes:
        id: The session identifier carried by the session cookie.
        is_new: ``True`` when no stored data existed for the cookie.
    """

    def __init__(self, session_id: str, data: dict[str, Any] | None = None, *, is_new: bool = False) -> None:
        self._id = session_id
        self._data: dict[str, Any] = dict(data) if data else {}
        self._is_new = is_new
        self._modified = False

    @property
    def id(self) -> str:
        return self._id

    @property
    def is_new(self) -> bool:
        return self._is_new

    @property
    def modified(self) -> bool:
        return self._modified

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def has(self, key: str) -> bool:
        return key in self._data

    def set(self, key: str, value: Any) -> None:
        self._data[key] = value
        self._modified = True

    def unset(self, key: str) -> None:
        if key in self._data:
            del self._data[key]
            self._modified = True

    def data(self) -> dict[str, Any]:
        """Return a copy of the session data."""
        return dict(self._data)
