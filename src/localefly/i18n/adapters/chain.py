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
"""ChainedBackend — consults registered backends in order."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from localefly.i18n.ports.outbound import TranslationBackend
from localefly.kernel.exceptions import TranslationBackendException


class ChainedBackend:
    """Returns the first successful load among *backends*, in registration order.

    Raises the last backend's :class:`TranslationBackendException` when all of
    them fail. Other errors propagate immediately.
    """

    def __init__(self, backends: Sequence[TranslationBackend]) -> None:
        if not backends:
            raise ValueError("ChainedBackend needs at least one backend")
        self._backends = tuple(backends)

    @property
    def backends(self) -> tuple[TranslationBackend, ...]:
        return self._backends

    async def load(self, namespace: str, locale: str) -> Mapping[str, Any]:
        error: TranslationBackendException | None = None
        for backend in self._backends:
            try:
                return await backend.load(namespace, locale)
            except TranslationBackendException as exc:
                error = exc
        assert error is not None
        raise error
