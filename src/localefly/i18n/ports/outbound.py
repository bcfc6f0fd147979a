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
"""TranslationBackend protocol — port for loading translation namespaces."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class TranslationBackend(Protocol):
    """Abstract translation loading interface.

    All backends (file system, HTTP, in-memory, etc.) must implement this
    protocol. Returned mappings are keyed by translation key and hold either
    strings or nested mappings.
    """

    async def load(self, namespace: str, locale: str) -> Mapping[str, Any]:
        """Load *namespace* for *locale*.

        Raises ``TranslationBackendException`` when the namespace cannot be
        loaded.
        """
        ...
