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
"""Translation namespaces required by the routes matched for a request."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class RouteRecord:
    """A matched route as handed over by the routing layer.

    ``handle["i18n"]`` names the namespaces the route renders with, either as
    one string or a list of strings.
    """

    id: str
    handle: Mapping[str, Any] = field(default_factory=dict)


def get_route_namespaces(routes: Iterable[RouteRecord | Mapping[str, Any]]) -> list[str]:
    """Collect the namespaces declared by *routes*, without duplicates.

    Routes may be :class:`RouteRecord` objects or plain mappings with a
    ``handle`` key. Handles that are missing, not mappings, or whose ``i18n``
    entry is neither a string nor a list of strings contribute nothing.
    """
    namespaces: dict[str, None] = {}
    for route in routes:
        handle = route.get("handle") if isinstance(route, Mapping) else getattr(route, "handle", None)
        for namespace in _handle_namespaces(handle):
            namespaces.setdefault(namespace, None)
    return list(namespaces)


def _handle_namespaces(handle: Any) -> list[str]:
    if not isinstance(handle, Mapping):
        return []
    value = handle.get("i18n")
    if isinstance(value, str):
        return [value]
    if isinstance(value, (list, tuple)) and all(isinstance(item, str) for item in value):
        return list(value)
    return []
