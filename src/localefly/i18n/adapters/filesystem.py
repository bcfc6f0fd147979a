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
"""File-system translation backend — loads namespaces from JSON/YAML files."""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Any

import structlog
import yaml  # type: ignore[import-untyped]

from localefly.kernel.exceptions import TranslationBackendException

logger = structlog.get_logger("localefly.i18n")


class FileSystemBackend:
    """Resolves namespaces from locale directories.

    File naming convention::

        {base_path}/{locale}/{namespace}.json
        {base_path}/{locale}/{namespace}.yaml   (or .yml)

    JSON wins when both exist. Nested structures are returned as-is.
    """

    def __init__(self, base_path: str | Path = "./public/locales") -> None:
        self._base_path = Path(base_path)

    async def load(self, namespace: str, locale: str) -> dict[str, Any]:
        path = self._find_file(namespace, locale)
        if path is None:
            raise TranslationBackendException(
                f"No translation file for namespace '{namespace}' in locale '{locale}' under {self._base_path}",
                locale=locale,
                namespace=namespace,
            )

        try:
            data = await asyncio.to_thread(self._read, path)
        except (OSError, ValueError, yaml.YAMLError) as exc:
            raise TranslationBackendException(
                f"Cannot read translation file {path}: {exc}",
                locale=locale,
                namespace=namespace,
            ) from exc

        logger.debug("translations_loaded", locale=locale, namespace=namespace, backend="filesystem")
        return data

    def _find_file(self, namespace: str, locale: str) -> Path | None:
        directory = self._base_path / locale
        for ext in (".json", ".yaml", ".yml"):
            candidate = directory / f"{namespace}{ext}"
            if candidate.is_file():
                return candidate
        return None

    @staticmethod
    def _read(path: Path) -> dict[str, Any]:
        with path.open(encoding="utf-8") as fh:
            if path.suffix == ".json":
                data = json.load(fh)
            else:
                data = yaml.safe_load(fh)
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValueError(f"expected a mapping at the top level, got {type(data).__name__}")
        return data
