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
"""Builds the translation backend named in configuration."""

from __future__ import annotations

from localefly.core.config import Config
from localefly.i18n.adapters.chain import ChainedBackend
from localefly.i18n.adapters.fetch import FetchBackend
from localefly.i18n.adapters.filesystem import FileSystemBackend
from localefly.i18n.ports.outbound import TranslationBackend
from localefly.kernel.exceptions import ConfigurationException


def create_backend(config: Config) -> TranslationBackend:
    """Create the backend(s) listed under ``localefly.i18n.backends``.

    Each entry has a ``type`` of ``filesystem`` (``base-path``) or ``fetch``
    (``base-url``, ``path-pattern``, optional ``headers``). Several entries
    are chained in the listed order. With no entries, a file-system backend
    over ``./public/locales`` is returned.
    """
    entries = config.get("localefly.i18n.backends") or []
    if not isinstance(entries, list):
        raise ConfigurationException("localefly.i18n.backends must be a list")

    backends = [_create_one(entry) for entry in entries]
    if not backends:
        return FileSystemBackend()
    if len(backends) == 1:
        return backends[0]
    return ChainedBackend(backends)


def _create_one(entry: object) -> TranslationBackend:
    if not isinstance(entry, dict):
        raise ConfigurationException(f"Invalid translation backend entry: {entry!r}")

    kind = str(entry.get("type", "")).lower()
    if kind == "filesystem":
        return FileSystemBackend(base_path=str(entry.get("base-path", "./public/locales")))
    if kind == "fetch":
        try:
            return FetchBackend(
                base_url=str(entry["base-url"]),
                path_pattern=str(entry["path-pattern"]),
                headers=entry.get("headers"),
            )
        except KeyError as exc:
            raise ConfigurationException(
                f"Fetch backend requires '{exc.args[0]}'", context={"entry": entry}
            ) from exc
    raise ConfigurationException(
        f"Unknown translation backend type {kind!r}",
        context={"allowed": ["filesystem", "fetch"]},
    )
