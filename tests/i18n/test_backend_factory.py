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
"""Tests for configuration-driven backend creation."""

import pytest

from localefly.core.config import Config
from localefly.i18n.adapters.chain import ChainedBackend
from localefly.i18n.adapters.fetch import FetchBackend
from localefly.i18n.adapters.filesystem import FileSystemBackend
from localefly.i18n.factory import create_backend
from localefly.kernel.exceptions import ConfigurationException


def _config(backends) -> Config:
    return Config({"localefly": {"i18n": {"backends": backends}}})


class TestCreateBackend:
    def test_defaults_to_filesystem(self):
        assert isinstance(create_backend(Config({})), FileSystemBackend)

    def test_single_fetch_backend(self):
        backend = create_backend(
            _config([{"type": "fetch", "base-url": "https://cdn.example.com", "path-pattern": "/{locale}/{namespace}.json"}])
        )
        assert isinstance(backend, FetchBackend)
        assert backend.url_for("common", "en") == "https://cdn.example.com/en/common.json"

    def test_multiple_backends_are_chained_in_order(self, tmp_path):
        backend = create_backend(
            _config(
                [
                    {"type": "filesystem", "base-path": str(tmp_path)},
                    {"type": "fetch", "base-url": "https://cdn.example.com", "path-pattern": "/{locale}/{namespace}"},
                ]
            )
        )
        assert isinstance(backend, ChainedBackend)
        assert [type(b) for b in backend.backends] == [FileSystemBackend, FetchBackend]

    def test_unknown_type(self):
        with pytest.raises(ConfigurationException, match="Unknown translation backend"):
            create_backend(_config([{"type": "database"}]))

    def test_fetch_requires_base_url(self):
        with pytest.raises(ConfigurationException, match="base-url"):
            create_backend(_config([{"type": "fetch", "path-pattern": "/{locale}"}]))

    def test_backends_must_be_a_list(self):
        with pytest.raises(ConfigurationException):
            create_backend(_config({"type": "filesystem"}))
