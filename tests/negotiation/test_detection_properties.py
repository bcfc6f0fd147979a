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
"""Tests for binding detection settings from configuration."""

from types import SimpleNamespace
from typing import Any

import pytest

from localefly.core.config import Config
from localefly.kernel.exceptions import ConfigurationException
from localefly.negotiation.detector import DetectionConfig, DetectionSource, LanguageDetector
from localefly.negotiation.properties import DetectionProperties
from localefly.session.adapters.memory import InMemorySessionStore
from localefly.session.storage import CookieSessionStorage
from localefly.web.cookies import RequestCookie


def _config(**detection: Any) -> Config:
    return Config({"localefly": {"i18n": {"detection": detection}}})


class TestDetectionProperties:
    def test_binds_hyphenated_keys(self):
        props = _config(**{"supported-languages": ["en", "es"], "fallback-language": "en"}).bind(
            DetectionProperties
        )
        assert props.supported_languages == ["en", "es"]
        assert props.fallback_language == "en"
        assert props.session_key == "lng"
        assert props.search_param_key == "lng"
        assert props.order is None
        assert props.cookie_name is None

    def test_comma_separated_lists(self):
        props = _config(
            **{"supported-languages": "en, es,fr", "fallback-language": "en", "order": "cookie,header"}
        ).bind(DetectionProperties)
        assert props.supported_languages == ["en", "es", "fr"]
        assert props.order == ["cookie", "header"]

    def test_missing_fallback_fails_fast(self):
        with pytest.raises(ConfigurationException, match="DetectionProperties"):
            _config(**{"supported-languages": ["en"]}).bind(DetectionProperties)

    def test_empty_supported_languages_fails_fast(self):
        with pytest.raises(ConfigurationException):
            _config(**{"supported-languages": [], "fallback-language": "en"}).bind(DetectionProperties)


class TestDetectionConfigFromConfig:
    def test_builds_cookie_reader_from_cookie_name(self):
        config = _config(
            **{"supported-languages": ["en", "es"], "fallback-language": "en", "cookie-name": "locale"}
        )
        detection = DetectionConfig.from_config(config)
        assert isinstance(detection.cookie, RequestCookie)
        assert detection.cookie.name == "locale"
        assert detection.session is None
        assert detection.supported_languages == ("en", "es")

    def test_builds_session_storage_when_store_given(self):
        config = _config(
            **{
                "supported-languages": ["en", "es"],
                "fallback-language": "en",
                "session-cookie-name": "sid",
                "order": ["session"],
            }
        )
        detection = DetectionConfig.from_config(config, session_store=InMemorySessionStore())
        assert isinstance(detection.session, CookieSessionStorage)
        assert detection.session.cookie_name == "sid"
        assert detection.resolved_order == (DetectionSource.SESSION,)

    def test_session_only_order_without_store_fails(self):
        config = _config(**{"supported-languages": ["en"], "fallback-language": "en", "order": ["session"]})
        with pytest.raises(ConfigurationException):
            DetectionConfig.from_config(config)

    @pytest.mark.asyncio
    async def test_configured_detector_detects(self):
        config = _config(
            **{
                "supported-languages": ["en", "es"],
                "fallback-language": "en",
                "cookie-name": "locale",
                "search-param-key": "lang",
            }
        )
        detector = LanguageDetector(DetectionConfig.from_config(config))
        request = SimpleNamespace(url="https://example.com/?lng=en", headers={"cookie": "locale=es"})
        assert await detector.detect(request) == "es"

    def test_environment_supplies_supported_languages(self, monkeypatch):
        monkeypatch.setenv("LOCALEFLY_I18N_DETECTION_SUPPORTED_LANGUAGES", "de, fr")
        detection = DetectionConfig.from_config(_config(**{"fallback-language": "fr"}))
        assert detection.supported_languages == ("de", "fr")
