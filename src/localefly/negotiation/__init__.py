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
"""Localefly Negotiation — parse, match and detect a request's locale.

The detection cascade lives in :mod:`localefly.negotiation.detector`::

    from localefly.negotiation import DetectionConfig, LanguageDetector

    detector = LanguageDetector(
        DetectionConfig(supported_languages=["en", "es"], fallback_language="en")
    )
    locale = await detector.detect(request)
"""

from localefly.negotiation.client_locales import get_client_locales
from localefly.negotiation.detector import (
    DetectionConfig,
    DetectionSource,
    LanguageDetector,
)
from localefly.negotiation.matcher import pick
from localefly.negotiation.namespaces import RouteRecord, get_route_namespaces
from localefly.negotiation.resolver import (
    AcceptHeaderLocaleResolver,
    FixedLocaleResolver,
    LocaleResolver,
)
from localefly.negotiation.tags import LanguageTag, format_language_tag, parse

__all__ = [
    "AcceptHeaderLocaleResolver",
    "DetectionConfig",
    "DetectionSource",
    "FixedLocaleResolver",
    "LanguageDetector",
    "LanguageTag",
    "LocaleResolver",
    "RouteRecord",
    "format_language_tag",
    "get_client_locales",
    "get_route_namespaces",
    "parse",
    "pick",
]
