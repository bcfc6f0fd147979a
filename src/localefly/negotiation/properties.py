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
"""Detection configuration properties."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from localefly.core.config import config_properties


@config_properties(prefix="localefly.i18n.detection")
class DetectionProperties(BaseModel):
    """Typed view of the ``localefly.i18n.detection`` section.

    Example::

        localefly:
          i18n:
            detection:
              supported-languages: [en, es, fr-CA]
              fallback-language: en
              cookie-name: lng
              order: [searchParams, cookie, header]
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    supported_languages: list[str] = Field(alias="supported-languages", min_length=1)
    fallback_language: str = Field(alias="fallback-language", min_length=1)
    session_key: str = Field(default="lng", alias="session-key")
    search_param_key: str = Field(default="lng", alias="search-param-key")
    order: list[str] | None = None
    cookie_name: str | None = Field(default=None, alias="cookie-name")
    session_cookie_name: str = Field(default="localefly_session", alias="session-cookie-name")

    @field_validator("supported_languages", "order", mode="before")
    @classmethod
    def _split_csv(cls, value: object) -> object:
        if isinstance(value, str):
            return [part.strip() for part in value.split(",") if part.strip()]
        return value
