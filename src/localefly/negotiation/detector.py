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
"""LanguageDetector — ordered, server-side locale detection cascade.

Each request walks the configured sources in order. A source either yields a
raw locale value or nothing; raw values are matched against the supported
languages (strict first, then loose) and the first hit ends the walk. When no
source matches, the fallback language is returned.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING, Any
from urllib.parse import parse_qs, urlsplit

import structlog

from localefly.kernel.exceptions import (
    ConfigurationException,
    LanguageTagParseException,
    LocaleFinderNotConfiguredException,
)
from localefly.negotiation.client_locales import get_client_locales, get_header
from localefly.negotiation.matcher import pick
from localefly.negotiation.ports.outbound import CookieReader, LocaleFinder, SessionStorage

if TYPE_CHECKING:
    from localefly.core.config import Config
    from localefly.session.ports.outbound import SessionStore

logger = structlog.get_logger("localefly.detector")

DEFAULT_KEY = "lng"


class DetectionSource(StrEnum):
    """Channels the cascade can read a locale preference from."""

    SEARCH_PARAMS = "searchParams"
    COOKIE = "cookie"
    SESSION = "session"
    HEADER = "header"
    CUSTOM = "custom"


DEFAULT_ORDER: tuple[DetectionSource, ...] = (
    DetectionSource.SEARCH_PARAMS,
    DetectionSource.COOKIE,
    DetectionSource.SESSION,
    DetectionSource.HEADER,
)


@dataclass(frozen=True)
class DetectionConfig:
    """Immutable detection settings, built once per application.

    Attributes:
        supported_languages: Languages the application can serve, in declaration order.
        fallback_language: Returned when no source yields a supported language.
        cookie: Optional reader for a locale cookie.
        session: Optional storage whose session holds the locale under *session_key*.
        session_key: Session key holding the locale.
        search_param_key: Query parameter holding the locale.
        order: Sources to consult; ``None`` means :attr:`resolved_order`'s default.
        find_locale: Optional async resolver used by the ``custom`` source.

    Raises:
        ConfigurationException: If *order* is empty, names an unknown source, or
            is restricted to ``session``/``cookie`` without that collaborator.
    """

    supported_languages: Sequence[str]
    fallback_language: str
    cookie: CookieReader | None = None
    session: SessionStorage | None = None
    session_key: str = DEFAULT_KEY
    search_param_key: str = DEFAULT_KEY
    order: Sequence[DetectionSource | str] | None = None
    find_locale: LocaleFinder | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "supported_languages", tuple(self.supported_languages))
        if self.order is not None:
            object.__setattr__(self, "order", _coerce_order(self.order))

        if self.order == (DetectionSource.SESSION,) and self.session is None:
            raise ConfigurationException(
                "You need a session storage if you want to only get the locale from the session"
            )
        if self.order == (DetectionSource.COOKIE,) and self.cookie is None:
            raise ConfigurationException(
                "You need a cookie if you want to only get the locale from the cookie"
            )

    @property
    def resolved_order(self) -> tuple[DetectionSource, ...]:
        """The configured order, or the default with ``custom`` first when a finder exists."""
        if self.order is not None:
            return tuple(self.order)
        if self.find_locale is not None:
            return (DetectionSource.CUSTOM, *DEFAULT_ORDER)
        return DEFAULT_ORDER

    @classmethod
    def from_config(
        cls,
        config: Config,
        *,
        session_store: SessionStore | None = None,
        find_locale: LocaleFinder | None = None,
    ) -> DetectionConfig:
        """Build a configuration from the ``localefly.i18n.detection`` section."""
        from localefly.negotiation.properties import DetectionProperties
        from localefly.session.storage import CookieSessionStorage
        from localefly.web.cookies import RequestCookie

        props = config.bind(DetectionProperties)
        cookie = RequestCookie(props.cookie_name) if props.cookie_name else None
        session = (
            CookieSessionStorage(session_store, cookie_name=props.session_cookie_name)
            if session_store is not None
            else None
        )
        return cls(
            supported_languages=props.supported_languages,
            fallback_language=props.fallback_language,
            cookie=cookie,
            session=session,
            session_key=props.session_key,
            search_param_key=props.search_param_key,
            order=props.order,
            find_locale=find_locale,
        )


class LanguageDetector:
    """Detects the preferred locale of a request following a :class:`DetectionConfig`.

    The detector keeps no per-request state; one instance can serve
    concurrent requests.
    """

    def __init__(self, config: DetectionConfig) -> None:
        self._config = config

    @property
    def config(self) -> DetectionConfig:
        return self._config

    async def detect(self, request: Any) -> str:
        """Return a supported language for *request*, or the fallback language.

        *request* needs a ``url`` (string or URL object) and a ``headers``
        mapping. Errors raised by the cookie reader, session storage or custom
        resolver propagate unchanged.

        Raises:
            LocaleFinderNotConfiguredException: If ``custom`` is in the order
                but no ``find_locale`` resolver is configured.
        """
        for source in self._config.resolved_order:
            locale = await self._from_source(source, request)
            if locale:
                logger.debug("locale_detected", source=str(source), locale=locale)
                return locale
            logger.debug("locale_source_missed", source=str(source))

        logger.debug("locale_fallback", locale=self._config.fallback_language)
        return self._config.fallback_language

    async def _from_source(self, source: DetectionSource, request: Any) -> str | None:
        if source is DetectionSource.SEARCH_PARAMS:
            return self._from_search_params(request)
        if source is DetectionSource.COOKIE:
            return await self._from_cookie(request)
        if source is DetectionSource.SESSION:
            return await self._from_session(request)
        if source is DetectionSource.HEADER:
            return self._from_header(request)
        return await self._from_custom(request)

    def _from_search_params(self, request: Any) -> str | None:
        query = urlsplit(str(request.url)).query
        values = parse_qs(query, keep_blank_values=True).get(self._config.search_param_key)
        if values is None:
            return None
        return self._from_supported(values[0])

    async def _from_cookie(self, request: Any) -> str | None:
        if self._config.cookie is None:
            return None
        lng = await self._config.cookie.parse(_cookie_header(request))
        if not isinstance(lng, str) or not lng:
            return None
        return self._from_supported(lng)

    async def _from_session(self, request: Any) -> str | None:
        if self._config.session is None:
            return None
        session = await self._config.session.get_session(_cookie_header(request))
        lng = session.get(self._config.session_key)
        if not lng:
            return None
        return self._from_supported(_join(lng))

    def _from_header(self, request: Any) -> str | None:
        locales = get_client_locales(request)
        if not locales:
            return None
        return self._from_supported(locales)

    async def _from_custom(self, request: Any) -> str | None:
        if self._config.find_locale is None:
            raise LocaleFinderNotConfiguredException()
        locales = await self._config.find_locale(request)
        if not locales:
            return None
        return self._from_supported(_join(locales))

    def _from_supported(self, language: str) -> str | None:
        """Strict pick, then loose pick, against the supported languages."""
        supported = self._config.supported_languages
        try:
            return pick(supported, language) or pick(supported, language, loose=True)
        except LanguageTagParseException:
            return None


def _coerce_order(order: Sequence[DetectionSource | str]) -> tuple[DetectionSource, ...]:
    if isinstance(order, str):
        order = [order]
    if not order:
        raise ConfigurationException("Detection order must name at least one source")
    try:
        return tuple(DetectionSource(source) for source in order)
    except ValueError as exc:
        raise ConfigurationException(
            f"Unknown detection source in order {list(order)!r}",
            context={"allowed": [s.value for s in DetectionSource]},
        ) from exc


def _cookie_header(request: Any) -> str | None:
    return get_header(getattr(request, "headers", None), "cookie")


def _join(value: Any) -> str:
    if isinstance(value, (list, tuple)):
        return ",".join(str(item) for item in value)
    return str(value)
