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
"""LocaleMiddleware — pure ASGI middleware running the detection cascade."""

from __future__ import annotations

from typing import Any

from starlette.requests import Request
from starlette.types import ASGIApp, Receive, Scope, Send

from localefly.negotiation.detector import LanguageDetector

LOCALE_STATE_KEY = "locale"


class LocaleMiddleware:
    """Detects the locale once per HTTP request and stores it on the request state.

    Handlers read it with :func:`get_locale` (or ``request.state.locale``).
    Non-HTTP scopes pass through untouched. Uses the raw ASGI protocol rather
    than ``BaseHTTPMiddleware`` so streaming responses are not buffered.
    """

    def __init__(self, app: ASGIApp, detector: LanguageDetector) -> None:
        self.app = app
        self._detector = detector

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        request = Request(scope, receive)
        locale = await self._detector.detect(request)
        scope.setdefault("state", {})[LOCALE_STATE_KEY] = locale

        await self.app(scope, receive, send)


def get_locale(request: Any) -> str:
    """Return the locale :class:`LocaleMiddleware` resolved for *request*.

    Raises:
        LookupError: If the middleware did not run for this request.
    """
    locale = getattr(request.state, LOCALE_STATE_KEY, None)
    if locale is None:
        raise LookupError("No locale on request state; is LocaleMiddleware installed?")
    return locale
