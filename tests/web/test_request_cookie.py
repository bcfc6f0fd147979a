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
"""Tests for the RequestCookie reader."""

import pytest

from localefly.negotiation.ports.outbound import CookieReader
from localefly.web.cookies import RequestCookie


class TestRequestCookie:
    def test_implements_cookie_reader(self):
        assert isinstance(RequestCookie("lng"), CookieReader)

    @pytest.mark.asyncio
    async def test_reads_named_cookie(self):
        assert await RequestCookie("lng").parse("theme=dark; lng=es; other=1") == "es"

    @pytest.mark.asyncio
    async def test_missing_cookie(self):
        assert await RequestCookie("lng").parse("theme=dark") is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize("header", [None, ""])
    async def test_missing_header(self, header):
        assert await RequestCookie("lng").parse(header) is None

    @pytest.mark.asyncio
    async def test_url_encoded_value(self):
        assert await RequestCookie("lng").parse("lng=zh%2DHant%2DTW") == "zh-Hant-TW"

    @pytest.mark.asyncio
    async def test_serialize_round_trips_through_parse(self):
        cookie = RequestCookie("lng")
        header = cookie.serialize("pt-BR", max_age=3600)
        assert header.startswith("lng=pt-BR; Path=/")
        assert "Max-Age=3600" in header
        assert await cookie.parse(header.split(";", 1)[0]) == "pt-BR"
