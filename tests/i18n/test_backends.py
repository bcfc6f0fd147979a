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
"""Tests for the translation backends."""

import json

import httpx
import pytest

from localefly.i18n.adapters.chain import ChainedBackend
from localefly.i18n.adapters.fetch import FetchBackend
from localefly.i18n.adapters.filesystem import FileSystemBackend
from localefly.i18n.adapters.memory import InMemoryBackend
from localefly.i18n.ports.outbound import TranslationBackend
from localefly.kernel.exceptions import TranslationBackendException


@pytest.fixture
def locales_dir(tmp_path):
    (tmp_path / "en").mkdir()
    (tmp_path / "es").mkdir()
    (tmp_path / "en" / "common.json").write_text(json.dumps({"greeting": {"hello": "Hello"}}))
    (tmp_path / "es" / "common.yaml").write_text("greeting:\n  hello: Hola\n")
    (tmp_path / "es" / "empty.yml").write_text("")
    (tmp_path / "es" / "broken.json").write_text("{not json")
    (tmp_path / "es" / "list.json").write_text("[1, 2]")
    return tmp_path


class TestFileSystemBackend:
    def test_implements_protocol(self, locales_dir):
        assert isinstance(FileSystemBackend(locales_dir), TranslationBackend)

    @pytest.mark.asyncio
    async def test_loads_json(self, locales_dir):
        backend = FileSystemBackend(locales_dir)
        assert await backend.load("common", "en") == {"greeting": {"hello": "Hello"}}

    @pytest.mark.asyncio
    async def test_loads_yaml(self, locales_dir):
        backend = FileSystemBackend(locales_dir)
        assert await backend.load("common", "es") == {"greeting": {"hello": "Hola"}}

    @pytest.mark.asyncio
    async def test_empty_file_is_empty_mapping(self, locales_dir):
        assert await FileSystemBackend(locales_dir).load("empty", "es") == {}

    @pytest.mark.asyncio
    async def test_missing_file(self, locales_dir):
        with pytest.raises(TranslationBackendException) as exc_info:
            await FileSystemBackend(locales_dir).load("common", "fr")
        assert exc_info.value.context == {"locale": "fr", "namespace": "common"}

    @pytest.mark.asyncio
    @pytest.mark.parametrize("namespace", ["broken", "list"])
    async def test_unreadable_file(self, locales_dir, namespace):
        with pytest.raises(TranslationBackendException) as exc_info:
            await FileSystemBackend(locales_dir).load(namespace, "es")
        assert exc_info.value.__cause__ is not None


class TestInMemoryBackend:
    @pytest.mark.asyncio
    async def test_loads_namespace(self):
        backend = InMemoryBackend({"en": {"common": {"hello": "Hello"}}})
        assert await backend.load("common", "en") == {"hello": "Hello"}

    @pytest.mark.asyncio
    @pytest.mark.parametrize(("namespace", "locale"), [("common", "fr"), ("other", "en")])
    async def test_missing(self, namespace, locale):
        backend = InMemoryBackend({"en": {"common": {"hello": "Hello"}}})
        with pytest.raises(TranslationBackendException):
            await backend.load(namespace, locale)


def _fetch_backend(handler, **kwargs) -> FetchBackend:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return FetchBackend("https://cdn.example.com", "/locales/{locale}/{namespace}.json", client=client, **kwargs)


class TestFetchBackend:
    def test_url_for(self):
        backend = FetchBackend("https://cdn.example.com/app/", "i18n/{locale}/{namespace}")
        assert backend.url_for("common", "pt-BR") == "https://cdn.example.com/app/i18n/pt-BR/common"

    @pytest.mark.asyncio
    async def test_fetches_json_with_accept_header(self):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"hello": "Bonjour"})

        backend = _fetch_backend(handler)
        assert await backend.load("common", "fr") == {"hello": "Bonjour"}
        assert str(seen[0].url) == "https://cdn.example.com/locales/fr/common.json"
        assert seen[0].headers["accept"] == "application/json"

    @pytest.mark.asyncio
    async def test_custom_headers(self):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={})

        backend = _fetch_backend(handler, headers={"Authorization": "Bearer t", "Accept": "text/json"})
        await backend.load("common", "fr")
        assert seen[0].headers["authorization"] == "Bearer t"
        assert seen[0].headers["accept"] == "text/json"

    @pytest.mark.asyncio
    async def test_http_error(self):
        backend = _fetch_backend(lambda request: httpx.Response(404))
        with pytest.raises(TranslationBackendException, match="Cannot fetch"):
            await backend.load("common", "fr")

    @pytest.mark.asyncio
    async def test_invalid_json(self):
        backend = _fetch_backend(lambda request: httpx.Response(200, content=b"<html>"))
        with pytest.raises(TranslationBackendException):
            await backend.load("common", "fr")

    @pytest.mark.asyncio
    async def test_non_object_json(self):
        backend = _fetch_backend(lambda request: httpx.Response(200, json=["a"]))
        with pytest.raises(TranslationBackendException, match="JSON object"):
            await backend.load("common", "fr")


class TestChainedBackend:
    @pytest.mark.asyncio
    async def test_first_success_wins(self):
        chain = ChainedBackend(
            [
                InMemoryBackend({"en": {}}),
                InMemoryBackend({"en": {"common": {"hello": "first"}}}),
                InMemoryBackend({"en": {"common": {"hello": "second"}}}),
            ]
        )
        assert await chain.load("common", "en") == {"hello": "first"}

    @pytest.mark.asyncio
    async def test_all_failing_raises_last_error(self):
        chain = ChainedBackend([InMemoryBackend({}), InMemoryBackend({"en": {}})])
        with pytest.raises(TranslationBackendException) as exc_info:
            await chain.load("common", "en")
        assert exc_info.value.context["namespace"] == "common"

    def test_requires_backends(self):
        with pytest.raises(ValueError):
            ChainedBackend([])
