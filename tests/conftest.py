# tests/conftest.py
import json

import httpx
import pytest

from newsapi_lite import config
from newsapi_lite.client import NewsAPI


@pytest.fixture()
def ok_body():
    return {
        "status": "ok",
        "totalResults": 1,
        "articles": [
            {
                "title": "T",
                "url": "http://x",
                "author": None,
                "content": None,
                "description": None,
                "urlToImage": None,
            }
        ],
    }


@pytest.fixture()
def sent():
    # requests seen by the fake transport, in order
    return []


@pytest.fixture()
def make_api(sent):
    """
    Build a NewsAPI whose sync and async paths both go through one
    httpx.MockTransport. `reply` is either an httpx.Response, a dict (sent as
    JSON with status 200), or a callable handler.
    """
    def _make(reply, api_key="test-key"):
        def handler(request: httpx.Request) -> httpx.Response:
            sent.append(request)
            if callable(reply):
                return reply(request)
            if isinstance(reply, dict):
                return httpx.Response(200, content=json.dumps(reply).encode("utf-8"))
            return reply

        transport = httpx.MockTransport(handler)
        return NewsAPI(api_key, transport=transport, async_transport=transport)

    return _make


@pytest.fixture()
def no_dotenv(monkeypatch):
    # keep a developer's local .env out of the tests
    monkeypatch.setattr(config, "load_dotenv", lambda **kw: False, raising=True)
