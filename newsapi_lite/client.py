# newsapi_lite/client.py
"""
NewsAPI client.

This file:
- Builds the request URL from the configured endpoint + country (prepare_url)
- Fetches it with httpx, either blocking (fetch) or awaiting (fetch_async)
- Decodes the JSON envelope and turns a non-"ok" status into BadRequest

Both fetch paths share URL building, header building, error translation and
decoding; only the send/read calls differ.
"""
from __future__ import annotations
from contextlib import contextmanager
from typing import Dict, Iterator, Optional, Type, Union

import httpx
from pydantic import ValidationError

from newsapi_lite.config import BASE_URL
from newsapi_lite.errors import (
    BodyReadFailed,
    NewsAPIError,
    RequestFailed,
    ResponseDecodeFailed,
    URLParseError,
    map_response_error,
)
from newsapi_lite.models import Country, Endpoint, NewsAPIResponse

_ALLOWED_SCHEMES = ("http", "https")


@contextmanager
def _translate(kind: Type[NewsAPIError], what: str, catch=httpx.HTTPError, echo: bool = True) -> Iterator[None]:
    try:
        yield
    except catch as exc:
        raise kind(f"{what}: {exc}" if echo else what) from exc


def _decode_envelope(body: bytes) -> NewsAPIResponse:
    # the envelope status decides, not the HTTP status code
    try:
        envelope = NewsAPIResponse.model_validate_json(body)
    except ValidationError as exc:
        raise ResponseDecodeFailed("article parsing failed") from exc
    if not envelope.ok:
        raise map_response_error(envelope.code, envelope.message)
    # only error envelopes may leave articles out
    if "articles" not in envelope.model_fields_set:
        raise ResponseDecodeFailed("article parsing failed: ok response without articles")
    return envelope


class NewsAPI:
    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = BASE_URL,
        transport: Optional[httpx.BaseTransport] = None,
        async_transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._api_key = api_key
        self._base_url = base_url
        self._transport = transport
        self._async_transport = async_transport
        self._endpoint = Endpoint.TOP_HEADLINES
        self._country = Country.AU

    def __repr__(self) -> str:
        # never echo the key
        return f"NewsAPI(endpoint={self._endpoint.value!r}, country={self._country.value!r})"

    @property
    def endpoint(self) -> Endpoint:
        return self._endpoint

    @property
    def country(self) -> Country:
        return self._country

    def set_endpoint(self, endpoint: Union[Endpoint, str]) -> "NewsAPI":
        self._endpoint = Endpoint(endpoint)
        return self

    def set_country(self, country: Union[Country, str]) -> "NewsAPI":
        self._country = Country(country)
        return self

    # ------------------------------------------------------------------ URL

    def _base(self) -> httpx.URL:
        raw = self._base_url
        with _translate(URLParseError, f"failed to parse URL {raw!r}", catch=httpx.InvalidURL):
            base = httpx.URL(raw)
            if base.scheme not in _ALLOWED_SCHEMES or not base.host:
                raise URLParseError(f"failed to parse URL {raw!r}: expected an absolute http(s) URL")
            # the last path segment is a directory, not a file to be replaced
            if not base.path.endswith("/"):
                base = base.copy_with(path=base.path + "/")
        return base

    def prepare_url(self) -> str:
        """
        Target URL for the current configuration:
        <base>/<endpoint>?country=<code>, with no other query parameters.
        """
        base = self._base()
        with _translate(URLParseError, "failed to parse URL", catch=httpx.InvalidURL):
            url = httpx.URL(base.join(self._endpoint.value), params={"country": self._country.value})
        return str(url)

    def _headers(self) -> Dict[str, str]:
        return {"Authorization": self._api_key}

    def _request(self, client: Union[httpx.Client, httpx.AsyncClient], url: str) -> httpx.Request:
        # header encoding fails on a non-ASCII key; the key itself stays out of the message
        with _translate(RequestFailed, "failed to build request", catch=(httpx.HTTPError, UnicodeEncodeError), echo=False):
            return client.build_request("GET", url, headers=self._headers())

    # ---------------------------------------------------------------- fetch

    def fetch(self) -> NewsAPIResponse:
        url = self.prepare_url()
        with httpx.Client(transport=self._transport) as client:
            request = self._request(client, url)
            with _translate(RequestFailed, "failed to fetch articles", catch=httpx.RequestError):
                response = client.send(request, stream=True)
            try:
                with _translate(BodyReadFailed, "failed to read response body"):
                    body = response.read()
            finally:
                response.close()
        return _decode_envelope(body)

    async def fetch_async(self) -> NewsAPIResponse:
        url = self.prepare_url()
        async with httpx.AsyncClient(transport=self._async_transport) as client:
            request = self._request(client, url)
            with _translate(RequestFailed, "failed to fetch articles", catch=httpx.RequestError):
                response = await client.send(request, stream=True)
            try:
                with _translate(BodyReadFailed, "failed to read response body"):
                    body = await response.aread()
            finally:
                await response.aclose()
        return _decode_envelope(body)
