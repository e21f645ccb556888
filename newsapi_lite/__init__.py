"""
newsapi_lite

Small client for the NewsAPI.org top-headlines endpoint.

Example
-------
from newsapi_lite import NewsAPI, Country

api = NewsAPI("my-key").set_country(Country.US)
for article in api.fetch().articles:
    print(article.title, article.url)

Every failure is raised as a NewsAPIError subclass (see newsapi_lite.errors).
"""
from .client import NewsAPI
from .errors import (
    BadRequest,
    BodyReadFailed,
    NewsAPIError,
    RequestFailed,
    ResponseDecodeFailed,
    URLParseError,
)
from .models import Article, Country, Endpoint, NewsAPIResponse

__all__ = [
    "NewsAPI",
    "Article",
    "NewsAPIResponse",
    "Endpoint",
    "Country",
    "NewsAPIError",
    "RequestFailed",
    "BodyReadFailed",
    "ResponseDecodeFailed",
    "URLParseError",
    "BadRequest",
]
