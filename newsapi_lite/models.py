# newsapi_lite/models.py
from __future__ import annotations
from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class Endpoint(str, Enum):
    """API path segment a request targets."""
    TOP_HEADLINES = "top-headlines"

    def __str__(self) -> str:
        return self.value


class Country(str, Enum):
    """Two-letter locale filter sent as the ``country`` query parameter."""
    US = "us"
    AU = "au"

    def __str__(self) -> str:
        return self.value


class Article(BaseModel):
    """
    One article as returned by the API.
    Optional fields stay None when the API sends null or omits them; they are
    never coerced to "".
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    title: str
    url: str
    author: Optional[str] = None
    content: Optional[str] = None
    description: Optional[str] = None
    image_url: Optional[str] = Field(default=None, alias="urlToImage")

    @property
    def image(self) -> Optional[str]:
        return self.image_url


class NewsAPIResponse(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    status: str
    code: Optional[str] = None
    message: Optional[str] = None
    total_results: Optional[int] = Field(default=None, alias="totalResults")
    # error envelopes carry no articles
    articles: Tuple[Article, ...] = ()

    @property
    def ok(self) -> bool:
        return self.status == "ok"

    def get_articles(self) -> Tuple[Article, ...]:
        return self.articles
