# newsapi_lite/reader.py
"""
Terminal reader.

Renders article cards (title, description, url) to stdout. By default it shows
a fixed list of sample cards; with --live it fetches top headlines for a
country through NewsAPI and renders those instead.

Usage: python -m newsapi_lite [--live] [--country au|us] [--log-level INFO]
"""
from __future__ import annotations
import argparse
import logging
import sys
from typing import IO, List, Optional, Sequence

from newsapi_lite.client import NewsAPI
from newsapi_lite.config import API_KEY_ENV, LOG_LEVEL, SAMPLE_ARTICLE_COUNT, load_api_key
from newsapi_lite.errors import NewsAPIError
from newsapi_lite.models import Article, Country

logger = logging.getLogger("newsapi_lite.reader")

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """Send log records to stderr so they never mix with rendered cards."""
    name = (level or LOG_LEVEL).upper()
    # getLevelName maps unknown names to "Level X" instead of a number
    valid = isinstance(logging.getLevelName(name), int)
    root = logging.getLogger()
    root.setLevel(name if valid else logging.INFO)
    root.handlers.clear()
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    if not valid:
        logger.warning("Unknown log level %r; using INFO", name)


def sample_articles(count: int = SAMPLE_ARTICLE_COUNT) -> List[Article]:
    return [
        Article(
            title=f"Article {i} title",
            description=f"This is a sample description for the article {i}",
            url=f"https://example.com/new/article/{i}",
        )
        for i in range(count)
    ]


def render(articles: Sequence[Article], out: Optional[IO[str]] = None) -> None:
    out = out or sys.stdout
    for n, a in enumerate(articles):
        if n:
            out.write("\n")
        out.write(f"{a.title}\n")
        if a.description is not None:
            out.write(f"{a.description}\n")
        out.write(f"{a.url}\n")


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render news article cards in the terminal")
    parser.add_argument(
        "--live",
        action="store_true",
        help=f"Fetch top headlines from NewsAPI (key read from ${API_KEY_ENV}) instead of sample cards",
    )
    parser.add_argument(
        "--country",
        default=Country.AU.value,
        choices=[c.value for c in Country],
        help="Country to fetch headlines for (with --live)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging verbosity (defaults to $LOG_LEVEL or INFO)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None, out: Optional[IO[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.log_level)

    if not args.live:
        render(sample_articles(), out)
        return 0

    api_key = load_api_key()
    if not api_key:
        logger.error("%s is not set; cannot fetch live headlines", API_KEY_ENV)
        return 2

    api = NewsAPI(api_key).set_country(args.country)
    logger.info("Fetching %s for country=%s", api.endpoint.value, api.country.value)
    try:
        response = api.fetch()
    except NewsAPIError as exc:
        logger.error("Fetch failed: %s", exc)
        return 1

    articles = response.get_articles()
    logger.info("Fetched %d article(s)", len(articles))
    render(articles, out)
    return 0


if __name__ == "__main__":
    sys.exit(main())
