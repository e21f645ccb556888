# tests/test_reader.py
import io
import logging
import sys

import pytest

from newsapi_lite import reader
from newsapi_lite.models import Article


@pytest.fixture()
def quiet_logging(monkeypatch):
    monkeypatch.setattr(reader, "configure_logging", lambda level=None: None, raising=True)


def test_sample_articles():
    cards = reader.sample_articles()
    assert len(cards) == 20
    assert cards[3].title == "Article 3 title"
    assert cards[3].description == "This is a sample description for the article 3"
    assert cards[3].url == "https://example.com/new/article/3"


def test_render_skips_absent_description():
    out = io.StringIO()
    reader.render([Article(title="a", url="u1"), Article(title="b", url="u2", description="d")], out)
    assert out.getvalue() == "a\nu1\n\nb\nd\nu2\n"


def test_main_renders_samples_by_default(quiet_logging):
    out = io.StringIO()
    assert reader.main([], out=out) == 0
    text = out.getvalue()
    assert text.startswith("Article 0 title\n")
    assert "https://example.com/new/article/19\n" in text


def test_live_without_key_exits_2(monkeypatch, quiet_logging, no_dotenv):
    monkeypatch.delenv("NEWSAPI_KEY", raising=False)
    assert reader.main(["--live"], out=io.StringIO()) == 2


def test_live_fetch_renders_articles(monkeypatch, quiet_logging, no_dotenv, make_api, ok_body, sent):
    monkeypatch.setenv("NEWSAPI_KEY", "k")
    api = make_api(ok_body)
    monkeypatch.setattr(reader, "NewsAPI", lambda key: api, raising=True)
    out = io.StringIO()
    assert reader.main(["--live", "--country", "us"], out=out) == 0
    assert out.getvalue() == "T\nhttp://x\n"
    assert str(sent[0].url).endswith("country=us")


def test_live_fetch_failure_exits_1(monkeypatch, quiet_logging, no_dotenv, make_api):
    monkeypatch.setenv("NEWSAPI_KEY", "k")
    api = make_api({"status": "error", "code": "apiKeyDisabled"})
    monkeypatch.setattr(reader, "NewsAPI", lambda key: api, raising=True)
    out = io.StringIO()
    assert reader.main(["--live"], out=out) == 1
    assert out.getvalue() == ""


def test_parse_args_rejects_unknown_country():
    with pytest.raises(SystemExit):
        reader.parse_args(["--country", "fr"])


def test_configure_logging_targets_stderr():
    root = logging.getLogger()
    saved = (root.level, list(root.handlers))
    try:
        reader.configure_logging("debug")
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert root.handlers[0].stream is sys.stderr
    finally:
        root.handlers[:] = saved[1]
        root.setLevel(saved[0])


def test_configure_logging_falls_back_on_unknown_level():
    root = logging.getLogger()
    saved = (root.level, list(root.handlers))
    try:
        reader.configure_logging("verbose")
        assert root.level == logging.INFO
    finally:
        root.handlers[:] = saved[1]
        root.setLevel(saved[0])
