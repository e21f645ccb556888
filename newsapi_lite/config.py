# newsapi_lite/config.py
import os
from typing import Optional

from dotenv import load_dotenv

# Origin every request is built from; endpoint segment is appended to it
BASE_URL = "https://newsapi.org/v2/"

# Environment variable the reader takes the API key from
API_KEY_ENV = "NEWSAPI_KEY"

# Cards shown by the reader when it is not fetching live
SAMPLE_ARTICLE_COUNT = 20

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()


def load_api_key() -> Optional[str]:
    """Read the API key from the environment (a local .env file is honoured)."""
    load_dotenv(override=False)
    key = (os.environ.get(API_KEY_ENV) or "").strip()
    return key or None
