# settings.py
# Everything configurable lives here. The API key is the only value read from
# the environment (or a local .env file); the rest are fixed.

import os
from typing import Optional
from dotenv import load_dotenv

load_dotenv()

API_KEY_ENV = "OPENAI_API_KEY"

# --- model ---
MODEL = "gpt-4o-mini"
TEMPERATURE = 0.2

# --- downloads ---
CSV_FILE_NAME = "testrail-import.csv"
PDF_FILE_NAME = "test-design.pdf"
DEFAULT_FEATURE_NAME = "feature"
DEFAULT_CLASS_NAME = "Steps"


def get_api_key() -> Optional[str]:
    """Return the OpenAI key, or None when it is unset or blank."""
    key = os.getenv(API_KEY_ENV, "").strip()
    return key or None
