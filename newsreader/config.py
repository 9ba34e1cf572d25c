from dotenv import load_dotenv
import os

load_dotenv()
OPENAI_API_KEY = os.getenv("OPENAI_API_KEY", "")
LOOKUP_MODEL = os.getenv("LOOKUP_MODEL", "gpt-4o-mini")
LOOKUP_TIMEOUT = float(os.getenv("LOOKUP_TIMEOUT", "20"))

FETCH_TIMEOUT = float(os.getenv("FETCH_TIMEOUT", "12"))
FETCH_USER_AGENT = os.getenv("FETCH_USER_AGENT", "Mozilla/5.0 (compatible; NewsReader/1.0)")

# longest word/context/sentence accepted by the lookup endpoints
MAX_TEXT_LENGTH = int(os.getenv("MAX_TEXT_LENGTH", "10000"))

CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

CACHE_TTL_SECONDS = int(os.getenv("CACHE_TTL_SECONDS", str(24 * 60 * 60)))
CACHE_MAX_ENTRIES = int(os.getenv("CACHE_MAX_ENTRIES", "10000"))

RATE_LIMIT_WINDOW_SECONDS = int(os.getenv("RATE_LIMIT_WINDOW_SECONDS", "3600"))
ARTICLE_RATE_LIMIT = int(os.getenv("ARTICLE_RATE_LIMIT", "30"))
TRANSLATE_RATE_LIMIT = int(os.getenv("TRANSLATE_RATE_LIMIT", "100"))
WORD_RATE_LIMIT = int(os.getenv("WORD_RATE_LIMIT", "300"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
