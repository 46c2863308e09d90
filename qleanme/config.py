import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(dotenv_path=env_path)

# Supabase exposes a plain Postgres connection string; SQLite is used locally
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./qleanme.db")

# Security - CRITICAL: No default secret key in production
SECRET_KEY = os.getenv("SECRET_KEY")
if not SECRET_KEY:
    import warnings

    warnings.warn(
        "SECRET_KEY not set! Using insecure default - DO NOT USE IN PRODUCTION", RuntimeWarning, stacklevel=2
    )
    SECRET_KEY = "INSECURE-DEV-KEY-CHANGE-IN-PRODUCTION"  # noqa: S105 - Dev fallback only

JWT_ALGORITHM = "HS256"
# Mobile sessions stay signed in until the user logs out (30 days)
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", str(60 * 24 * 30)))

# Phone verification - no SMS provider yet, every login accepts this code
VERIFICATION_CODE = os.getenv("VERIFICATION_CODE", "123456")
VERIFICATION_CODE_LENGTH = 6

# New account defaults
SIGNUP_LOYALTY_POINTS = int(os.getenv("SIGNUP_LOYALTY_POINTS", "100"))
DEFAULT_PHOTO_URL = os.getenv("DEFAULT_PHOTO_URL", "https://i.alleksy.com/qlean/photoPlaceholder.png")
DEFAULT_AUTO_TIP_PERCENTAGE = 15.0
MAX_SAVED_ADDRESSES = 10

# Orders
DEFAULT_ORDER_DURATION_MINUTES = 120
SERVICE_HOURS_START = 8  # 8 AM
SERVICE_HOURS_END = 20  # 8 PM (exclusive)

# Payments are simulated until a processor is wired in
PAYMENT_SIMULATION_DELAY_SECONDS = float(os.getenv("PAYMENT_SIMULATION_DELAY_SECONDS", "1.0"))
MOCK_PAYMENT_CLIENT_SECRET = "mock_payment_intent_secret"  # noqa: S105
PAYMENT_CURRENCY = "USD"

# Redis (rate limiting + caching). Set REDIS_ENABLED=false to run without it
REDIS_ENABLED = os.getenv("REDIS_ENABLED", "true").lower() == "true"
FAQ_CACHE_SECONDS = int(os.getenv("FAQ_CACHE_SECONDS", "600"))

# Nominatim (OpenStreetMap) geocoding
NOMINATIM_BASE_URL = os.getenv("NOMINATIM_BASE_URL", "https://nominatim.openstreetmap.org")
NOMINATIM_USER_AGENT = os.getenv("NOMINATIM_USER_AGENT", "QleanMe/1.0")
NOMINATIM_COUNTRY_CODES = os.getenv("NOMINATIM_COUNTRY_CODES", "ca,us")
GEOCODING_CACHE_SECONDS = int(os.getenv("GEOCODING_CACHE_SECONDS", "3600"))
# Downtown Vancouver, used when an address cannot be resolved
DEFAULT_LATITUDE = 49.2827
DEFAULT_LONGITUDE = -123.1207

# Rate limits for the login flow (requests per window, counted per client IP and per phone number)
LOGIN_RATE_LIMIT = int(os.getenv("LOGIN_RATE_LIMIT", "10"))
VERIFY_RATE_LIMIT = int(os.getenv("VERIFY_RATE_LIMIT", "10"))
AUTH_RATE_LIMIT_WINDOW_SECONDS = int(os.getenv("AUTH_RATE_LIMIT_WINDOW_SECONDS", "600"))
# Only honour X-Forwarded-For when the API sits behind a proxy that sets it
TRUST_PROXY_HEADERS = os.getenv("TRUST_PROXY_HEADERS", "false").lower() == "true"
