import os


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY") or "yakhtimoon-dev-secret"

    # School REST API
    API_BASE_URL = os.environ.get("API_BASE_URL", "http://localhost:8000/api")
    API_TOKEN = os.environ.get("API_TOKEN", "")
    API_TIMEOUT = float(os.environ.get("API_TIMEOUT", "10"))

    DEFAULT_LOCALE = os.environ.get("DEFAULT_LOCALE", "ar")
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

    REFERENCE_FETCH_WORKERS = int(os.environ.get("REFERENCE_FETCH_WORKERS", "4"))
    QR_SCAN_DELAY_MS = int(os.environ.get("QR_SCAN_DELAY_MS", "300"))
