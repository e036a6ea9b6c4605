import os

from .config import Config

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

API_BASE_URL = Config.API_BASE_URL
API_TOKEN = Config.API_TOKEN
API_TIMEOUT = Config.API_TIMEOUT

DEFAULT_LOCALE = Config.DEFAULT_LOCALE
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

REFERENCE_FETCH_WORKERS = Config.REFERENCE_FETCH_WORKERS
QR_SCAN_DELAY_MS = Config.QR_SCAN_DELAY_MS

DEBUG = True
