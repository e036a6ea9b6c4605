SECRET_KEY = "test-secret"

API_BASE_URL = "http://api.test/api"
API_TOKEN = ""
API_TIMEOUT = 1.0

DEFAULT_LOCALE = "en"
LOG_LEVEL = "WARNING"

REFERENCE_FETCH_WORKERS = 2
QR_SCAN_DELAY_MS = 300

DEBUG = False
TESTING = True
