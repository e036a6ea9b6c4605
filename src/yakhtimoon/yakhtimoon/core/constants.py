"""Fixed option sets and defaults shared by the forms."""

QURAN_PARTS = tuple(range(1, 31))

RELIGIOUS_QUALIFICATIONS = (
    "Ijazah in Quran Recitation",
    "Ijazah in Tajweed",
    "Hafiz of the Quran",
    "Diploma in Islamic Studies",
    "Bachelor in Sharia",
    "Master in Islamic Studies",
    "Qualified Imam",
)

RECITATION_PAGE_COUNT = 20
HOMEWORK_COUNT = 20
MIN_JUZ_PAGE = 1
MAX_JUZ_PAGE = 20

QR_SCAN_DELAY_MS = 300

DEFAULT_API_TIMEOUT = 10.0
DEFAULT_REFERENCE_WORKERS = 4
