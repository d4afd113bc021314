# outliner/config.py
import os

TOPIC_MAX_CHARS = 90
SECTION_MAX_CHARS = 160
DEFAULT_MAX_KEYWORDS = 6

DEFAULT_SLIDE_COUNT = 8
SLIDE_OPTIONS = (8, 10, 12, 14, 16)
MAX_SLIDES = 60

STYLES = ("Default", "Modern", "Minimal")
DETAIL_LEVELS = ("Brief", "Medium", "Detailed")
DEFAULT_STYLE = "Default"
DEFAULT_DETAIL_LEVEL = "Medium"
DEFAULT_TEMPLATE = "default"

# Display names accepted from forms, mapped to structure library codes
LANGUAGES = {
    "English": "en",
    "Español": "es",
}
DEFAULT_LANGUAGE = "en"

BACKEND_URL = os.getenv("OUTLINER_BACKEND_URL", "http://localhost:4000/api")
BACKEND_TIMEOUT = float(os.getenv("OUTLINER_BACKEND_TIMEOUT", "30"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
