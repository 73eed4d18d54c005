# services/search_config.py
import os
from dotenv import load_dotenv

from functions.query_params import INT64_MAX

load_dotenv()

# ---------------- CONFIG ----------------
DEFAULT_LIMIT = 20
MAX_LIMIT = 100
DEFAULT_PAGE = 1
# (page - 1) * limit must stay inside a 64-bit OFFSET
MAX_PAGE = INT64_MAX // MAX_LIMIT

# Suggestions / autocomplete
SUGGESTION_DEFAULT_LIMIT = 8
SUGGESTION_GROUP_LIMIT = 5       # categories and brands
SUGGESTION_MIN_LENGTH = 2
AUTOCOMPLETE_MIN_LENGTH = 1

# Browse feed
FEED_DEFAULT_PAGE_SIZE = 24
FEED_MAX_PAGE_SIZE = 48
FEED_MAX_PAGE = INT64_MAX // FEED_MAX_PAGE_SIZE

# Fuzzy matcher: a field matches when its distance (1 - similarity) is at most this
SEARCH_MATCH_THRESHOLD = float(os.getenv("SEARCH_MATCH_THRESHOLD", "0.4"))

# Malformed numeric filters are dropped instead of rejected when enabled
LENIENT_FILTER_PARSING = os.getenv("SEARCH_LENIENT_FILTER_PARSING", "true").lower() in ["true", "1", "yes", "on"]

# Field weights used by the relevance scorer, highest first
FIELD_WEIGHTS = (
    ("name", 0.40),
    ("brand", 0.20),
    ("description", 0.15),
    ("hsn_code", 0.10),
    ("category_name", 0.08),
    ("subcategory_name", 0.05),
    ("supplier_name", 0.02),
)

HIGHLIGHT_TAG = os.getenv("SEARCH_HIGHLIGHT_TAG", "mark")
HIGHLIGHT_OPEN = f"<{HIGHLIGHT_TAG}>"
HIGHLIGHT_CLOSE = f"</{HIGHLIGHT_TAG}>"

PRODUCT_PLACEHOLDER_IMAGE = "/product-placeholder.png"
