import os

# Search vars
MAX_RESULTS = 5
# Document loading
HTML_SUFFIXES = {".html", ".htm"}
SKIP_TAGS = {"script", "style", "noscript"}
# Report
DEFAULT_REPORT_PATH = os.path.join("index", "index_report.txt")
