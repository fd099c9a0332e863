from pathlib import Path
import os
from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent

# Load environment variables
load_dotenv(BASE_DIR / "secret.env")

# File / folder paths
CATALOG_PATH   = Path(os.getenv("BECK_CATALOG_PATH", BASE_DIR / "data" / "beckDB.js"))
LOG_PATH       = Path(os.getenv("BECK_LOG_PATH", BASE_DIR / "beck_debug.log"))
CATALOG_NAME   = "beckMovies"

# Rating updater
FETCH_DELAY    = float(os.getenv("BECK_FETCH_DELAY", "0"))
FETCH_TIMEOUT  = float(os.getenv("BECK_FETCH_TIMEOUT", "10"))
REQUEST_HEADERS = {
    "User-Agent":
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/124.0 Safari/537.36",
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.5",
    "Accept-Encoding": "gzip, deflate, br",
    "DNT": "1",
    "Connection": "keep-alive",
    "Upgrade-Insecure-Requests": "1",
}

# UI constants
ACCENT_COLOR     = "#f5c518"
LOADING_DELAY_MS = int(os.getenv("BECK_LOADING_DELAY_MS", "1000"))
