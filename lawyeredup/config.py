"""Configuration constants, paths, and LLM settings."""

import os
from pathlib import Path

# ---------------------------------------------------------------------------
# Load .env if present
# ---------------------------------------------------------------------------
BASE_DIR = Path(__file__).parent.parent
_env_path = BASE_DIR / ".env"
if _env_path.exists():
    for _line in _env_path.read_text().splitlines():
        _line = _line.strip()
        if _line and not _line.startswith("#") and "=" in _line:
            _k, _, _v = _line.partition("=")
            os.environ.setdefault(_k.strip(), _v.strip().strip("\"'"))

# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------
DB_PATH = Path(os.environ.get("DB_PATH", str(BASE_DIR / "lawyeredup.db")))
DOCUMENT_KEY = "documentAnalysis"

# ---------------------------------------------------------------------------
# LLM Settings
# ---------------------------------------------------------------------------
ANTHROPIC_API_KEY = os.environ.get("ANTHROPIC_API_KEY", "")
LLM_MODEL = os.environ.get("LLM_MODEL", "claude-sonnet-4-20250514")
LLM_MAX_TOKENS = int(os.environ.get("LLM_MAX_TOKENS", "8192"))
LLM_TIMEOUT = float(os.environ.get("LLM_TIMEOUT", "120"))

# ---------------------------------------------------------------------------
# Uploads
# ---------------------------------------------------------------------------
# PDFs with less extractable text than this are treated as scans and OCR'd
OCR_TEXT_THRESHOLD = 100

# ---------------------------------------------------------------------------
# Server / logging
# ---------------------------------------------------------------------------
CORS_ORIGINS = [
    o.strip()
    for o in os.environ.get("CORS_ORIGINS", "http://localhost:5173,http://localhost:8501").split(",")
    if o.strip()
]
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
