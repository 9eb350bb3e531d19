"""Configuration: environment variables, model defaults, prompt bounds."""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

# ── Load .env ──────────────────────────────────────────────────────
load_dotenv(Path(__file__).resolve().parent.parent / ".env")

# ── API keys ───────────────────────────────────────────────────────
# Optional at import time; the collaborators check them when called.
GEMINI_API_KEY: str = os.environ.get("GEMINI_API_KEY", "")
ANTHROPIC_API_KEY: str = os.environ.get("ANTHROPIC_API_KEY", "")

# ── Server ─────────────────────────────────────────────────────────
PORT: int = int(os.environ.get("PORT", "8000"))

# ── Paths ──────────────────────────────────────────────────────────
PROJECT_ROOT: Path = Path(__file__).resolve().parent.parent
DATA_DIR: Path = Path(os.environ.get("DATA_DIR", str(PROJECT_ROOT / "data")))
OUTPUTS_DIR: Path = Path(os.environ.get("OUTPUTS_DIR", str(PROJECT_ROOT / "outputs")))
DATA_DIR.mkdir(parents=True, exist_ok=True)
OUTPUTS_DIR.mkdir(parents=True, exist_ok=True)

# Prefix for URLs returned by asset storage (outputs are mounted here)
PUBLIC_BASE_URL: str = os.environ.get("PUBLIC_BASE_URL", "/outputs").rstrip("/")

# ── Gemini defaults ────────────────────────────────────────────────
GEMINI_MODEL: str = "gemini-3-pro-image-preview"
MAX_RETRIES: int = 2
MAX_LOGO_COUNT: int = 4

# size option → Gemini aspect ratio
SIZE_TO_ASPECT_RATIO: dict[str, str] = {
    "1024x1024": "1:1",
    "1024x1536": "2:3",
    "1536x1024": "3:2",
    "auto": "1:1",
}

# quality option → Gemini image size (MUST be uppercase K)
QUALITY_TO_RESOLUTION: dict[str, str] = {
    "low": "1K",
    "medium": "1K",
    "high": "2K",
    "auto": "2K",
}

# ── Claude defaults ────────────────────────────────────────────────
CLAUDE_MODEL: str = "claude-sonnet-4-20250514"

# ── Prompt bounds ──────────────────────────────────────────────────
MIN_PROMPT_LENGTH: int = 200
MAX_PROMPT_LENGTH: int = 4000

# ── Token ledger ───────────────────────────────────────────────────
DEFAULT_TOKEN_BALANCE: int = int(os.environ.get("DEFAULT_TOKEN_BALANCE", "15"))
TOKEN_DB_PATH: Path = DATA_DIR / "tokens.db"
