"""
Configuration settings for the clustering visualizer.

The OpenAI key is OPTIONAL - dataset generation and mock clustering work
without it. Only the AI commentary requires OPENAI_API_KEY to be set.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file
# Look for .env file in project root (parent of clusterviz/)
_project_root = Path(__file__).parent.parent
_env_path = _project_root / ".env"
if _env_path.exists():
    load_dotenv(dotenv_path=_env_path)

# ===================
# API Keys (Optional)
# ===================

# OpenAI API key - required only for the commentary
OPENAI_API_KEY = os.getenv("OPENAI_API_KEY")

# ===================
# Default Settings
# ===================

LLM_MODEL = os.getenv("CLUSTERVIZ_LLM_MODEL", "gpt-4o-mini")
DEFAULT_N_SAMPLES = int(os.getenv("CLUSTERVIZ_N_SAMPLES", "200"))

# ===================
# Feature Flags
# ===================

def has_openai() -> bool:
    """Check if OpenAI API key is configured."""
    return bool(os.environ.get("OPENAI_API_KEY") or OPENAI_API_KEY)
