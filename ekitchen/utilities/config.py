"""Configuration management for the eKitchen application."""
import os
from typing import Final
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# LLM Configuration (any OpenAI-compatible endpoint, Groq by default)
LLM_API_KEY: Final[str] = os.getenv('LLM_API_KEY', os.getenv('GROQ_API_KEY', ''))
LLM_BASE_URL: Final[str] = os.getenv('LLM_BASE_URL', 'https://api.groq.com/openai/v1')
LLM_MODEL: Final[str] = os.getenv('LLM_MODEL', 'llama-3.1-8b-instant')
LLM_MAX_TOKENS: Final[int] = int(os.getenv('LLM_MAX_TOKENS', '500'))
LLM_TEMPERATURE: Final[float] = float(os.getenv('LLM_TEMPERATURE', '0.7'))
LLM_TIMEOUT: Final[float] = float(os.getenv('LLM_TIMEOUT', '30'))

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'INFO').upper()

# Cooking heuristics
PANTRY_MATCH_THRESHOLD: Final[float] = float(os.getenv('PANTRY_MATCH_THRESHOLD', '0.7'))
DEFAULT_BASE_SERVINGS: Final[int] = int(os.getenv('DEFAULT_BASE_SERVINGS', '4'))

# File Paths
BASE_DIR: Final[Path] = Path(__file__).parent.parent
DATA_DIR: Final[Path] = Path(os.getenv('EKITCHEN_DATA_DIR', str(BASE_DIR / 'data'))).resolve()
