"""
Configuration module for Pago Móvil Bot
Loads environment variables and provides typed constants
"""

import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

def _int_env(name: str, default: str) -> int:
    value = os.getenv(name, default)
    try:
        return int(value)
    except ValueError:
        raise RuntimeError(f"{name} must be an integer, got {value!r}")

# Bot configuration
BOT_TOKEN: str = os.getenv("BOT_TOKEN", "")
if not BOT_TOKEN:
    raise RuntimeError("BOT_TOKEN is required in environment variables")

# Bot settings
REPLY_TIMEOUT: int = _int_env("REPLY_TIMEOUT", "10")

# Interstitial ads
INTERSTITIAL_EVERY: int = _int_env("INTERSTITIAL_EVERY", "20")
if INTERSTITIAL_EVERY < 1:
    raise RuntimeError("INTERSTITIAL_EVERY must be a positive integer")

INTERSTITIAL_TIMEOUT: int = _int_env("INTERSTITIAL_TIMEOUT", "15")
AD_TEXT: str = os.getenv(
    "AD_TEXT",
    "📣 <b>Publicidad</b>\n\nGracias por usar la Calculadora Pago Móvil.",
)
AD_URL: str = os.getenv("AD_URL", "")

# Install prompt for the web app
APP_URL: str = os.getenv("APP_URL", "")
INSTALL_PROMPT_TIMEOUT: int = _int_env("INSTALL_PROMPT_TIMEOUT", "10")
