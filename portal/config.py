"""
PORTAL CONFIGURATION

Purpose:
- Single place for environment-driven settings
- Logging bootstrap for the Streamlit entrypoint

Requirements:
• Never hardcode API keys (use os.getenv)
• Safe defaults for local development
"""

import logging
import os

# ══════════════════════════════════════════════════════════════
# STORAGE
# ══════════════════════════════════════════════════════════════

PORTAL_DATA_DIR = os.getenv("PORTAL_DATA_DIR", os.path.join("data", "portal"))

# ══════════════════════════════════════════════════════════════
# BACKEND API
# ══════════════════════════════════════════════════════════════

PORTAL_API_URL = os.getenv("PORTAL_API_URL", "http://localhost:5000/api")
API_TIMEOUT = int(os.getenv("API_TIMEOUT", "10"))  # seconds

# ══════════════════════════════════════════════════════════════
# EMAIL (BREVO)
# ══════════════════════════════════════════════════════════════

BREVO_API_KEY = os.getenv("BREVO_API_KEY")
EMAIL_SENDER_ADDRESS = os.getenv("EMAIL_SENDER_ADDRESS", "hr@pesuventurelabs.com")
EMAIL_SENDER_NAME = os.getenv("EMAIL_SENDER_NAME", "PESU Venture Labs HR")

# ══════════════════════════════════════════════════════════════
# BRANDING
# ══════════════════════════════════════════════════════════════

COMPANY_NAME = os.getenv("COMPANY_NAME", "PESU Venture Labs")

# ══════════════════════════════════════════════════════════════
# LOGGING
# ══════════════════════════════════════════════════════════════

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_logging_configured = False


def configure_logging(level: str = None) -> None:
    """Configure root logging once per process."""
    global _logging_configured

    if _logging_configured:
        return

    logging.basicConfig(
        level=getattr(logging, (level or LOG_LEVEL).upper(), logging.INFO),
        format=LOG_FORMAT,
    )
    _logging_configured = True
