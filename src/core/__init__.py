"""Core configuration and shared utilities."""

from dotenv import load_dotenv

from .config import Settings, get_settings
from .logging import configure_logging

load_dotenv()

__all__ = ["Settings", "configure_logging", "get_settings"]
