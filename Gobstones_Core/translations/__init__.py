"""Translator and the locales bundled with the package."""

from pathlib import Path

from .translator import Translator, flatten

LOCALES_DIR = Path(__file__).resolve().parent / "locales"


def bundled_translator(current_locale=None):
    """Translator over the bundled locales, defaulting to English."""
    return Translator.from_directory(LOCALES_DIR, "en", current_locale=current_locale)


__all__ = ["Translator", "flatten", "bundled_translator", "LOCALES_DIR"]
