"""Locale-based string lookup with ${name} interpolation and pluralization."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

_PLACEHOLDER = re.compile(r"\$\{(\w+)\}")


def flatten(tree: Mapping, prefix: str = "") -> Dict[str, Any]:
    """Collapse nested mappings into one level of dotted keys."""
    flat: Dict[str, Any] = {}
    for key, value in tree.items():
        dotted = f"{prefix}.{key}" if prefix else str(key)
        if isinstance(value, Mapping):
            flat.update(flatten(value, dotted))
        else:
            flat[dotted] = value
    return flat


class Translator:
    """Translate keys using one of several locales.

    `available_translations` maps a locale name to its (possibly nested)
    texts. When `should_flatten` is set, nested entries are reached with
    dotted keys such as "errors.outside".
    """

    def __init__(
        self,
        available_translations: Mapping[str, Mapping],
        default_locale: str,
        should_flatten: bool = True,
        current_locale: Optional[str] = None,
    ):
        if not available_translations:
            raise ValueError("The translations cannot be empty nor None")
        if not default_locale:
            raise ValueError("The default locale cannot be empty nor None")
        if default_locale not in available_translations:
            raise ValueError("The default locale must be one of the available translations")
        self._translations = available_translations
        self._default_locale = default_locale
        self._should_flatten = should_flatten
        self._locale_name = default_locale
        self._texts: Mapping = {}
        self.set_locale(current_locale or default_locale)

    @classmethod
    def from_directory(cls, path, default_locale, should_flatten=True, current_locale=None):
        """Load every *.yaml file in `path` as a locale named after the file."""
        translations = {}
        for locale_file in sorted(Path(path).glob("*.yaml")):
            with open(locale_file, "r", encoding="utf-8") as f:
                translations[locale_file.stem] = yaml.safe_load(f) or {}
        return cls(translations, default_locale, should_flatten, current_locale)

    def get_default_locale(self) -> str:
        return self._default_locale

    def get_available_translations(self) -> Mapping[str, Mapping]:
        return self._translations

    def get_locale(self) -> str:
        return self._locale_name

    def has_locale(self, locale: str) -> bool:
        return locale in self._translations

    def set_locale(self, locale: str) -> None:
        if not self.has_locale(locale):
            raise ValueError(f'The locale "{locale}" is not available')
        self._locale_name = locale
        texts = self._translations[locale]
        self._texts = flatten(texts) if self._should_flatten else texts

    def translate(self, key: str, interpolations: Optional[Mapping[str, Any]] = None) -> str:
        """Text for `key` in the current locale, or `key` itself when missing."""
        value = self._texts.get(key)
        if not isinstance(value, str) or not value:
            return key
        return self._interpolate(value, interpolations or {})

    def pluralize(self, amount: int, key: str, interpolations: Optional[Mapping[str, Any]] = None) -> str:
        """Pick `key.<amount>` when present, else `key.n`.

        `${amount}` is always available to the chosen text. Without either
        entry the key is returned unchanged.
        """
        if isinstance(amount, bool) or not isinstance(amount, int):
            raise ValueError("pluralization can only be used for integers")
        values = dict(interpolations or {}, amount=amount)
        for candidate in (f"{key}.{amount}", f"{key}.n"):
            if isinstance(self._texts.get(candidate), str):
                return self.translate(candidate, values)
        return key

    @staticmethod
    def _interpolate(text: str, values: Mapping[str, Any]) -> str:
        return _PLACEHOLDER.sub(
            lambda match: str(values[match.group(1)]) if match.group(1) in values else match.group(0),
            text,
        )
