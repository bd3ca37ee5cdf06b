"""
translator.py

Backend-side i18n for AI Stock Vault: toast messages and API responses are
looked up here by key. Flask-Babel handles the locale choice; this module
only reads the JSON catalogues in `locales/`.
"""

import json
import os

from flask import current_app, g

_FALLBACK_LANGUAGE = 'en'


def _load_catalogue(lang_code):
    locales_dir = current_app.config.get('LOCALES_DIR', 'locales')
    path = os.path.join(locales_dir, f'{lang_code}.json')
    with open(path, 'r', encoding='utf-8') as f:
        return json.load(f)


def _safe_catalogue(lang_code):
    try:
        return _load_catalogue(lang_code)
    except (FileNotFoundError, json.JSONDecodeError):
        return {}


def translate(key: str, **kwargs) -> str:
    """
    Translates a key into the currently selected language, with variable replacement.

    Args:
        key (str): The translation key to look up (e.g., 'download_ready').
        **kwargs: Values substituted into `{{ name }}` placeholders.

    Returns:
        str: The translated string. A key missing from the selected catalogue
        falls back to English, then to the key itself.
    """
    lang_code = getattr(g, 'language', _FALLBACK_LANGUAGE)

    translated_string = _safe_catalogue(lang_code).get(key)
    if translated_string is None and lang_code != _FALLBACK_LANGUAGE:
        translated_string = _safe_catalogue(_FALLBACK_LANGUAGE).get(key)
    if translated_string is None:
        # Missing keys show up as raw keys in the UI
        translated_string = key

    if kwargs:
        for var_name, var_value in kwargs.items():
            placeholder = f"{{{{ {var_name} }}}}"
            translated_string = translated_string.replace(placeholder, str(var_value))

    return translated_string
