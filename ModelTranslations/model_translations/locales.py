"""
Locale helpers for model translations.

Активная локаль берётся из django.utils.translation (thread-local),
локаль по умолчанию - из настроек проекта.
"""

from typing import Optional, Tuple

from django.conf import settings
from django.utils import translation


def normalize_locale(value) -> Optional[str]:
    """Приводит код локали к строке, None остаётся None."""
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def get_default_locale() -> str:
    """
    Возвращает локаль по умолчанию.

    MODEL_TRANSLATIONS_DEFAULT_LOCALE имеет приоритет над LANGUAGE_CODE.
    """
    locale = getattr(settings, 'MODEL_TRANSLATIONS_DEFAULT_LOCALE', None)
    return normalize_locale(locale) or normalize_locale(settings.LANGUAGE_CODE)


def get_active_locale() -> str:
    """
    Возвращает активную локаль текущего потока.

    Если переводы деактивированы (translation.deactivate_all()),
    используется локаль по умолчанию.
    """
    return normalize_locale(translation.get_language()) or get_default_locale()


def resolve_locale(locale=None) -> str:
    """Явно переданная локаль или активная."""
    return normalize_locale(locale) or get_active_locale()


def fallback_to_any() -> bool:
    return getattr(settings, 'MODEL_TRANSLATIONS_FALLBACK_TO_ANY', True)


def fallback_chain(locale=None) -> Tuple[str, ...]:
    """
    Порядок поиска строки перевода: запрошенная локаль, затем локаль по умолчанию.

    Args:
        locale: Запрошенная локаль (None - активная)

    Returns:
        tuple: Уникальные коды локалей в порядке приоритета
    """
    chain = []
    for code in (resolve_locale(locale), get_default_locale()):
        if code not in chain:
            chain.append(code)
    return tuple(chain)
