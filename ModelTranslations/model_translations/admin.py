"""
Административный интерфейс для строк переводов.

Строки переводов редактируются инлайном на странице базовой записи.
"""

from django.contrib import admin
from django.utils.translation import gettext_lazy as _

from .translator import get_options


class TranslationInline(admin.TabularInline):
    """
    Инлайн строк переводов.

    Особенности:
    - Одна строка на локаль
    - Даты создания и изменения только для чтения
    """
    extra = 0
    readonly_fields = ('created_at', 'updated_at')
    verbose_name = _('Translation')
    verbose_name_plural = _('Translations')


def translation_inline(model, **attrs):
    """
    Создаёт инлайн переводов для базовой модели.

    Args:
        model: Модель-наследник TranslatableModel
        **attrs: Дополнительные атрибуты инлайна (extra, fields и т.п.)

    Returns:
        type: Подкласс TranslationInline
    """
    options = get_options(model)
    namespace = {
        'model': options.translation_model,
        'fk_name': options.owner_field,
        'fields': ('locale',) + options.fields + TranslationInline.readonly_fields,
    }
    namespace.update(attrs)
    return type(f'{model.__name__}TranslationInline', (TranslationInline,), namespace)
