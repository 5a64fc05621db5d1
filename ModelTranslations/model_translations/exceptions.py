"""
Исключения приложения model_translations.
"""


class TranslationError(Exception):
    """Базовое исключение для ошибок переводов."""


class TranslationSaveError(TranslationError):
    """
    Строку перевода не удалось сохранить при сохранении записи.

    Исходная ошибка (ValidationError или IntegrityError) доступна через __cause__.
    """

    def __init__(self, instance, locale, message=None):
        self.instance = instance
        self.locale = locale
        super().__init__(
            message or f"Failed to save {locale!r} translation for {instance.__class__.__name__} pk={instance.pk}"
        )
