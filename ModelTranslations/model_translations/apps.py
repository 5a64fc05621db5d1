"""
Конфигурация приложения model_translations.

Этот модуль содержит настройки приложения model_translations:
1. Имя приложения
2. Отображаемое имя
3. Регистрацию моделей с переводами при запуске
"""

from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _


class ModelTranslationsConfig(AppConfig):
    """
    Конфигурация приложения model_translations.

    Особенности:
    - Поиск моделей переводов для всех TranslatableModel
    - Установка переводимых атрибутов
    - Подключение сохранения переводов к post_save
    """
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'model_translations'
    verbose_name = _('Model Translations')

    def ready(self):
        """Регистрирует модели с переводами."""
        from .translator import autodiscover

        autodiscover()
