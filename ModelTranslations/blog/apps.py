"""
Конфигурация приложения blog.

Демонстрационное приложение: записи блога с переводимыми заголовком и текстом.
"""

from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _


class BlogConfig(AppConfig):
    """
    Конфигурация приложения blog.

    Особенности:
    - Записи блога (Post)
    - Переводы записей (PostTranslation)
    - Редакторы переводов (Editor)
    """
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'blog'
    verbose_name = _('Blog')
