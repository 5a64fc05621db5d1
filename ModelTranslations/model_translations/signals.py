"""
Сигналы для сохранения отложенных правок переводов.

Обработчик подключается к post_save каждой зарегистрированной модели
в translator.register(), поэтому декоратор @receiver здесь не используется.
"""

import logging

logger = logging.getLogger(__name__)


def flush_pending_translations(sender, instance, created=False, raw=False, using=None, **kwargs):
    """
    Сохраняет буфер правок переводов после сохранения базовой записи.

    Args:
        sender: Модель, которая отправила сигнал
        instance: Экземпляр модели
        created: True если запись создана, False если обновлена
        raw: True при загрузке фикстур (переводы не трогаем)
        using: Алиас базы данных
        **kwargs: Дополнительные аргументы
    """
    if raw:
        return
    locale = getattr(instance, '_translation_save_locale', None)
    instance.update_translations(locale=locale, using=using)
