"""
Translation schema binder.

Этот модуль связывает базовую модель с её моделью переводов:
1. Поиск модели переводов (<Model>Translation в том же приложении)
2. Поиск внешнего ключа на базовую модель
3. Определение переводимых атрибутов по соглашению об именах колонок
4. Установка свойств-прокси и обработчика post_save
"""

import logging
import re
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from django.apps import apps
from django.core.exceptions import FieldDoesNotExist, ImproperlyConfigured
from django.db import models
from django.db.models.signals import post_save

from .signals import flush_pending_translations

logger = logging.getLogger(__name__)

# Колонки, которые не являются переводимыми атрибутами
NON_TRANSLATABLE_COLUMN = re.compile(r'_id$|^id$|^locale$|_at$')

_registry: Dict[type, 'TranslationOptions'] = {}


@dataclass(frozen=True)
class TranslationOptions:
    """
    Описание связи базовой модели с моделью переводов.

    Attributes:
        model: Базовая модель
        translation_model: Модель строк переводов
        owner_field: Имя внешнего ключа модели переводов на базовую модель
        related_name: Имя обратной связи на базовой модели
        fields: Переводимые атрибуты в порядке объявления колонок
    """
    model: type
    translation_model: type
    owner_field: str
    related_name: str
    fields: Tuple[str, ...]

    @property
    def owner_attname(self) -> str:
        return self.translation_model._meta.get_field(self.owner_field).attname

    @property
    def related_query_name(self) -> str:
        return self.translation_model._meta.get_field(self.owner_field).related_query_name()

    def get_field(self, name):
        """Поле модели переводов, в котором хранится атрибут."""
        return self.translation_model._meta.get_field(name)


def get_translation_model(model):
    """
    Находит модель переводов для базовой модели.

    По умолчанию ищется <app_label>.<ModelName>Translation, атрибут
    translation_model базовой модели позволяет указать другую модель.

    Raises:
        LookupError: Модель переводов не найдена
    """
    declared = getattr(model, 'translation_model', None)
    if isinstance(declared, type) and issubclass(declared, models.Model):
        return declared
    label = declared or f'{model._meta.app_label}.{model.__name__}Translation'
    return apps.get_model(label)


def get_owner_field(model, translation_model):
    """Внешний ключ модели переводов, указывающий на базовую модель."""
    for field in translation_model._meta.concrete_fields:
        if field.many_to_one and field.related_model is model:
            return field
    raise ImproperlyConfigured(
        f'{translation_model._meta.label} has no ForeignKey to {model._meta.label}'
    )


def discover_fields(translation_model, owner_field) -> Tuple[str, ...]:
    """
    Определяет переводимые атрибуты по колонкам модели переводов.

    Исключаются первичный ключ, locale, колонки *_id и *_at.
    Внешние ключи (кроме ключа на владельца) доступны как переводимые
    ссылки под именем поля без суффикса _id.
    """
    attributes: List[str] = []
    references: List[str] = []
    for field in translation_model._meta.concrete_fields:
        if field.primary_key or field is owner_field:
            continue
        if field.many_to_one:
            references.append(field.name)
        elif not NON_TRANSLATABLE_COLUMN.search(field.column):
            attributes.append(field.name)
    return tuple(attributes + references)


def _translated_property(name):
    def getter(self):
        return self.get_translated(name)

    def setter(self, value):
        self.set_translated(name, value)

    return property(getter, setter, doc=f'Translated attribute {name!r}.')


def register(model) -> TranslationOptions:
    """
    Подключает переводы к базовой модели.

    Args:
        model: Конкретная модель-наследник TranslatableModel

    Returns:
        TranslationOptions: Зарегистрированное описание

    Raises:
        LookupError: Модель переводов не найдена
        ImproperlyConfigured: Нет внешнего ключа на базовую модель или
            объявлен атрибут, которого нет в модели переводов
    """
    if model in _registry:
        return _registry[model]

    translation_model = get_translation_model(model)
    owner_field = get_owner_field(model, translation_model)
    discovered = discover_fields(translation_model, owner_field)

    declared = model.__dict__.get('translated_fields')
    if declared:
        unknown = [name for name in declared if name not in discovered]
        if unknown:
            raise ImproperlyConfigured(
                f'{model._meta.label}.translated_fields names unknown columns '
                f'of {translation_model._meta.label}: {", ".join(unknown)}'
            )
        fields = tuple(declared)
    else:
        fields = discovered

    for name in fields:
        try:
            model._meta.get_field(name)
        except FieldDoesNotExist:
            pass
        else:
            raise ImproperlyConfigured(
                f'{model._meta.label}.{name} is both a model field and a translated attribute'
            )
        setattr(model, name, _translated_property(name))

    # Model.__init__ принимает только известные свойства, кэш имён нужно сбросить
    model._meta.__dict__.pop('_property_names', None)
    model.translated_fields = fields
    model.translation_model = translation_model

    options = TranslationOptions(
        model=model,
        translation_model=translation_model,
        owner_field=owner_field.name,
        related_name=owner_field.remote_field.get_accessor_name(),
        fields=fields,
    )
    _registry[model] = options

    post_save.connect(
        flush_pending_translations,
        sender=model,
        dispatch_uid=f'model_translations.flush.{model._meta.label_lower}',
    )
    logger.info(
        f"Registered translations for {model._meta.label} "
        f"via {translation_model._meta.label}: {', '.join(fields) or '-'}"
    )
    return options


def get_options(model) -> TranslationOptions:
    """
    Возвращает описание переводов модели (или её конкретной модели для proxy).

    Raises:
        LookupError: Модель не зарегистрирована
    """
    if not isinstance(model, type):
        model = model.__class__
    options = _registry.get(model) or _registry.get(model._meta.concrete_model)
    if options is not None:
        return options

    from .models import TranslatableModel

    # Первое обращение до ready() (например, из admin.py)
    if issubclass(model, TranslatableModel) and not model._meta.abstract:
        return register(model._meta.concrete_model)
    raise LookupError(f'{model._meta.label} is not registered for translations')


def is_registered(model) -> bool:
    try:
        get_options(model)
    except LookupError:
        return False
    return True


def registered_models() -> List[type]:
    return list(_registry)


def autodiscover(app_models: Optional[List[type]] = None):
    """
    Регистрирует все конкретные модели-наследники TranslatableModel.

    Вызывается из ModelTranslationsConfig.ready().
    """
    from .models import TranslatableModel

    for model in app_models if app_models is not None else apps.get_models():
        if not issubclass(model, TranslatableModel):
            continue
        if model._meta.abstract or model._meta.proxy:
            continue
        register(model)
