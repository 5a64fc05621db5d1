"""
Scoped uniqueness validation for translated and regular attributes.

Проверяемый атрибут может храниться как в таблице базовой модели,
так и в таблице переводов. Для переводимых атрибутов поиск ограничен
строками активной локали: одинаковый текст в разных локалях допустим.
"""

import logging
from typing import Dict, List

from django.core.exceptions import FieldDoesNotExist, ValidationError
from django.db import models
from django.db.models.functions import Lower

from .locales import resolve_locale
from .translator import get_options, is_registered

logger = logging.getLogger(__name__)

LOWER_VALUE_ALIAS = 'unique_translation_lower_value'


def _is_text(field) -> bool:
    return isinstance(field, (models.CharField, models.TextField))


def _column_value(field, value):
    """Для внешних ключей сравнение идёт по attname и первичному ключу."""
    if field.many_to_one:
        return field.attname, getattr(value, 'pk', value)
    return field.name, value


class UniqueTranslation:
    """
    Правило уникальности для одного или нескольких атрибутов.

    Args:
        *fields: Имена атрибутов (переводимых или обычных)
        case_sensitive: False - текстовые колонки сравниваются через LOWER()
        scope: Атрибуты, значения которых должны совпадать (AND)
        message: Собственное сообщение об ошибке
    """

    def __init__(self, *fields, case_sensitive=True, scope=(), message=None):
        if not fields:
            raise ValueError('UniqueTranslation requires at least one field name')
        self.fields = tuple(fields)
        self.case_sensitive = case_sensitive
        self.scope = (scope,) if isinstance(scope, str) else tuple(scope)
        self.message = message

    def __repr__(self):
        return (
            f'<UniqueTranslation fields={self.fields!r} '
            f'case_sensitive={self.case_sensitive} scope={self.scope!r}>'
        )

    def validate(self, record, locale=None, exclude=None) -> Dict[str, List[ValidationError]]:
        """
        Проверяет запись и собирает ошибки по атрибутам.

        Args:
            record: Проверяемый экземпляр модели
            locale: Локаль для переводимых атрибутов (None - активная)
            exclude: Атрибуты, которые не нужно проверять

        Returns:
            dict: {имя атрибута: [ValidationError]}, пустой если дублей нет
        """
        errors = {}
        for name in self.fields:
            if exclude and name in exclude:
                continue
            value = getattr(record, name)
            field = self._lookup_field(record, name)
            if self._is_taken(record, name, field, value, locale):
                errors.setdefault(name, []).append(self._error(record, field, value))
        return errors

    def _translated(self, record, name) -> bool:
        return is_registered(record.__class__) and name in get_options(record).fields

    def _lookup_field(self, record, name):
        if self._translated(record, name):
            return get_options(record).get_field(name)
        return record._meta.get_field(name)

    def _is_taken(self, record, name, field, value, locale) -> bool:
        translated = self._translated(record, name)
        conditions = {}
        prefix = ''

        if translated:
            options = get_options(record)
            queryset = options.translation_model._default_manager.all()
            conditions['locale'] = resolve_locale(locale)
        else:
            queryset = record._meta.concrete_model._default_manager.all()

        column, value = _column_value(field, value)
        if value is None:
            conditions[f'{column}__isnull'] = True
        elif _is_text(field):
            value = str(value)
            if field.max_length:
                value = value[:field.max_length]
            if self.case_sensitive:
                conditions[column] = value
            else:
                queryset = queryset.alias(**{LOWER_VALUE_ALIAS: Lower(column)})
                conditions[LOWER_VALUE_ALIAS] = value.lower()
        else:
            conditions[column] = value

        if translated:
            prefix = f'{options.owner_field}__'
        for item in self.scope:
            conditions.update(self._scope_condition(record, item, translated, prefix, locale))

        queryset = queryset.filter(**conditions)

        if not record._state.adding and record.pk is not None:
            if translated:
                queryset = queryset.exclude(**{options.owner_attname: record.pk})
            else:
                queryset = queryset.exclude(pk=record.pk)

        return queryset.exists()

    def _scope_condition(self, record, item, translated, prefix, locale):
        """
        Условие равенства для одного атрибута области.

        Условия области независимы друг от друга, порядок не важен.
        """
        if self._translated(record, item):
            field = get_options(record).get_field(item)
            column, scope_value = _column_value(field, getattr(record, item))
            if translated:
                path = column
                extra = {}
            else:
                related = get_options(record).related_query_name
                path = f'{related}__{column}'
                extra = {f'{related}__locale': resolve_locale(locale)}
        else:
            try:
                field = record._meta.get_field(item)
            except FieldDoesNotExist:
                raise ValueError(f'Unknown scope attribute {item!r} for {record._meta.label}')
            column, scope_value = _column_value(field, getattr(record, item))
            path = f'{prefix}{column}'
            extra = {}

        if scope_value is None:
            extra[f'{path}__isnull'] = True
        else:
            extra[path] = scope_value
        return extra

    def _error(self, record, field, value):
        message = self.message or field.error_messages['unique']
        return ValidationError(
            message,
            code='unique',
            params={
                'model': record,
                'model_class': record.__class__,
                'model_name': record._meta.verbose_name,
                'field_label': field.verbose_name,
                'value': value,
            },
        )


def validates_uniqueness_translation_of(*fields, **options):
    """Короткая запись для UniqueTranslation(*fields, **options)."""
    return UniqueTranslation(*fields, **options)
