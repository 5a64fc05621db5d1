"""
Abstract models for per-locale field translations.

Этот модуль содержит:
1. TranslationModel - базовую модель строки перевода (одна строка на запись и локаль)
2. TranslatableModel - базовую модель записи с переводимыми атрибутами
3. TranslatableQuerySet/TranslatableManager - запросы по переводам

Запись на переводимый атрибут не пишет в базу сразу: значение попадает
в буфер правок экземпляра и сохраняется в строку перевода активной
локали после сохранения записи (post_save).
"""

import logging
from typing import Dict, List

from django.core.exceptions import ValidationError
from django.db import IntegrityError, models, router, transaction
from django.db.models import prefetch_related_objects
from django.utils.translation import gettext_lazy as _

from .exceptions import TranslationSaveError
from .locales import fallback_chain, fallback_to_any, resolve_locale
from .translator import get_options

logger = logging.getLogger(__name__)


class TranslationModel(models.Model):
    """
    Строка перевода: значения переводимых атрибутов записи для одной локали.

    Конкретная модель добавляет внешний ключ на базовую модель
    (on_delete=CASCADE) и по колонке на каждый переводимый атрибут.
    """
    locale = models.CharField(
        _('Locale'),
        max_length=10,
        db_index=True,
        help_text=_('Locale code of this translation, e.g. en or sv')
    )
    created_at = models.DateTimeField(
        _('Created At'),
        auto_now_add=True
    )
    updated_at = models.DateTimeField(
        _('Updated At'),
        auto_now=True
    )

    class Meta:
        abstract = True
        ordering = ['-created_at', '-pk']

    def __str__(self):
        return f'{self.locale}'


class TranslatableQuerySet(models.QuerySet):
    """QuerySet для моделей с переводами."""

    def missing_translations(self, locale=None):
        """
        Записи, у которых нет строки перевода для локали.

        Args:
            locale: Код локали (None - активная)

        Returns:
            QuerySet: Записи без перевода, включая записи без переводов вообще
        """
        options = get_options(self.model)
        translated = options.translation_model._default_manager.filter(
            locale=resolve_locale(locale)
        ).values(options.owner_attname)
        return self.exclude(pk__in=translated)

    def with_translations(self):
        """Загружает строки переводов одним дополнительным запросом."""
        return self.prefetch_related(get_options(self.model).related_name)


class TranslatableManager(models.Manager.from_queryset(TranslatableQuerySet)):
    pass


class TranslatableModel(models.Model):
    """
    Базовая модель записи с переводимыми атрибутами.

    Особенности:
    - Переводимые атрибуты определяются по колонкам модели <Model>Translation
    - Чтение: буфер правок, затем строка активной локали, локали по умолчанию,
      затем первая строка
    - Запись: только в буфер правок, сохранение при save()
    - Проверка обязательности и уникальности переводимых атрибутов
    """
    # "app_label.ModelName" модели переводов, если имя не <Model>Translation
    translation_model = None
    # Заполняется при регистрации; можно сузить явным списком
    translated_fields = ()
    # Правила UniqueTranslation, проверяемые в validate_unique()
    translation_unique = ()

    objects = TranslatableManager()

    class Meta:
        abstract = True

    @property
    def translated_attributes(self) -> Dict[str, object]:
        """Буфер несохранённых правок переводимых атрибутов."""
        try:
            return self._translated_attributes
        except AttributeError:
            self._translated_attributes = {}
            return self._translated_attributes

    def __getstate__(self):
        # copy.copy()/pickle не должны делить буфер правок между экземплярами
        state = super().__getstate__()
        if '_translated_attributes' in state:
            state['_translated_attributes'] = dict(state['_translated_attributes'])
        return state

    def _check_translated(self, name):
        if name not in get_options(self).fields:
            raise AttributeError(f'{self._meta.label} has no translated attribute {name!r}')

    def _loaded_translations(self) -> list:
        """Строки переводов записи, загружаются один раз на экземпляр."""
        if self.pk is None:
            return []
        related_name = get_options(self).related_name
        cache = getattr(self, '_prefetched_objects_cache', {})
        if related_name not in cache:
            prefetch_related_objects([self], related_name)
        return list(getattr(self, related_name).all())

    def _forget_translations(self):
        related_name = get_options(self).related_name
        getattr(self, '_prefetched_objects_cache', {}).pop(related_name, None)

    def translation_for(self, locale=None):
        """Загруженная строка перевода для локали или None."""
        locale = resolve_locale(locale)
        for translation in self._loaded_translations():
            if translation.locale == locale:
                return translation
        return None

    def resolve_translation(self, locale=None):
        """
        Выбирает строку перевода для чтения.

        Порядок: запрошенная локаль, локаль по умолчанию, первая строка
        (самая новая). Если строк нет, возвращает None.
        """
        translations = self._loaded_translations()
        for code in fallback_chain(locale):
            for translation in translations:
                if translation.locale == code:
                    return translation
        if translations and fallback_to_any():
            return translations[0]
        return None

    def get_translated(self, name, locale=None):
        """
        Значение переводимого атрибута.

        Несохранённая правка возвращается независимо от локали. Если в
        выбранной строке значение пустое, оно и возвращается, без перехода
        к следующей локали.
        """
        self._check_translated(name)
        pending = self.translated_attributes
        if name in pending:
            return pending[name]
        if self._state.adding or self.pk is None:
            return None
        translation = self.resolve_translation(locale)
        if translation is None:
            return None
        return getattr(translation, name)

    def set_translated(self, name, value):
        self._check_translated(name)
        self.translated_attributes[name] = value

    def translated_locales(self) -> List[str]:
        """Коды локалей строк перевода, от старых к новым."""
        return [translation.locale for translation in reversed(self._loaded_translations())]

    def update_translations(self, locale=None, using=None):
        """
        Сохраняет буфер правок в строку перевода локали.

        Строка ищется по локали или создаётся. Значения из буфера
        перекрывают значения строки. Буфер очищается только после
        успешного сохранения.

        Args:
            locale: Локаль строки (None - активная на момент вызова)
            using: Алиас базы данных

        Returns:
            Строка перевода или None, если буфер пуст

        Raises:
            TranslationSaveError: Строка не прошла валидацию или не сохранилась
        """
        pending = self.translated_attributes
        if not pending:
            return None

        options = get_options(self)
        locale = resolve_locale(locale)
        using = using or router.db_for_write(options.translation_model, instance=self)

        translation = options.translation_model._default_manager.db_manager(using).filter(
            **{options.owner_field: self, 'locale': locale}
        ).first()
        if translation is None:
            translation = options.translation_model(**{options.owner_field: self, 'locale': locale})

        for name, value in pending.items():
            setattr(translation, name, value)

        untouched = [name for name in options.fields if name not in pending]
        try:
            translation.full_clean(exclude=untouched)
            translation.save(using=using)
        except (ValidationError, IntegrityError) as e:
            logger.error(f"Failed to save {locale!r} translation for {self._meta.label} pk={self.pk}: {e}")
            raise TranslationSaveError(self, locale) from e

        pending.clear()
        self._forget_translations()
        logger.debug(f"Saved {locale!r} translation for {self._meta.label} pk={self.pk}")
        return translation

    def save(self, *args, locale=None, **kwargs):
        """
        Сохраняет запись и буфер правок переводов в одной транзакции.

        Args:
            locale: Локаль для буфера правок (None - активная на момент сохранения)
        """
        using = kwargs.get('using') or router.db_for_write(self.__class__, instance=self)
        update_fields = kwargs.get('update_fields')
        if update_fields is not None:
            translated = set(get_options(self).fields)
            kwargs['update_fields'] = [name for name in update_fields if name not in translated]

        if update_fields and not kwargs['update_fields'] and self.pk is None:
            raise ValueError('Cannot force an update in save() with no primary key.')

        self._translation_save_locale = locale
        try:
            with transaction.atomic(using=using):
                if update_fields is not None and not kwargs['update_fields']:
                    # Django не вызывает post_save для пустого update_fields
                    self.update_translations(locale=locale, using=using)
                else:
                    super().save(*args, **kwargs)
        finally:
            self._translation_save_locale = None

    def refresh_from_db(self, *args, **kwargs):
        super().refresh_from_db(*args, **kwargs)
        self._forget_translations()

    def clean_fields(self, exclude=None):
        """Проверяет обычные поля и обязательные переводимые атрибуты."""
        errors = {}
        try:
            super().clean_fields(exclude=exclude)
        except ValidationError as e:
            errors = e.update_error_dict(errors)

        options = get_options(self)
        for name in options.fields:
            if exclude and name in exclude:
                continue
            field = options.get_field(name)
            if field.blank:
                continue
            if getattr(self, name) in field.empty_values:
                errors.setdefault(name, []).append(
                    ValidationError(field.error_messages['blank'], code='blank')
                )

        if errors:
            raise ValidationError(errors)

    def validate_unique(self, exclude=None):
        """Стандартная проверка уникальности и правила translation_unique."""
        errors = {}
        try:
            super().validate_unique(exclude=exclude)
        except ValidationError as e:
            errors = e.update_error_dict(errors)

        for rule in self.translation_unique:
            for name, messages in rule.validate(self, exclude=exclude).items():
                errors.setdefault(name, []).extend(messages)

        if errors:
            raise ValidationError(errors)

    def is_valid(self, exclude=None) -> bool:
        """
        Запускает full_clean() и сохраняет ошибки в errors вместо исключения.

        Returns:
            bool: True если ошибок нет
        """
        try:
            self.full_clean(exclude=exclude)
        except ValidationError as e:
            self._validation_errors = e.message_dict
            return False
        self._validation_errors = {}
        return True

    @property
    def errors(self) -> Dict[str, List[str]]:
        return getattr(self, '_validation_errors', {})
