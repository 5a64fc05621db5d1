"""
Blog models.

Этот модуль содержит модели для:
1. Редакторов
2. Записей блога с переводимыми атрибутами
3. Строк переводов записей
"""

from django.db import models
from django.utils.translation import gettext_lazy as _

from model_translations.models import TranslatableModel, TranslationModel
from model_translations.validators import UniqueTranslation


class Editor(models.Model):
    """Редактор, ответственный за перевод записи."""
    name = models.CharField(
        _('Name'),
        max_length=100
    )

    class Meta:
        verbose_name = _('Editor')
        verbose_name_plural = _('Editors')
        ordering = ['name']

    def __str__(self):
        return self.name


class Post(TranslatableModel):
    """
    Запись блога.

    Заголовок, текст и редактор хранятся в PostTranslation
    отдельно для каждой локали.
    """
    not_translated = models.CharField(
        _('Not Translated'),
        max_length=255,
        null=True,
        blank=True,
        help_text=_('Value shared by all locales')
    )
    created_at = models.DateTimeField(
        _('Created At'),
        auto_now_add=True
    )
    updated_at = models.DateTimeField(
        _('Updated At'),
        auto_now=True
    )

    translation_unique = [
        UniqueTranslation('title', 'not_translated'),
    ]

    class Meta:
        verbose_name = _('Post')
        verbose_name_plural = _('Posts')

    def __str__(self):
        return self.title or f'Post #{self.pk}'


class PostTranslation(TranslationModel):
    """Заголовок, текст и редактор записи на одной локали."""
    post = models.ForeignKey(
        Post,
        on_delete=models.CASCADE,
        related_name='model_translations',
        verbose_name=_('Post')
    )
    title = models.CharField(
        _('Title'),
        max_length=255,
        null=True
    )
    text = models.TextField(
        _('Text'),
        null=True,
        blank=True
    )
    editor = models.ForeignKey(
        Editor,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='post_translations',
        verbose_name=_('Editor')
    )

    class Meta(TranslationModel.Meta):
        verbose_name = _('Post Translation')
        verbose_name_plural = _('Post Translations')
        constraints = [
            models.UniqueConstraint(fields=['post', 'locale'], name='unique_post_translation_locale'),
        ]
