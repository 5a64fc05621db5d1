"""
Тесты связывания базовой модели с моделью переводов.
"""

from django.core.exceptions import ImproperlyConfigured
from django.db import models
from django.test import SimpleTestCase
from django.test.utils import isolate_apps

from blog.models import Editor, Post, PostTranslation
from model_translations import translator
from model_translations.models import TranslatableModel, TranslationModel
from model_translations.translator import (
    discover_fields,
    get_options,
    get_owner_field,
    get_translation_model,
    is_registered,
    register,
    registered_models,
)


class TranslatorTest(SimpleTestCase):
    """
    Тесты для translator.

    Тестирует:
    - Поиск модели переводов и внешнего ключа
    - Определение переводимых атрибутов по именам колонок
    - Реестр зарегистрированных моделей
    """

    def test_translated_fields(self):
        """Атрибуты идут в порядке колонок, ссылки - последними."""
        self.assertEqual(Post.translated_fields, ('title', 'text', 'editor'))

    def test_options(self):
        options = get_options(Post)
        self.assertIs(options.translation_model, PostTranslation)
        self.assertEqual(options.owner_field, 'post')
        self.assertEqual(options.owner_attname, 'post_id')
        self.assertEqual(options.related_name, 'model_translations')
        self.assertEqual(options.related_query_name, 'model_translations')
        self.assertIs(get_options(Post()), options)

    def test_discover_fields_skips_service_columns(self):
        owner = PostTranslation._meta.get_field('post')
        fields = discover_fields(PostTranslation, owner)
        for name in ('id', 'locale', 'created_at', 'updated_at', 'post', 'post_id', 'editor_id'):
            self.assertNotIn(name, fields)

    def test_translation_model_lookup(self):
        self.assertIs(get_translation_model(Post), PostTranslation)
        with self.assertRaises(LookupError):
            get_translation_model(Editor)

    def test_owner_field(self):
        self.assertEqual(get_owner_field(Post, PostTranslation).name, 'post')
        with self.assertRaises(ImproperlyConfigured):
            get_owner_field(Post, Editor)

    def test_registry(self):
        self.assertTrue(is_registered(Post))
        self.assertFalse(is_registered(Editor))
        self.assertIn(Post, registered_models())
        with self.assertRaises(LookupError):
            get_options(Editor)

    def test_properties_installed(self):
        self.assertIsInstance(Post.__dict__['title'], property)
        self.assertIn('title', Post._meta._property_names)

    def _translation_model(self, owner, name):
        """Модель переводов с колонками headline и body для изолированной модели."""
        attrs = {
            '__module__': __name__,
            'owner': models.ForeignKey(owner, on_delete=models.CASCADE, related_name='model_translations'),
            'headline': models.CharField(max_length=100, null=True),
            'body': models.TextField(null=True, blank=True),
            'Meta': type('Meta', (TranslationModel.Meta,), {'app_label': 'blog'}),
        }
        return type(name, (TranslationModel,), attrs)

    @isolate_apps('blog')
    def test_declared_fields_narrow_discovered(self):
        """Явный translated_fields сужает набор переводимых атрибутов."""
        class Story(TranslatableModel):
            translated_fields = ('headline',)

            class Meta:
                app_label = 'blog'

        Story.translation_model = self._translation_model(Story, 'StoryTranslation')
        self.addCleanup(translator._registry.pop, Story, None)

        options = register(Story)
        self.assertEqual(options.fields, ('headline',))
        self.assertEqual(Story.translated_fields, ('headline',))
        self.assertIsInstance(Story.__dict__['headline'], property)
        self.assertFalse(hasattr(Story, 'body'))

    @isolate_apps('blog')
    def test_declared_fields_unknown_column(self):
        class Article(TranslatableModel):
            translated_fields = ('headline', 'nope')

            class Meta:
                app_label = 'blog'

        Article.translation_model = self._translation_model(Article, 'ArticleTranslation')
        self.addCleanup(translator._registry.pop, Article, None)

        with self.assertRaisesMessage(ImproperlyConfigured, 'nope'):
            register(Article)

    @isolate_apps('blog')
    def test_clash_with_model_field(self):
        """Колонка перевода не может совпадать с полем базовой модели."""
        class Page(TranslatableModel):
            headline = models.CharField(max_length=100)

            class Meta:
                app_label = 'blog'

        Page.translation_model = self._translation_model(Page, 'PageTranslation')
        self.addCleanup(translator._registry.pop, Page, None)

        with self.assertRaisesMessage(ImproperlyConfigured, 'both a model field and a translated attribute'):
            register(Page)
