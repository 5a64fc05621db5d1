"""
Тесты чтения переводимых атрибутов.

Этот модуль содержит тесты для:
1. Приоритета буфера правок
2. Выбора строки перевода (активная локаль, локаль по умолчанию, первая строка)
3. Переводимых ссылок на другие модели
"""

from django.test import TestCase, override_settings
from django.utils import translation

from blog.models import Editor, Post, PostTranslation


class TranslatedAttributeReadTest(TestCase):
    """
    Тесты для чтения переводимых атрибутов Post.
    """

    def setUp(self):
        """Подготовка тестовых данных."""
        translation.activate('en')
        self.addCleanup(translation.deactivate)
        self.post = Post.objects.create(
            title='English title',
            text='Text',
            not_translated='Some Text'
        )

    def test_round_trip_after_reload(self):
        """Сохранённый перевод читается после перезагрузки записи."""
        translation.activate('sv')
        post = Post.objects.get(pk=self.post.pk)
        post.title = 'Svensk titel'
        post.save()

        self.assertEqual(Post.objects.get(pk=self.post.pk).title, 'Svensk titel')
        translation.activate('en')
        self.assertEqual(Post.objects.get(pk=self.post.pk).title, 'English title')

    def test_fallback_to_default_locale(self):
        """Без перевода на активную локаль используется локаль по умолчанию."""
        translation.activate('sv')
        self.assertEqual(Post.objects.get(pk=self.post.pk).title, 'English title')

    @override_settings(MODEL_TRANSLATIONS_DEFAULT_LOCALE='es')
    def test_fallback_to_first_translation(self):
        """Без перевода на активную и основную локаль берётся первая строка."""
        translation.activate('sv')
        self.assertEqual(Post.objects.get(pk=self.post.pk).title, 'English title')

    @override_settings(MODEL_TRANSLATIONS_DEFAULT_LOCALE='es', MODEL_TRANSLATIONS_FALLBACK_TO_ANY=False)
    def test_fallback_to_first_translation_disabled(self):
        translation.activate('sv')
        self.assertIsNone(Post.objects.get(pk=self.post.pk).title)

    def test_pending_edit_survives_locale_switch(self):
        """Временное переключение локали не сбрасывает несохранённые правки."""
        translation.activate('sv')
        post = Post.objects.get(pk=self.post.pk)
        post.text = 'Svensk text'
        post.title
        translation.activate('en')
        self.assertEqual(post.text, 'Svensk text')

    def test_pending_none_is_returned(self):
        post = Post.objects.get(pk=self.post.pk)
        post.text = None
        self.assertIsNone(post.text)

    def test_new_record_without_translations(self):
        """Новая запись без правок возвращает None."""
        post = Post()
        self.assertIsNone(post.title)
        self.assertIsNone(post.text)
        self.assertIsNone(post.editor)

    def test_constructor_accepts_translated_attributes(self):
        post = Post(title='Draft', not_translated='draft')
        self.assertEqual(post.title, 'Draft')
        self.assertEqual(post.translated_attributes, {'title': 'Draft'})

    def test_empty_value_does_not_fall_back(self):
        """Пустое значение в строке локали не ищется в других локалях."""
        translation.activate('sv')
        post = Post.objects.get(pk=self.post.pk)
        post.title = 'Svensk titel'
        post.save()

        post = Post.objects.get(pk=self.post.pk)
        self.assertIsNone(post.text)
        translation.activate('en')
        self.assertEqual(post.text, 'Text')

    def test_explicit_locale(self):
        """Локаль можно передать явно, не меняя активную."""
        post = Post.objects.get(pk=self.post.pk)
        post.set_translated('title', 'Svensk titel')
        post.save(locale='sv')

        post = Post.objects.get(pk=self.post.pk)
        self.assertEqual(translation.get_language(), 'en')
        self.assertEqual(post.get_translated('title', locale='sv'), 'Svensk titel')
        self.assertEqual(post.get_translated('title', locale='en'), 'English title')
        self.assertEqual(post.get_translated('title', locale='es'), 'English title')
        self.assertEqual(post.translation_for('sv').title, 'Svensk titel')
        self.assertIsNone(post.translation_for('es'))

    def test_translated_reference(self):
        """Внешние ключи модели переводов доступны как переводимые ссылки."""
        editor = Editor.objects.create(name='Anna')
        translation.activate('sv')
        post = Post.objects.get(pk=self.post.pk)
        post.title = 'Svensk titel'
        post.editor = editor
        post.save()

        post = Post.objects.get(pk=self.post.pk)
        self.assertEqual(post.editor, editor)
        translation.activate('en')
        self.assertIsNone(post.editor)

    def test_unknown_attribute(self):
        with self.assertRaises(AttributeError):
            self.post.get_translated('not_translated')
        with self.assertRaises(AttributeError):
            self.post.set_translated('subtitle', 'x')

    def test_prefetched_translations_are_reused(self):
        """Строки переводов из prefetch не загружаются повторно."""
        with self.assertNumQueries(2):
            posts = list(Post.objects.with_translations())
            self.assertEqual([post.title for post in posts], ['English title'])
            self.assertEqual(posts[0].text, 'Text')

    def test_refresh_from_db_reloads_translations(self):
        post = Post.objects.get(pk=self.post.pk)
        self.assertEqual(post.title, 'English title')
        PostTranslation.objects.filter(post=post, locale='en').update(title='Changed')

        self.assertEqual(post.title, 'English title')
        post.refresh_from_db()
        self.assertEqual(post.title, 'Changed')
