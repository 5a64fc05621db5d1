"""
Административный интерфейс для приложения blog.
"""

from django.contrib import admin

from model_translations.admin import translation_inline
from .models import Editor, Post


@admin.register(Editor)
class EditorAdmin(admin.ModelAdmin):
    list_display = ['name']
    search_fields = ['name']


@admin.register(Post)
class PostAdmin(admin.ModelAdmin):
    """
    Записи блога с инлайном переводов.
    """
    list_display = ['id', '__str__', 'not_translated', 'created_at']
    search_fields = ['not_translated', 'model_translations__title']
    readonly_fields = ['created_at', 'updated_at']
    inlines = [translation_inline(Post)]
