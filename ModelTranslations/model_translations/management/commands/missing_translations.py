"""
Команда для поиска записей без перевода на локаль.
"""

from django.apps import apps
from django.core.management.base import BaseCommand, CommandError

from model_translations.locales import resolve_locale
from model_translations.translator import get_options


class Command(BaseCommand):
    help = 'Lists records that have no translation for a locale'

    def add_arguments(self, parser):
        parser.add_argument('model', help='Model label, e.g. blog.Post')
        parser.add_argument(
            '--locale',
            default=None,
            help='Locale code (defaults to the active locale)'
        )

    def handle(self, *args, **options):
        try:
            model = apps.get_model(options['model'])
        except (LookupError, ValueError) as e:
            raise CommandError(f'Unknown model {options["model"]!r}: {e}')

        try:
            get_options(model)
        except LookupError:
            raise CommandError(f'{model._meta.label} has no translations')

        locale = resolve_locale(options['locale'])
        missing = model._default_manager.missing_translations(locale).order_by('pk')

        count = 0
        for record in missing:
            self.stdout.write(f'{record.pk}\t{record}')
            count += 1

        if count:
            self.stdout.write(
                self.style.WARNING(f'{count} {model._meta.label} record(s) missing {locale!r} translation')
            )
        else:
            self.stdout.write(
                self.style.SUCCESS(f'All {model._meta.label} records have {locale!r} translation')
            )
