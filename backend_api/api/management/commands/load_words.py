from django.core.management.base import BaseCommand, CommandError

from api.models import Word
from api.seed_utils import import_word_list


class Command(BaseCommand):
    help = "Import a one-word-per-line word list into the Words table."

    def add_arguments(self, parser):
        parser.add_argument("path", help="Path of the word list file.")
        parser.add_argument(
            "--replace",
            action="store_true",
            help="Delete existing words before importing.",
        )

    def handle(self, *args, **options):
        # PUBLIC_INTERFACE
        # This command is idempotent and safe to run multiple times.
        path = options["path"]
        try:
            with open(path, "r", encoding="utf-8") as handle:
                inserted = import_word_list(handle, replace=options["replace"])
        except (OSError, UnicodeDecodeError) as exc:
            raise CommandError(f"Unable to read word list {path!r}: {exc}") from exc

        total = Word.objects.count()
        if inserted == 0:
            self.stdout.write(self.style.WARNING(f"No new words imported. Words present: {total}."))
            return
        self.stdout.write(self.style.SUCCESS(f"Imported {inserted} words. Words present: {total}."))
