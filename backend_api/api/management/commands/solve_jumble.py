from django.apps import apps
from django.core.management.base import BaseCommand, CommandError

from api.puzzles import (
    DictionaryLoadError,
    InvalidInputError,
    JumbleEngine,
    load_dictionary,
)
from api.seed_utils import load_dictionary_from_db


class Command(BaseCommand):
    help = "Find every dictionary word that can be formed from the letters of a jumble."

    def add_arguments(self, parser):
        parser.add_argument("jumble", help="The word jumble to solve.")
        parser.add_argument(
            "--word-list",
            dest="word_list",
            help="Word list file to use instead of the configured JUMBLE_WORD_LIST.",
        )
        parser.add_argument(
            "--source",
            choices=["file", "db"],
            default="file",
            help="Read words from a word list file (default) or from the Words table. "
            "Cannot be combined with --word-list when set to db.",
        )

    def _dictionary(self, options):
        if options["source"] == "db":
            if options["word_list"]:
                raise CommandError("--word-list cannot be used with --source db.")
            return load_dictionary_from_db()
        if options["word_list"]:
            return load_dictionary(options["word_list"])
        dictionary = apps.get_app_config("api").dictionary
        if dictionary is None:
            raise CommandError("No word list configured. Set JUMBLE_WORD_LIST or pass --word-list.")
        return dictionary

    def handle(self, *args, **options):
        try:
            engine = JumbleEngine(self._dictionary(options))
        except DictionaryLoadError as exc:
            raise CommandError(str(exc)) from exc

        try:
            result = engine.solve(options["jumble"])
        except InvalidInputError as exc:
            raise CommandError(str(exc)) from exc

        for word in result.words:
            self.stdout.write(word)
        self.stdout.write(result.summary(), ending="\n\n")
