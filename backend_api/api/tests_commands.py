import os
import tempfile
from io import StringIO
from unittest import mock

from django.apps import apps
from django.core.management import call_command
from django.core.management.base import CommandError
from django.test import TestCase

from api.models import Word
from api.puzzles import build_dictionary


def write_wordlist(words) -> str:
    """Write a temporary word list file and return its path."""
    fd, path = tempfile.mkstemp(prefix="jumble_words_", suffix=".txt", text=True)
    os.close(fd)
    with open(path, "w", encoding="utf-8") as f:
        for w in words:
            f.write(w + "\n")
    return path


class SolveJumbleCommandTests(TestCase):
    def setUp(self):
        self.path = write_wordlist(["cat", "act", "tac", "a", "at"])
        self.addCleanup(os.remove, self.path)

    def solve(self, *args, **options):
        out = StringIO()
        call_command("solve_jumble", *args, stdout=out, **options)
        return out.getvalue()

    def test_prints_words_and_summary(self):
        output = self.solve("cat", word_list=self.path)
        self.assertEqual(
            output,
            "A\nAT\nCAT\nACT\nTAC\n"
            "5 valid words found out of a possible 15 set of words.\n\n",
        )

    def test_no_matches(self):
        output = self.solve("z", word_list=self.path)
        self.assertEqual(output, "0 valid words found out of a possible 1 set of words.\n\n")

    def test_uses_startup_dictionary(self):
        with mock.patch.object(apps.get_app_config("api"), "dictionary", build_dictionary(["at"])):
            output = self.solve("ta")
        self.assertTrue(output.startswith("AT\n"))

    def test_requires_a_dictionary(self):
        with mock.patch.object(apps.get_app_config("api"), "dictionary", None):
            with self.assertRaises(CommandError):
                self.solve("cat")

    def test_missing_argument_is_usage_error(self):
        with self.assertRaises(CommandError):
            self.solve(word_list=self.path)

    def test_extra_argument_is_usage_error(self):
        with self.assertRaises(CommandError):
            self.solve("cat", "dog", word_list=self.path)

    def test_empty_jumble_is_usage_error(self):
        with self.assertRaises(CommandError):
            self.solve("", word_list=self.path)

    def test_missing_word_list(self):
        with self.assertRaises(CommandError):
            self.solve("cat", word_list=self.path + ".missing")

    def test_database_source(self):
        Word.objects.create(text="TAC")
        output = self.solve("cat", source="db")
        self.assertEqual(output, "TAC\n1 valid words found out of a possible 15 set of words.\n\n")

    def test_empty_database_source(self):
        with self.assertRaises(CommandError):
            self.solve("cat", source="db")

    def test_database_source_rejects_word_list(self):
        Word.objects.create(text="tac")
        with self.assertRaises(CommandError):
            self.solve("cat", source="db", word_list=self.path)


class LoadWordsCommandTests(TestCase):
    def test_loads_words(self):
        path = write_wordlist(["Cat", "act", "cat"])
        self.addCleanup(os.remove, path)
        out = StringIO()
        call_command("load_words", path, stdout=out)
        self.assertIn("Imported 2 words", out.getvalue())
        self.assertEqual(Word.objects.count(), 2)

    def test_second_load_is_noop(self):
        path = write_wordlist(["cat"])
        self.addCleanup(os.remove, path)
        call_command("load_words", path, stdout=StringIO())
        out = StringIO()
        call_command("load_words", path, stdout=out)
        self.assertIn("No new words imported", out.getvalue())

    def test_missing_file(self):
        with self.assertRaises(CommandError):
            call_command("load_words", "/nonexistent/words.txt", stdout=StringIO())
