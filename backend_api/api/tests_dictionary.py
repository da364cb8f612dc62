import os
import tempfile
from unittest import mock

from django.apps import apps
from django.test import SimpleTestCase, TestCase, override_settings

from api.models import Word
from api.puzzles import DictionaryLoadError, build_dictionary, load_dictionary
from api.seed_utils import import_word_list, load_dictionary_from_db


def write_wordlist(lines) -> str:
    """Write a temporary word list file and return its path."""
    fd, path = tempfile.mkstemp(prefix="jumble_words_", suffix=".txt", text=True)
    os.close(fd)
    with open(path, "w", encoding="utf-8") as f:
        f.write("".join(lines))
    return path


class WordDictionaryTests(SimpleTestCase):
    def test_lookup_ignores_case(self):
        dictionary = build_dictionary(["Cat"])
        self.assertTrue(dictionary.contains("cat"))
        self.assertTrue(dictionary.contains("CAT"))
        self.assertTrue(dictionary.contains("Cat"))
        self.assertIn("cAt", dictionary)
        self.assertFalse(dictionary.contains("dog"))

    def test_duplicates_collapse(self):
        dictionary = build_dictionary(["cat\n", "CAT\n", "cat\r\n", "act\n"])
        self.assertEqual(len(dictionary), 2)

    def test_blank_lines_are_skipped(self):
        dictionary = build_dictionary(["\n", "at\n", "\r\n"])
        self.assertEqual(len(dictionary), 1)
        self.assertFalse(dictionary.contains(""))

    def test_non_strings_are_not_members(self):
        self.assertNotIn(42, build_dictionary(["42"]))

    def test_lookup_does_not_fold_sharp_s(self):
        dictionary = build_dictionary(["straße"])
        self.assertTrue(dictionary.contains("STRAßE"))
        self.assertFalse(dictionary.contains("strasse"))
        self.assertFalse(dictionary.contains("STRASSE"))


class LoadDictionaryTests(SimpleTestCase):
    def test_load_from_file(self):
        path = write_wordlist(["apple\n", "Pear\n", "apple\n"])
        self.addCleanup(os.remove, path)

        dictionary = load_dictionary(path)
        self.assertEqual(len(dictionary), 2)
        self.assertTrue(dictionary.contains("PEAR"))
        self.assertEqual(dictionary.source, path)

    def test_missing_file_raises(self):
        missing = os.path.join(tempfile.gettempdir(), "no_such_jumble_word_list.txt")
        with self.assertRaises(DictionaryLoadError):
            load_dictionary(missing)

    def test_empty_file_raises(self):
        path = write_wordlist(["\n", "\n"])
        self.addCleanup(os.remove, path)
        with self.assertRaises(DictionaryLoadError):
            load_dictionary(path)


class StartupDictionaryTests(SimpleTestCase):
    def setUp(self):
        self.config = apps.get_app_config("api")
        patcher = mock.patch.object(self.config, "dictionary", None)
        patcher.start()
        self.addCleanup(patcher.stop)

    def test_ready_loads_configured_word_list(self):
        path = write_wordlist(["cat\n", "act\n"])
        self.addCleanup(os.remove, path)
        with override_settings(JUMBLE_WORD_LIST=path):
            self.config.ready()
        self.assertIsNotNone(self.config.dictionary)
        self.assertEqual(len(self.config.dictionary), 2)
        self.assertEqual(self.config.dictionary.source, path)

    @override_settings(JUMBLE_WORD_LIST="/nonexistent/jumble_words.txt")
    def test_ready_fails_on_missing_word_list(self):
        with self.assertRaises(DictionaryLoadError):
            self.config.ready()
        self.assertIsNone(self.config.dictionary)

    @override_settings(JUMBLE_WORD_LIST=None)
    def test_ready_without_word_list(self):
        self.config.ready()
        self.assertIsNone(self.config.dictionary)


class DatabaseWordSourceTests(TestCase):
    def test_import_normalizes_and_deduplicates(self):
        inserted = import_word_list(["Cat\n", "cat\n", " act \n", "\n"])
        self.assertEqual(inserted, 2)
        self.assertEqual(sorted(Word.objects.values_list("text", flat=True)), ["act", "cat"])
        self.assertEqual(Word.objects.get(text="cat").length, 3)

    def test_import_is_idempotent(self):
        import_word_list(["cat\n"])
        self.assertEqual(import_word_list(["cat\n", "tac\n"]), 1)
        self.assertEqual(Word.objects.count(), 2)

    def test_import_replace(self):
        import_word_list(["cat\n"])
        import_word_list(["dog\n"], replace=True)
        self.assertEqual(list(Word.objects.values_list("text", flat=True)), ["dog"])

    def test_dictionary_from_db(self):
        import_word_list(["cat\n", "at\n"])
        dictionary = load_dictionary_from_db()
        self.assertEqual(len(dictionary), 2)
        self.assertTrue(dictionary.contains("AT"))
        self.assertEqual(dictionary.source, "database")

    def test_empty_table_raises(self):
        with self.assertRaises(DictionaryLoadError):
            load_dictionary_from_db()
