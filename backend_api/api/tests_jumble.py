from itertools import combinations, permutations
from math import comb, factorial

from django.test import SimpleTestCase

from api.puzzles import (
    InvalidInputError,
    JumbleEngine,
    build_dictionary,
    candidate_count,
    iter_candidates,
    iter_orderings,
    iter_selections,
)
from api.puzzles.jumble import _remove_at


class RecordingDictionary:
    """Wraps a dictionary and records every lookup."""

    def __init__(self, words):
        self._inner = build_dictionary(words)
        self.lookups = []

    def contains(self, word):
        self.lookups.append(word)
        return self._inner.contains(word)


class EnumerationTests(SimpleTestCase):
    def test_selections_follow_index_order(self):
        self.assertEqual(
            list(iter_selections(4, 2)),
            [(0, 1), (0, 2), (0, 3), (1, 2), (1, 3), (2, 3)],
        )

    def test_selections_match_combinations(self):
        for n in range(1, 7):
            for k in range(1, n + 1):
                self.assertEqual(list(iter_selections(n, k)), list(combinations(range(n), k)))

    def test_full_length_selection_is_identity(self):
        self.assertEqual(list(iter_selections(5, 5)), [(0, 1, 2, 3, 4)])

    def test_orderings_of_three(self):
        self.assertEqual(
            list(iter_orderings((0, 1, 2))),
            [(0, 1, 2), (0, 2, 1), (1, 0, 2), (1, 2, 0), (2, 0, 1), (2, 1, 0)],
        )

    def test_orderings_match_permutations(self):
        for n in range(1, 6):
            pool = tuple(range(10, 10 + n))
            self.assertEqual(list(iter_orderings(pool)), list(permutations(pool)))

    def test_remove_at_keeps_other_elements(self):
        self.assertEqual(_remove_at((4, 4, 7), 1), (4, 7))

    def test_remove_at_rejects_bad_index(self):
        with self.assertRaises(IndexError):
            _remove_at((1, 2), 2)
        with self.assertRaises(IndexError):
            _remove_at((1, 2), -1)

    def test_candidates_in_solve_order(self):
        self.assertEqual(
            list(iter_candidates("abc")),
            ["a", "b", "c", "ab", "ba", "ac", "ca", "bc", "cb",
             "abc", "acb", "bac", "bca", "cab", "cba"],
        )

    def test_iter_candidates_rejects_empty_immediately(self):
        with self.assertRaises(InvalidInputError):
            iter_candidates("")

    def test_candidate_count_closed_form(self):
        for n in range(1, 8):
            expected = sum(comb(n, k) * factorial(k) for k in range(1, n + 1))
            self.assertEqual(candidate_count(n), expected)
        self.assertEqual([candidate_count(n) for n in range(1, 6)], [1, 4, 15, 64, 325])


class JumbleEngineTests(SimpleTestCase):
    def setUp(self):
        self.dictionary = build_dictionary(["cat", "act", "tac", "a", "at"])
        self.engine = JumbleEngine(self.dictionary)

    def test_cat_scenario(self):
        result = self.engine.solve("cat")
        self.assertEqual(result.total_candidates, 15)
        self.assertEqual(result.words, ["A", "AT", "CAT", "ACT", "TAC"])

    def test_result_unpacks_as_pair(self):
        words, total = self.engine.solve("cat")
        self.assertEqual(total, 15)
        self.assertEqual(len(words), 5)

    def test_input_case_is_irrelevant(self):
        self.assertEqual(self.engine.solve("CaT").words, ["A", "AT", "CAT", "ACT", "TAC"])

    def test_sharp_s_is_not_expanded(self):
        result = JumbleEngine(build_dictionary(["straße"])).solve("strasse")
        self.assertEqual(result.words, [])

    def test_single_unknown_letter(self):
        result = self.engine.solve("z")
        self.assertEqual(result.total_candidates, 1)
        self.assertEqual(result.words, [])

    def test_single_known_letter_is_counted_and_matched(self):
        result = self.engine.solve("a")
        self.assertEqual(result.total_candidates, 1)
        self.assertEqual(result.words, ["A"])

    def test_repeated_letters_are_not_deduplicated(self):
        engine = JumbleEngine(build_dictionary(["aa"]))
        result = engine.solve("aa")
        self.assertEqual(result.total_candidates, 4)
        self.assertEqual(result.words, ["AA", "AA"])

    def test_same_word_from_different_positions(self):
        result = JumbleEngine(build_dictionary(["a"])).solve("aba")
        self.assertEqual(result.words, ["A", "A"])

    def test_total_matches_closed_form(self):
        for jumble in ["q", "ab", "tea", "stop", "plane", "lllll"]:
            result = self.engine.solve(jumble)
            self.assertEqual(result.total_candidates, candidate_count(len(jumble)))
            self.assertLessEqual(len(result.words), result.total_candidates)

    def test_words_are_upper_case_dictionary_members(self):
        dictionary = build_dictionary(["Tea", "eat", "ATE", "ta", "e"])
        result = JumbleEngine(dictionary).solve("tea")
        self.assertTrue(result.words)
        for word in result.words:
            self.assertEqual(word, word.upper())
            self.assertTrue(dictionary.contains(word))

    def test_solve_is_idempotent(self):
        first = self.engine.solve("tacat")
        second = self.engine.solve("tacat")
        self.assertEqual(first.words, second.words)
        self.assertEqual(first.total_candidates, second.total_candidates)

    def test_calls_do_not_share_state(self):
        self.engine.solve("cat")
        result = self.engine.solve("z")
        self.assertEqual(result.total_candidates, 1)
        self.assertEqual(result.words, [])

    def test_empty_input_fails_without_lookups(self):
        recorder = RecordingDictionary(["a"])
        engine = JumbleEngine(recorder)
        with self.assertRaises(InvalidInputError):
            engine.solve("")
        with self.assertRaises(InvalidInputError):
            engine.solve(None)
        self.assertEqual(recorder.lookups, [])

    def test_invalid_input_is_a_value_error(self):
        with self.assertRaises(ValueError):
            self.engine.solve("")

    def test_every_candidate_is_looked_up(self):
        recorder = RecordingDictionary(["at"])
        JumbleEngine(recorder).solve("cat")
        self.assertEqual(recorder.lookups, list(iter_candidates("cat")))

    def test_summary_line(self):
        result = self.engine.solve("cat")
        self.assertEqual(result.summary(), "5 valid words found out of a possible 15 set of words.")
