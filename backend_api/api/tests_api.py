from unittest import mock

from django.apps import apps
from django.test import override_settings
from django.urls import reverse
from rest_framework.test import APITestCase

from api.puzzles import build_dictionary


class JumbleApiTests(APITestCase):
    def setUp(self):
        dictionary = build_dictionary(["cat", "act", "tac", "a", "at"], source="test")
        patcher = mock.patch.object(apps.get_app_config("api"), "dictionary", dictionary)
        patcher.start()
        self.addCleanup(patcher.stop)

    def test_health(self):
        resp = self.client.get(reverse('Health'))
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), {"message": "Server is up!"})

    def test_solve_success(self):
        resp = self.client.post(reverse('solve-jumble'), {"jumble": "cat"}, format="json")
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(data["jumble"], "cat")
        self.assertEqual(data["words"], ["A", "AT", "CAT", "ACT", "TAC"])
        self.assertEqual(data["valid_count"], 5)
        self.assertEqual(data["total_candidates"], 15)

    def test_solve_keeps_repeats(self):
        resp = self.client.post(reverse('solve-jumble'), {"jumble": "aa"}, format="json")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["words"], ["A", "A"])
        self.assertEqual(resp.json()["total_candidates"], 4)

    def test_blank_jumble_rejected(self):
        resp = self.client.post(reverse('solve-jumble'), {"jumble": ""}, format="json")
        self.assertEqual(resp.status_code, 400)
        self.assertIn("jumble", resp.json())

    def test_missing_jumble_rejected(self):
        resp = self.client.post(reverse('solve-jumble'), {}, format="json")
        self.assertEqual(resp.status_code, 400)

    @override_settings(JUMBLE_MAX_LENGTH=3)
    def test_too_long_jumble_rejected(self):
        resp = self.client.post(reverse('solve-jumble'), {"jumble": "cats"}, format="json")
        self.assertEqual(resp.status_code, 400)
        self.assertIn("jumble", resp.json())

    def test_solve_without_dictionary(self):
        with mock.patch.object(apps.get_app_config("api"), "dictionary", None):
            resp = self.client.post(reverse('solve-jumble'), {"jumble": "cat"}, format="json")
        self.assertEqual(resp.status_code, 503)
        self.assertIn("error", resp.json())

    def test_dictionary_info(self):
        resp = self.client.get(reverse('dictionary-info'))
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), {"loaded": True, "word_count": 5, "source": "test"})

    def test_dictionary_info_when_not_loaded(self):
        with mock.patch.object(apps.get_app_config("api"), "dictionary", None):
            resp = self.client.get(reverse('dictionary-info'))
        self.assertEqual(resp.json(), {"loaded": False, "word_count": 0, "source": None})
