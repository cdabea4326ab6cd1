import json

import pytest
from django.core.management import CommandError, call_command
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

from scheduler.data.models import Card, Folder


@pytest.fixture
def seed_file(tmp_path):
    """Seed file outside the command directory, passed as an absolute path."""
    data = {
        "folders": [
            {
                "id": "letters",
                "name": "Letters",
                "shuffle": True,
                "cards": [
                    {"id": "l1", "front_content": "ก", "back_content": "gaw"},
                    {"id": "l2", "front_content": "ข", "interval": -4, "ease_factor": 0.9,
                     "repetition": 2, "next_review_time": 5},
                ],
            }
        ]
    }
    path = tmp_path / "seed.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


@pytest.mark.django_db
class TestSeedCommand:
    def test_loads_bundled_seed_data(self):
        call_command("seed_data")

        alphabet = Folder.objects.get(pk="thai_alphabet_folder")
        assert alphabet.shuffle is True
        assert Folder.objects.get(pk="default").shuffle is False
        assert alphabet.cards.count() > 0
        assert not Card.objects.exclude(next_review_time=0).exists()

    def test_is_idempotent(self):
        call_command("seed_data")
        total = Card.objects.count()
        Card.objects.filter(folder_id="thai_alphabet_folder").update(repetition=3)

        call_command("seed_data")

        assert Card.objects.count() == total
        assert not Card.objects.filter(folder_id="thai_alphabet_folder", repetition=0).exists()

    def test_normalizes_persisted_scheduling_fields(self, seed_file):
        # Absolute paths are accepted from the command line only
        call_command("seed_data", file=seed_file)

        card = Card.objects.get(pk="l2")
        assert (card.interval, card.ease_factor, card.repetition, card.next_review_time) == (0, 1.3, 2, 5)
        assert Card.objects.get(pk="l1").ease_factor == 2.5

    def test_reset_wipes_existing_data(self, seed_file):
        call_command("seed_data")
        call_command("seed_data", file=seed_file, reset=True)

        assert list(Folder.objects.values_list("id", flat=True)) == ["letters"]
        assert Card.objects.count() == 2

    def test_missing_file_raises(self):
        with pytest.raises(CommandError):
            call_command("seed_data", file="does-not-exist.json")


@pytest.mark.django_db
class TestSeedEndpoint:
    def setup_method(self):
        self.client = APIClient()
        self.url = reverse("seed")

    def test_seed_endpoint(self):
        response = self.client.post(self.url, {}, format="json")

        assert response.status_code == status.HTTP_200_OK
        assert Folder.objects.filter(pk="basic_thai_1_folder").exists()

    def test_seed_endpoint_bad_file(self):
        response = self.client.post(self.url, {"file": "nope.json"}, format="json")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "error" in response.data

    def test_seed_endpoint_reset_false_keeps_data(self):
        folder = Folder.objects.create(id="mine", name="Mine")
        Card.objects.create(id="keep", folder=folder)

        response = self.client.post(self.url, {"reset": "false"})

        assert response.status_code == status.HTTP_200_OK
        assert Card.objects.filter(pk="keep").exists()

    def test_seed_endpoint_reset_true_wipes_data(self):
        folder = Folder.objects.create(id="mine", name="Mine")
        Card.objects.create(id="gone", folder=folder)

        response = self.client.post(self.url, {"reset": "true"})

        assert response.status_code == status.HTTP_200_OK
        assert not Folder.objects.filter(pk="mine").exists()

    @pytest.mark.parametrize("file_name", ["/etc/passwd", "../SEED_DATA.json", "sub/seed.json", ".."])
    def test_seed_endpoint_rejects_paths(self, file_name, seed_file):
        for name in (file_name, seed_file):
            response = self.client.post(self.url, {"file": name, "reset": True}, format="json")

            assert response.status_code == status.HTTP_400_BAD_REQUEST
            assert "file" in response.data
        assert not Folder.objects.exists()
