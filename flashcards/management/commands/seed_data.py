import json
import os

from django.core.management.base import BaseCommand, CommandError
from django.db import transaction

from scheduler.config import DEFAULT_EASE_FACTOR
from scheduler.data.models import Card, Folder
from scheduler.domain.cards import CardState
from scheduler.domain.logic import normalize_card
from scheduler.services.cards import CONTENT_FIELDS


class Command(BaseCommand):
    help = "Load built-in folders and cards from a JSON seed file"

    def add_arguments(self, parser):
        parser.add_argument(
            "--file", default="SEED_DATA.json",
            help="JSON file next to this command, or an absolute path",
        )
        parser.add_argument(
            "--reset", action="store_true", help="Delete all folders and cards first"
        )

    def handle(self, *args, **options):
        file_name = options.get("file") or "SEED_DATA.json"
        json_file_path = os.path.join(os.path.dirname(__file__), file_name)
        try:
            with open(json_file_path, encoding="utf-8") as json_file:
                data = json.load(json_file)
        except (OSError, ValueError) as e:
            raise CommandError(f"Error loading data from {file_name}: {e}") from e

        with transaction.atomic():
            if options.get("reset"):
                Card.objects.all().delete()
                Folder.objects.all().delete()
                self.stdout.write(self.style.SUCCESS("All existing folders and cards have been deleted"))

            folders, cards = 0, 0
            for entry in data.get("folders", []):
                folder, created = Folder.objects.get_or_create(
                    pk=entry["id"],
                    defaults={"name": entry["name"], "shuffle": entry.get("shuffle", False)},
                )
                folders += created
                for raw in entry.get("cards", []):
                    cards += self._seed_card(folder, raw)

        self.stdout.write(
            self.style.SUCCESS(f"Seeded {folders} folders and {cards} cards from {file_name}")
        )

    def _seed_card(self, folder, raw):
        if Card.objects.filter(pk=raw["id"]).exists():
            return 0
        # Persisted scheduling fields may come from older exports
        state = normalize_card(CardState(
            id=raw["id"],
            folder_id=folder.pk,
            next_review_time=raw.get("next_review_time", 0),
            interval=raw.get("interval", 0),
            repetition=raw.get("repetition", 0),
            ease_factor=raw.get("ease_factor", DEFAULT_EASE_FACTOR),
        ))
        Card.objects.create(
            id=state.id,
            folder=folder,
            next_review_time=state.next_review_time,
            interval=state.interval,
            repetition=state.repetition,
            ease_factor=state.ease_factor,
            **{k: raw[k] for k in CONTENT_FIELDS if k in raw},
        )
        return 1
