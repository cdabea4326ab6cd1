from django.db import transaction
from django.shortcuts import get_object_or_404

from ..domain.cards import CardState
from .models import Card, Folder, ReviewLog

SCHEDULING_FIELDS = ["next_review_time", "interval", "repetition", "ease_factor"]


def to_state(card):
    return CardState(
        id=card.id,
        folder_id=card.folder_id,
        next_review_time=card.next_review_time,
        interval=card.interval,
        repetition=card.repetition,
        ease_factor=card.ease_factor,
    )


def apply_state(card, state):
    for field in SCHEDULING_FIELDS:
        setattr(card, field, getattr(state, field))
    card.save(update_fields=SCHEDULING_FIELDS)
    return card


def get_folder(folder_id):
    return get_object_or_404(Folder, pk=folder_id)


def folder_card_states(folder_id):
    return [to_state(c) for c in Card.objects.filter(folder_id=folder_id)]


def get_card_for_update(card_id):
    """
    Fetch a card row and lock it for update to avoid lost writes.
    Must be called inside ``transaction.atomic``.
    """
    return get_object_or_404(Card.objects.select_for_update(), pk=card_id)


def log_review(state, rating):
    return ReviewLog.objects.create(
        card_id=state.id,
        folder_id=state.folder_id,
        rating=rating.value,
        interval=state.interval,
        repetition=state.repetition,
        ease_factor=state.ease_factor,
        next_review_time=state.next_review_time,
    )


class DjangoCardStore:
    """Card sink backed by the ORM. Each rating is one transaction with its log row."""

    def update(self, state, rating):
        with transaction.atomic():
            updated = (Card.objects
                       .filter(pk=state.id)
                       .update(**{f: getattr(state, f) for f in SCHEDULING_FIELDS}))
            log_review(state, rating)
        return updated == 1

    def remove(self, state, rating):
        with transaction.atomic():
            deleted, _ = Card.objects.filter(pk=state.id).delete()
            log_review(state, rating)
        return deleted > 0
