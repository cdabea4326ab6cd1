import random

import pytest
from django.http import Http404

from scheduler.data.models import Card, Folder, ReviewLog
from scheduler.data.repos import DjangoCardStore, folder_card_states, to_state
from scheduler.domain.enums import Action, Rating, SessionState
from scheduler.domain.errors import InvalidRatingError, SessionFinishedError
from scheduler.services.cards import create_card, folder_stats
from scheduler.services.reviews import record_review, start_session
from scheduler.utils.time import fixed_clock

NOW = 1_700_000_000_000
MINUTE = 60_000


@pytest.fixture
def folder(db):
    return Folder.objects.create(id="f1", name="Default")


def add_cards(folder, *specs):
    return [Card.objects.create(id=card_id, folder=folder, next_review_time=t) for card_id, t in specs]


@pytest.mark.django_db
def test_session_over_stored_cards_persists_each_rating(folder):
    add_cards(folder, ("b", NOW - 10), ("a", NOW - 20), ("later", NOW + 1))
    session = start_session("f1", now_ms=NOW, clock=fixed_clock(NOW))

    assert session.card_ids() == ["a", "b"]

    session.rate(Rating.GOOD)
    session.rate(Rating.DELETE)

    assert session.state is SessionState.FINISHED
    a = Card.objects.get(pk="a")
    assert (a.interval, a.repetition, a.next_review_time) == (1440, 1, NOW + 1440 * MINUTE)
    assert not Card.objects.filter(pk="b").exists()
    assert Card.objects.filter(pk="later").exists()


@pytest.mark.django_db
def test_session_ratings_are_logged(folder):
    """Every rating made in a session leaves a log row, deletions included."""
    add_cards(folder, ("a", NOW - 20), ("b", NOW - 10))
    Card.objects.filter(pk="b").update(interval=1440, repetition=2)
    session = start_session("f1", now_ms=NOW, clock=fixed_clock(NOW))

    session.rate(Rating.GOOD)
    session.rate(Rating.DELETE)

    logs = list(ReviewLog.objects.order_by("id").values_list(
        "card_id", "rating", "interval", "repetition", "next_review_time"))
    assert logs == [
        ("a", "good", 1440, 1, NOW + 1440 * MINUTE),
        ("b", "delete", 1440, 2, NOW - 10),
    ]


@pytest.mark.django_db
def test_session_is_not_affected_by_store_changes(folder):
    add_cards(folder, ("a", 0), ("b", 0))
    session = start_session("f1", now_ms=NOW, clock=fixed_clock(NOW))

    Card.objects.create(id="c", folder=folder)
    Card.objects.filter(pk="b").update(next_review_time=NOW + 10 * MINUTE)

    assert session.card_ids() == ["a", "b"]
    session.rate("good")
    session.rate("good")
    with pytest.raises(SessionFinishedError):
        session.rate("good")


@pytest.mark.django_db
def test_session_shuffles_for_shuffle_folders(db):
    alphabet = Folder.objects.create(id="abc", name="Alphabet", shuffle=True)
    add_cards(alphabet, *[(f"c{i}", i) for i in range(10)])

    orders = {
        tuple(start_session("abc", now_ms=NOW, rng=random.Random(seed)).card_ids())
        for seed in range(5)
    }

    assert len(orders) > 1
    assert all(sorted(o) == sorted(f"c{i}" for i in range(10)) for o in orders)


@pytest.mark.django_db
def test_start_session_unknown_folder(db):
    with pytest.raises(Http404):
        start_session("nope")


@pytest.mark.django_db
def test_record_review_update_and_remove(folder):
    add_cards(folder, ("a", 0))

    outcome = record_review("a", "easy", now_ms=NOW)
    assert outcome.action is Action.UPDATE
    assert outcome.card.interval == 2880
    assert to_state(Card.objects.get(pk="a")) == outcome.card

    outcome = record_review("a", Rating.DELETE, now_ms=NOW)
    assert outcome.action is Action.REMOVE
    assert outcome.card.interval == 2880
    assert folder_card_states("f1") == []


@pytest.mark.django_db
def test_record_review_rejects_unknown_rating(folder):
    add_cards(folder, ("a", 0))

    with pytest.raises(InvalidRatingError):
        record_review("a", "later")


@pytest.mark.django_db
def test_store_reports_missing_rows(folder):
    store = DjangoCardStore()
    add_cards(folder, ("a", 0))
    state = to_state(Card.objects.get(pk="a"))

    assert store.update(state.evolve(interval=15, repetition=1), Rating.HARD) is True
    assert Card.objects.get(pk="a").interval == 15
    assert store.remove(state, Rating.DELETE) is True
    assert store.remove(state, Rating.DELETE) is False
    assert store.update(state, Rating.GOOD) is False


@pytest.mark.django_db
def test_create_card_defaults(folder):
    card = create_card("f1", front_content="ข", back_content="käw", tags=["thai"])

    state = to_state(card)
    assert (state.next_review_time, state.interval, state.repetition, state.ease_factor) == (0, 0, 0, 2.5)
    assert card.tags == ["thai"]


@pytest.mark.django_db
def test_create_card_rejects_scheduling_fields(folder):
    with pytest.raises(TypeError):
        create_card("f1", front_content="x", repetition=4)


@pytest.mark.django_db
def test_folder_stats_counts(folder):
    add_cards(folder, ("new", 0), ("future", NOW + 1))
    Card.objects.filter(pk="future").update(repetition=2)

    assert folder_stats("f1", now_ms=NOW) == {"total": 2, "learned": 1, "due": 1}
