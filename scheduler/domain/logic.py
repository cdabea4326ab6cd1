import random

from .cards import CardState, Removal
from .enums import Rating
from .errors import InvalidCardStateError
from ..config import (
    AGAIN_INTERVAL,
    EASE_STEP,
    FIRST_INTERVAL,
    GROWTH,
    MIN_EASE_FACTOR,
    MS_PER_MINUTE,
)


def schedule_next(card: CardState, rating, now_ms: int):
    """
    Compute the state a card moves to after being rated at ``now_ms``.

    Returns a new ``CardState``, or a ``Removal`` when the rating is DELETE.
    The input card is never modified.
    """
    rating = Rating.parse(rating)

    if rating is Rating.DELETE:
        return Removal(card_id=card.id)

    ease = card.ease_factor
    if rating is Rating.AGAIN:
        interval = AGAIN_INTERVAL
        repetition = 0
    elif card.repetition == 0:
        interval = FIRST_INTERVAL[rating.value]
        repetition = 1
    else:
        if rating is Rating.HARD:
            interval = card.interval * GROWTH["hard"]
            ease = max(MIN_EASE_FACTOR, ease - EASE_STEP)
        elif rating is Rating.GOOD:
            interval = card.interval * GROWTH["good"]
        else:
            # growth uses the ease before the bonus is applied
            interval = card.interval * GROWTH["easy"] * ease
            ease = ease + EASE_STEP
        repetition = card.repetition + 1

    return card.evolve(
        interval=interval,
        repetition=repetition,
        ease_factor=ease,
        next_review_time=now_ms + round(interval * MS_PER_MINUTE),
    )


def is_due(card: CardState, now_ms: int) -> bool:
    return card.next_review_time <= now_ms


def select_due(cards, folder_id, now_ms: int) -> list:
    """Due cards of one folder, longest overdue first."""
    folder_id = str(folder_id)
    due = [c for c in cards if c.folder_id == folder_id and is_due(c, now_ms)]
    # sorted() is stable, so equal timestamps keep their input order
    return sorted(due, key=lambda c: c.next_review_time)


def shuffled(cards, rng=None) -> list:
    """Fisher-Yates shuffle into a new list."""
    rng = rng or random.SystemRandom()
    out = list(cards)
    for i in range(len(out) - 1, 0, -1):
        j = rng.randrange(i + 1)
        out[i], out[j] = out[j], out[i]
    return out


def build_queue(cards, folder_id, now_ms: int, shuffle=False, rng=None) -> list:
    due = select_due(cards, folder_id, now_ms)
    if shuffle:
        return shuffled(due, rng)
    return due


def card_problems(card: CardState) -> list:
    problems = []
    if card.ease_factor < MIN_EASE_FACTOR:
        problems.append(f"ease_factor {card.ease_factor} below {MIN_EASE_FACTOR}")
    if card.interval < 0:
        problems.append(f"negative interval {card.interval}")
    if card.repetition < 0:
        problems.append(f"negative repetition {card.repetition}")
    if card.next_review_time < 0:
        problems.append(f"negative next_review_time {card.next_review_time}")
    return problems


def validate_card(card: CardState) -> CardState:
    problems = card_problems(card)
    if problems:
        raise InvalidCardStateError(card.id, problems)
    return card


def normalize_card(card: CardState) -> CardState:
    """Clamp out-of-range scheduling fields. Meant for import/load boundaries only."""
    if not card_problems(card):
        return card
    return card.evolve(
        ease_factor=max(MIN_EASE_FACTOR, card.ease_factor),
        interval=max(0, card.interval),
        repetition=max(0, card.repetition),
        next_review_time=max(0, card.next_review_time),
    )
