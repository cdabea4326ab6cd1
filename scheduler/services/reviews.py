from django.db import transaction
import structlog

from ..data.repos import (
    DjangoCardStore,
    apply_state,
    folder_card_states,
    get_card_for_update,
    get_folder,
    log_review,
    to_state,
)
from ..domain.cards import Removal
from ..domain.enums import Action, Rating
from ..domain.logic import schedule_next
from ..domain.session import ReviewOutcome, ReviewSession
from ..utils.time import now_ms as system_now_ms, to_cst_iso

logger = structlog.get_logger()


def start_session(folder_id, now_ms=None, rng=None, clock=None):
    folder = get_folder(folder_id)
    now = (clock or system_now_ms)() if now_ms is None else now_ms

    session = ReviewSession.start(
        folder_card_states(folder.pk),
        folder.pk,
        now_ms=now,
        shuffle=folder.shuffle,
        rng=rng,
        clock=clock,
        sink=DjangoCardStore(),
    )
    logger.info("session_started",
        folder_id=folder.pk,
        shuffle=folder.shuffle,
        due_count=session.remaining_count(),
    )
    return session


def record_review(card_id, rating, now_ms=None) -> ReviewOutcome:
    rating = Rating.parse(rating)
    logger.info("review_received", card_id=str(card_id), rating=rating.value)

    with transaction.atomic():
        # Serialize rating updates per card
        card = get_card_for_update(card_id)
        current = to_state(card)
        now = system_now_ms() if now_ms is None else now_ms

        result = schedule_next(current, rating, now)
        if isinstance(result, Removal):
            log_review(current, rating)
            card.delete()
            logger.info("card_removed", card_id=current.id, folder_id=current.folder_id)
            return ReviewOutcome(Action.REMOVE, rating, current)

        apply_state(card, result)
        log_review(result, rating)

    logger.info("review_scheduled",
        card_id=result.id,
        rating=rating.value,
        interval_minutes=result.interval,
        repetition=result.repetition,
        ease_factor=result.ease_factor,
        next_review_cst=to_cst_iso(result.next_review_time),
    )
    return ReviewOutcome(Action.UPDATE, rating, result)
