import structlog

from ..data.models import Card
from ..data.repos import folder_card_states, get_folder
from ..domain.logic import is_due
from ..utils.time import now_ms as system_now_ms

logger = structlog.get_logger()

CONTENT_FIELDS = ("front_type", "front_content", "back_type", "back_content", "phonetic", "tags")


def create_card(folder_id, **content):
    """New cards always start unreviewed and immediately due."""
    folder = get_folder(folder_id)
    unknown = set(content) - set(CONTENT_FIELDS)
    if unknown:
        raise TypeError(f"Unexpected card fields: {', '.join(sorted(unknown))}")

    card = Card.objects.create(folder=folder, **content)
    logger.info("card_created", card_id=card.id, folder_id=folder.pk)
    return card


def folder_stats(folder_id, now_ms=None):
    folder = get_folder(folder_id)
    now = system_now_ms() if now_ms is None else now_ms
    states = folder_card_states(folder.pk)
    return {
        "total": len(states),
        "learned": sum(1 for s in states if s.repetition > 0),
        "due": sum(1 for s in states if is_due(s, now)),
    }
