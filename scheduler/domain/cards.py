from dataclasses import dataclass, replace

from ..config import DEFAULT_EASE_FACTOR


@dataclass(frozen=True)
class CardState:
    """Scheduling view of a card. Content fields stay with the caller."""

    id: str
    folder_id: str
    next_review_time: int = 0  # epoch ms, 0 = never reviewed
    interval: float = 0        # minutes
    repetition: int = 0
    ease_factor: float = DEFAULT_EASE_FACTOR

    @classmethod
    def new(cls, card_id, folder_id):
        return cls(id=str(card_id), folder_id=str(folder_id))

    def evolve(self, **changes):
        return replace(self, **changes)


@dataclass(frozen=True)
class Removal:
    """Returned by the scheduler when a card must be deleted by the caller."""

    card_id: str
