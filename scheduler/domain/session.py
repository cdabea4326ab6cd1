"""In-memory review pass over a snapshot of due cards."""

from collections import deque
from dataclasses import dataclass
from typing import Optional, Protocol

from .cards import CardState, Removal
from .enums import Action, Rating, SessionState
from .errors import SessionFinishedError
from .logic import build_queue, schedule_next
from ..utils.time import now_ms as system_now_ms


class CardSink(Protocol):
    """Where a session reports rated cards. Writes are fire-and-forget."""

    def update(self, card: CardState, rating: Rating) -> None: ...

    # ``card`` is the last known state of the card being deleted
    def remove(self, card: CardState, rating: Rating) -> None: ...


@dataclass(frozen=True)
class ReviewOutcome:
    action: Action
    rating: Rating
    card: CardState  # updated state, or the last known state of a removed card

    @property
    def card_id(self):
        return self.card.id


class ReviewSession:
    """
    Queue of cards for one review pass.

    The queue is fixed when the session is created: later changes to the
    underlying store never add or drop cards mid-session. Each ``rate`` call
    consumes the head card; once the queue is empty the session is FINISHED
    and a new one has to be started.
    """

    def __init__(self, cards, clock=None, sink: Optional[CardSink] = None):
        self._queue = deque(cards)
        self._clock = clock or system_now_ms
        self._sink = sink
        self.reviewed = 0

    @classmethod
    def start(cls, cards, folder_id, now_ms=None, shuffle=False, rng=None,
              clock=None, sink=None):
        clock = clock or system_now_ms
        now = clock() if now_ms is None else now_ms
        queue = build_queue(cards, folder_id, now, shuffle=shuffle, rng=rng)
        return cls(queue, clock=clock, sink=sink)

    @property
    def state(self) -> SessionState:
        return SessionState.ACTIVE if self._queue else SessionState.FINISHED

    @property
    def finished(self) -> bool:
        return self.state is SessionState.FINISHED

    def current_card(self) -> Optional[CardState]:
        return self._queue[0] if self._queue else None

    def remaining_count(self) -> int:
        return len(self._queue)

    def card_ids(self) -> list:
        return [c.id for c in self._queue]

    def rate(self, rating) -> ReviewOutcome:
        if not self._queue:
            raise SessionFinishedError()
        rating = Rating.parse(rating)
        card = self._queue[0]

        result = schedule_next(card, rating, self._clock())
        if isinstance(result, Removal):
            outcome = ReviewOutcome(Action.REMOVE, rating, card)
            if self._sink is not None:
                self._sink.remove(card, rating)
        else:
            outcome = ReviewOutcome(Action.UPDATE, rating, result)
            if self._sink is not None:
                self._sink.update(result, rating)

        self._queue.popleft()
        self.reviewed += 1
        return outcome
