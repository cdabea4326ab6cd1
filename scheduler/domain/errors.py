class SchedulerError(Exception):
    """Base class for scheduling errors."""


class InvalidRatingError(SchedulerError, ValueError):
    def __init__(self, value):
        self.value = value
        super().__init__(f"Unknown rating: {value!r}")


class SessionFinishedError(SchedulerError):
    def __init__(self):
        super().__init__("Review session has no current card")


class InvalidCardStateError(SchedulerError, ValueError):
    def __init__(self, card_id, problems):
        self.card_id = card_id
        self.problems = list(problems)
        super().__init__(f"Card {card_id} has invalid scheduling fields: {'; '.join(self.problems)}")
