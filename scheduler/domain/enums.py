from enum import Enum

from .errors import InvalidRatingError


class Rating(str, Enum):
    AGAIN = "again"
    HARD = "hard"
    GOOD = "good"
    EASY = "easy"
    DELETE = "delete"

    @classmethod
    def parse(cls, value):
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise InvalidRatingError(value) from None


class SessionState(str, Enum):
    ACTIVE = "active"
    FINISHED = "finished"


class Action(str, Enum):
    UPDATE = "update"
    REMOVE = "remove"


RATING_LABELS = {
    Rating.AGAIN: "不认识",
    Rating.HARD: "困难",
    Rating.GOOD: "良好",
    Rating.EASY: "简单",
    Rating.DELETE: "删除",
}
