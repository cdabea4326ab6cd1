# Minutes
AGAIN_INTERVAL = 10
HARD_INTERVAL = 15
GOOD_INTERVAL = 24 * 60      # 1 day
EASY_INTERVAL = 2 * 24 * 60  # 2 days

FIRST_INTERVAL = {
    "hard": HARD_INTERVAL,
    "good": GOOD_INTERVAL,
    "easy": EASY_INTERVAL,
}
GROWTH = {
    "hard": 1.2,
    "good": 2.5,
    "easy": 1.3,             # multiplied by the card's ease factor
}

DEFAULT_EASE_FACTOR = 2.5
MIN_EASE_FACTOR = 1.3
EASE_STEP = 0.15

MS_PER_MINUTE = 60 * 1000
