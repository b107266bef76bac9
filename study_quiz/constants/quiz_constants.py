"""Quiz-related constants shared across UI and core layers."""

RANDOM_QUIZ_SIZE: int = 36
ELAPSED_TICK_INTERVAL_MS: int = 1000
PASSING_SCORE_PERCENTAGE: int = 70
TAB_WIDTH: int = 4
