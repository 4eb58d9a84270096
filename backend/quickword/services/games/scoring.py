from typing import Tuple

# (minimum points, rank), highest first
RANK_TIERS: Tuple[Tuple[int, str], ...] = (
    (1000, 'Godlike'),
    (500, 'Flash'),
    (200, 'No Joke'),
    (100, 'Speedy'),
    (50, 'Turtle'),
    (10, 'Snail'),
)
DEFAULT_RANK = 'Rookie'


def normalize_guess(text: str) -> str:
    return (text or '').strip().lower()


def is_correct_guess(guess: str, word: str) -> bool:
    """Case-insensitive match of a player's guess against the round word.

    Surrounding whitespace is ignored; an empty guess is never correct.
    """
    answer = normalize_guess(guess)
    if not answer:
        return False
    return answer == word.lower()


def get_rank(points: int) -> str:
    for threshold, rank in RANK_TIERS:
        if points >= threshold:
            return rank
    return DEFAULT_RANK
