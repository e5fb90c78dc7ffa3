"""
Guess Evaluator

Pure functions scoring a guess against the secret word.
"""

from typing import Sequence

from ..models.game import CharacterMatchResult, GuessRecord, MatchStatus


def evaluate(secret: str, guess: str) -> GuessRecord:
    """
    Scores a guess against the secret word, one result per guess position.

    A letter that is not in its place is reported as present elsewhere when it
    occurs at any other position of the secret. Secret letters already matched
    by earlier positions are not consumed, so repeated guess letters can each be
    reported as WRONG_PLACE.

    Args:
        secret: The secret word
        guess: The guessed word, same length as the secret

    Returns:
        GuessRecord: Results in guess character order

    Raises:
        ValueError: If guess and secret differ in length
    """
    if len(guess) != len(secret):
        raise ValueError(
            f"Guess length {len(guess)} does not match word length {len(secret)}"
        )

    results = []
    for i, letter in enumerate(guess):
        if letter == secret[i]:
            status = MatchStatus.CORRECT_PLACE
        elif any(j != i and candidate == letter for j, candidate in enumerate(secret)):
            status = MatchStatus.WRONG_PLACE
        else:
            status = MatchStatus.ABSENT
        results.append(CharacterMatchResult(position=i, status=status))

    return tuple(results)


def is_winning(matches: Sequence[CharacterMatchResult]) -> bool:
    """True when every position is in its correct place."""
    return bool(matches) and all(match.status == MatchStatus.CORRECT_PLACE for match in matches)


def invalid_matches(guess: str) -> GuessRecord:
    """Marks every character of a rejected guess as invalid."""
    return tuple(
        CharacterMatchResult(position=i, status=MatchStatus.INVALID)
        for i in range(len(guess))
    )
