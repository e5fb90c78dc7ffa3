"""
Game Data Models

Contains all game-related data structures and enums, plus their conversion
to and from the JSON/document shape shared by the HTTP layer and the stores.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Tuple

from ..config.game_settings import WORD_LENGTH


class MatchStatus(Enum):
    """Per-character evaluation status. Values are the wire labels."""
    CORRECT_PLACE = "PresentAtCorrectPlace"
    WRONG_PLACE = "PresentAtIncorrectPlace"
    ABSENT = "NotPresent"
    INVALID = "Invalid"


class GameStatus(Enum):
    """Outcome of a single guess request. Derived per request, never stored."""
    EVALUATED = "Evaluated"
    INVALID = "Invalid"
    GAME_OVER = "GameOver"
    PLAYER_WON = "PlayerWon"


@dataclass(frozen=True)
class CharacterMatchResult:
    """Evaluation of one character position of a guess."""
    position: int
    status: MatchStatus

    def to_dict(self) -> Dict[str, Any]:
        return {"index": self.position, "status": self.status.value}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CharacterMatchResult":
        index = data["index"]
        if isinstance(index, bool) or not isinstance(index, int):
            raise ValueError(f"Match index must be an integer, got {index!r}")
        if not 0 <= index < WORD_LENGTH:
            raise ValueError(f"Match index {index} is outside the word")
        return cls(position=index, status=MatchStatus(data["status"]))


# One evaluated guess: a result per character position, in guess order
GuessRecord = Tuple[CharacterMatchResult, ...]


def guess_record_to_list(record: GuessRecord) -> List[Dict[str, Any]]:
    return [match.to_dict() for match in record]


def guess_record_from_list(data: List[Dict[str, Any]]) -> GuessRecord:
    if not isinstance(data, list):
        raise TypeError(f"Guess record must be a list, got {type(data).__name__}")
    return tuple(CharacterMatchResult.from_dict(item) for item in data)


@dataclass(frozen=True)
class Game:
    """A player's current game: the secret word and every accepted guess so far."""
    player_id: str
    secret_word: str
    guess_history: Tuple[GuessRecord, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "user_id": self.player_id,
            "word": self.secret_word,
            "guesses": [guess_record_to_list(record) for record in self.guess_history],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Game":
        """
        Build a Game from its serialized form.

        Raises:
            KeyError, TypeError, ValueError: If the data is malformed
        """
        word = data["word"]
        if not isinstance(word, str):
            raise TypeError("Game word must be a string")
        guesses = data["guesses"]
        if not isinstance(guesses, list):
            raise TypeError("Game guesses must be a list")
        return cls(
            player_id=str(data["user_id"]),
            secret_word=word,
            guess_history=tuple(guess_record_from_list(record) for record in guesses),
        )


@dataclass(frozen=True)
class GuessOutcome:
    """Result of one guess request returned to the caller. Not persisted."""
    status: GameStatus
    matches: GuessRecord = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "status": self.status.value,
            "place_matches": guess_record_to_list(self.matches),
        }
