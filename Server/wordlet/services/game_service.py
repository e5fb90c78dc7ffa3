"""
Game Service

Contains the game lifecycle: starting games, reading the current game and
deciding the outcome of each guess.
"""

from typing import Optional

from ..config.game_settings import MAX_GUESSES
from ..models.game import Game, GameStatus, GuessOutcome, GuessRecord
from ..utils.game_logger import game_logger
from .evaluator import evaluate, invalid_matches, is_winning
from .game_store import GameStore
from .word_catalog import WordCatalog


def classify_outcome(history_length: int, matches: GuessRecord,
                     max_guesses: int = MAX_GUESSES) -> GameStatus:
    """
    Derives the status of an accepted guess.

    Args:
        history_length: Number of guesses stored before this one
        matches: Evaluation of this guess
        max_guesses: Guess limit per game

    Returns:
        GameStatus: PLAYER_WON, GAME_OVER or EVALUATED
    """
    if is_winning(matches):
        return GameStatus.PLAYER_WON
    if history_length == max_guesses - 1:
        return GameStatus.GAME_OVER
    return GameStatus.EVALUATED


class GameService:
    """
    Core game service.

    This class handles:
    - Word selection for new games
    - Guess validation against the word catalog
    - Guess evaluation and persistence
    - Status derivation from the stored guess history

    All game state lives in the store; the service itself holds none.
    """

    def __init__(self, store: GameStore, catalog: WordCatalog, max_guesses: int = MAX_GUESSES):
        self.store = store
        self.catalog = catalog
        self.max_guesses = max_guesses

    def start_game(self, player_id: str) -> Game:
        """
        Creates a new game for the player, replacing any previous one.

        Raises:
            StorageError: If the game cannot be stored
        """
        word = self.catalog.pick_random()
        game = self.store.put_new_game(player_id, word)
        game_logger.log_game_event(player_id, 'game_started', max_guesses=self.max_guesses)
        return game

    def get_current_game(self, player_id: str) -> Optional[Game]:
        """Returns the player's current game or None if there is none."""
        return self.store.get_game(player_id)

    def submit_guess(self, player_id: str, guess: str) -> Optional[GuessOutcome]:
        """
        Processes a guess for the player's current game.

        Args:
            player_id: Player identifier
            guess: The guessed word

        Returns:
            GuessOutcome, or None if the player has no game

        Raises:
            StorageError: If the game cannot be read or the guess cannot be saved
        """
        game = self.store.get_game(player_id)
        if game is None:
            return None

        history_length = len(game.guess_history)
        if history_length >= self.max_guesses:
            return GuessOutcome(status=GameStatus.GAME_OVER)

        if not self.catalog.contains(guess):
            game_logger.log_game_event(player_id, 'guess_rejected', guess=guess)
            return GuessOutcome(status=GameStatus.INVALID, matches=invalid_matches(guess))

        matches = evaluate(game.secret_word, guess)
        self.store.append_guess(player_id, matches)

        status = classify_outcome(history_length, matches, self.max_guesses)
        if status == GameStatus.PLAYER_WON:
            game_logger.log_game_event(
                player_id, 'game_won',
                guesses_used=history_length + 1, target_word=game.secret_word
            )
        elif status == GameStatus.GAME_OVER:
            game_logger.log_game_event(
                player_id, 'game_lost',
                guesses_used=history_length + 1, target_word=game.secret_word
            )

        return GuessOutcome(status=status, matches=matches)


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(store: GameStore, catalog: WordCatalog) -> GameService:
    """Initialize the global game service instance."""
    global _game_service
    _game_service = GameService(store, catalog)
    return _game_service
