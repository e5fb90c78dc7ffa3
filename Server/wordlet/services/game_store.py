"""
Game Store

Persistence of per-player game state. The game service only talks to the
GameStore interface; backends are selected from configuration.
"""

import copy
import logging
import threading
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from pymongo.collection import Collection
from pymongo.errors import PyMongoError
from pymongo.mongo_client import MongoClient
from pymongo.server_api import ServerApi

from ..errors import StorageError
from ..models.game import Game, GuessRecord, guess_record_to_list

logger = logging.getLogger(__name__)


class GameStore(ABC):
    """
    Key-value storage of one Game per player.

    Backends must provide read-after-write consistency for a single player:
    a read that observes a write also observes every guess appended before it.
    No version check is made before appending, so concurrent guesses from the
    same player may race.
    """

    @abstractmethod
    def put_new_game(self, player_id: str, word: str) -> Game:
        """
        Creates or replaces the player's game with an empty guess history.

        Raises:
            StorageError: If the backend write fails
        """

    @abstractmethod
    def get_game(self, player_id: str) -> Optional[Game]:
        """
        Returns the player's game, or None if there is none or it cannot be parsed.

        Raises:
            StorageError: If the backend is unavailable
        """

    @abstractmethod
    def append_guess(self, player_id: str, guess_record: GuessRecord) -> None:
        """
        Appends one evaluated guess to the end of the player's guess history.

        Raises:
            StorageError: If the write fails or the player has no game
        """


def _new_document(word: str) -> Dict[str, Any]:
    return {"word": word, "guesses": []}


def _document_to_game(player_id: str, document: Dict[str, Any]) -> Optional[Game]:
    """Parse a stored document; corrupted records read as missing."""
    try:
        return Game.from_dict({
            "user_id": player_id,
            "word": document.get("word"),
            "guesses": document.get("guesses"),
        })
    except (KeyError, TypeError, ValueError) as e:
        logger.warning("Discarding unreadable game record for player %s: %s", player_id, e)
        return None


class InMemoryGameStore(GameStore):
    """Process-local store, used for tests and single-process development servers."""

    def __init__(self):
        self._documents: Dict[str, Dict[str, Any]] = {}
        self._lock = threading.Lock()

    def put_new_game(self, player_id: str, word: str) -> Game:
        with self._lock:
            self._documents[player_id] = _new_document(word)
        return Game(player_id=player_id, secret_word=word)

    def get_game(self, player_id: str) -> Optional[Game]:
        with self._lock:
            document = copy.deepcopy(self._documents.get(player_id))
        if document is None:
            return None
        return _document_to_game(player_id, document)

    def append_guess(self, player_id: str, guess_record: GuessRecord) -> None:
        with self._lock:
            document = self._documents.get(player_id)
            if document is None:
                raise StorageError(f"No game stored for player {player_id}")
            document["guesses"].append(guess_record_to_list(guess_record))


class MongoGameStore(GameStore):
    """
    MongoDB-backed store holding one document per player.

    Document shape: ``{"_id": player_id, "word": str, "guesses": [[{"index", "status"}]]}``.
    Guesses are appended with ``$push`` so each append is atomic on the server.
    """

    def __init__(self, collection: Collection, client: Optional[MongoClient] = None):
        self.collection = collection
        self.client = client

    @classmethod
    def from_uri(cls, mongo_uri: str, db_name: str, collection_name: str) -> "MongoGameStore":
        """
        Connect to MongoDB and verify the connection.

        Raises:
            StorageError: If the URI is malformed or the server cannot be reached
        """
        client = None
        try:
            client = MongoClient(mongo_uri, server_api=ServerApi('1'))
            client.admin.command('ping')
        except PyMongoError as e:
            if client is not None:
                client.close()
            raise StorageError(f"MongoDB connection error: {e}") from e
        logger.info("Connected to MongoDB database %s", db_name)
        return cls(client[db_name][collection_name], client)

    def put_new_game(self, player_id: str, word: str) -> Game:
        document = {"_id": player_id, **_new_document(word)}
        try:
            self.collection.replace_one({"_id": player_id}, document, upsert=True)
        except PyMongoError as e:
            raise StorageError(f"Failed to store new game for player {player_id}") from e
        return Game(player_id=player_id, secret_word=word)

    def get_game(self, player_id: str) -> Optional[Game]:
        try:
            document = self.collection.find_one({"_id": player_id})
        except PyMongoError as e:
            raise StorageError(f"Failed to read game for player {player_id}") from e
        if document is None:
            return None
        return _document_to_game(player_id, document)

    def append_guess(self, player_id: str, guess_record: GuessRecord) -> None:
        try:
            result = self.collection.update_one(
                {"_id": player_id},
                {"$push": {"guesses": guess_record_to_list(guess_record)}},
            )
        except PyMongoError as e:
            raise StorageError(f"Failed to append guess for player {player_id}") from e
        if result.matched_count == 0:
            raise StorageError(f"No game stored for player {player_id}")

    def close(self):
        """Close the MongoDB connection."""
        if self.client:
            self.client.close()


def build_game_store(settings: Dict[str, Any]) -> GameStore:
    """
    Create the store named by the GAME_STORE setting.

    Args:
        settings: Mapping with GAME_STORE and, for "mongo", the MONGO_* settings

    Raises:
        ValueError: If GAME_STORE names an unknown backend
        StorageError: If the MongoDB server cannot be reached
    """
    backend = settings.get('GAME_STORE', 'mongo')
    if backend == 'memory':
        return InMemoryGameStore()
    if backend == 'mongo':
        return MongoGameStore.from_uri(
            settings['MONGO_URI'],
            settings['MONGO_DB_NAME'],
            settings['GAMES_COLLECTION'],
        )
    raise ValueError(f"Unknown game store backend: {backend!r}")
