"""
Testing the game lifecycle.
"""

import pytest

from wordlet.errors import StorageError
from wordlet.models.game import CharacterMatchResult, GameStatus, MatchStatus
from wordlet.services.game_service import GameService, classify_outcome
from wordlet.services.game_store import InMemoryGameStore

LOSING_GUESSES = ["ghost", "plumb", "fight", "jumpy", "brick"]

ALL_CORRECT = tuple(CharacterMatchResult(i, MatchStatus.CORRECT_PLACE) for i in range(5))
ONE_ABSENT = ALL_CORRECT[:4] + (CharacterMatchResult(4, MatchStatus.ABSENT),)


class FailingAppendStore(InMemoryGameStore):
    def append_guess(self, player_id, guess_record):
        raise StorageError("write failed")


def test_start_game_stores_fresh_game(service, store, catalog):
    game = service.start_game("alice")

    assert game.player_id == "alice"
    assert game.secret_word in catalog
    assert game.guess_history == ()
    assert store.get_game("alice") == game


def test_start_game_resets_finished_game(service, store):
    store.put_new_game("alice", "crane")
    for guess in LOSING_GUESSES:
        service.submit_guess("alice", guess)

    game = service.start_game("alice")

    assert store.get_game("alice").guess_history == ()
    assert service.submit_guess("alice", game.secret_word).status == GameStatus.PLAYER_WON


def test_current_game_is_none_without_game(service):
    assert service.get_current_game("nobody") is None


def test_current_game_reads_are_idempotent(service):
    service.start_game("alice")
    service.submit_guess("alice", "ghost")

    assert service.get_current_game("alice") == service.get_current_game("alice")


def test_guess_without_game_returns_none(service):
    assert service.submit_guess("nobody", "crane") is None


def test_evaluated_guess_is_persisted(service, store):
    store.put_new_game("alice", "crane")

    outcome = service.submit_guess("alice", "crate")

    assert outcome.status == GameStatus.EVALUATED
    assert [match.status for match in outcome.matches] == [
        MatchStatus.CORRECT_PLACE,
        MatchStatus.CORRECT_PLACE,
        MatchStatus.CORRECT_PLACE,
        MatchStatus.ABSENT,
        MatchStatus.CORRECT_PLACE,
    ]
    assert store.get_game("alice").guess_history == (outcome.matches,)


def test_exact_guess_wins(service, store):
    store.put_new_game("alice", "apple")

    outcome = service.submit_guess("alice", "apple")

    assert outcome.status == GameStatus.PLAYER_WON
    assert outcome.matches == ALL_CORRECT


def test_guess_outside_catalog_is_invalid_and_not_stored(service, store):
    store.put_new_game("alice", "apple")

    outcome = service.submit_guess("alice", "zzzzz")

    assert outcome.status == GameStatus.INVALID
    assert [match.status for match in outcome.matches] == [MatchStatus.INVALID] * 5
    assert store.get_game("alice").guess_history == ()


def test_invalid_markers_follow_submitted_length(service, store):
    store.put_new_game("alice", "apple")

    outcome = service.submit_guess("alice", "zz")

    assert outcome.status == GameStatus.INVALID
    assert [match.position for match in outcome.matches] == [0, 1]


def test_fifth_losing_guess_ends_game(service, store):
    store.put_new_game("alice", "crane")

    statuses = [service.submit_guess("alice", guess).status for guess in LOSING_GUESSES]

    assert statuses == [GameStatus.EVALUATED] * 4 + [GameStatus.GAME_OVER]
    assert len(store.get_game("alice").guess_history) == 5


def test_win_on_last_guess_beats_game_over(service, store):
    store.put_new_game("alice", "crane")
    for guess in LOSING_GUESSES[:4]:
        service.submit_guess("alice", guess)

    assert service.submit_guess("alice", "crane").status == GameStatus.PLAYER_WON


def test_exhausted_game_rejects_further_guesses_without_evaluating(service, store, monkeypatch):
    store.put_new_game("alice", "crane")
    for guess in LOSING_GUESSES:
        service.submit_guess("alice", guess)

    def fail_evaluate(secret, guess):
        raise AssertionError("evaluate should not be called")

    monkeypatch.setattr("wordlet.services.game_service.evaluate", fail_evaluate)
    outcome = service.submit_guess("alice", "crate")

    assert outcome.status == GameStatus.GAME_OVER
    assert outcome.matches == ()
    assert len(store.get_game("alice").guess_history) == 5


def test_invalid_guesses_do_not_use_up_the_limit(service, store):
    store.put_new_game("alice", "crane")
    for _ in range(10):
        service.submit_guess("alice", "zzzzz")

    assert store.get_game("alice").guess_history == ()
    assert service.submit_guess("alice", "ghost").status == GameStatus.EVALUATED


def test_storage_failure_on_append_propagates(catalog):
    store = FailingAppendStore()
    store.put_new_game("alice", "crane")
    service = GameService(store, catalog)

    with pytest.raises(StorageError):
        service.submit_guess("alice", "crate")


@pytest.mark.parametrize("history_length, matches, expected", [
    (0, ALL_CORRECT, GameStatus.PLAYER_WON),
    (4, ALL_CORRECT, GameStatus.PLAYER_WON),
    (0, ONE_ABSENT, GameStatus.EVALUATED),
    (3, ONE_ABSENT, GameStatus.EVALUATED),
    (4, ONE_ABSENT, GameStatus.GAME_OVER),
])
def test_classify_outcome(history_length, matches, expected):
    assert classify_outcome(history_length, matches) == expected
