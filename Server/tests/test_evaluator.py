"""
Testing pure guess evaluation.
"""

import pytest

from wordlet.models.game import CharacterMatchResult, MatchStatus
from wordlet.services.evaluator import evaluate, invalid_matches, is_winning

CORRECT = MatchStatus.CORRECT_PLACE
WRONG = MatchStatus.WRONG_PLACE
ABSENT = MatchStatus.ABSENT


def statuses(matches):
    return [match.status for match in matches]


def test_one_result_per_position_in_order():
    matches = evaluate("crane", "ghost")

    assert len(matches) == 5
    assert [match.position for match in matches] == [0, 1, 2, 3, 4]


def test_exact_guess_is_all_correct_and_winning():
    matches = evaluate("apple", "apple")

    assert statuses(matches) == [CORRECT] * 5
    assert is_winning(matches) is True


def test_no_shared_letters_is_all_absent():
    matches = evaluate("crane", "ghost")

    assert statuses(matches) == [ABSENT] * 5
    assert is_winning(matches) is False


def test_crane_against_crate():
    # t is not in crane; the final e sits in the same place in both words
    matches = evaluate("crane", "crate")

    assert statuses(matches) == [CORRECT, CORRECT, CORRECT, ABSENT, CORRECT]


def test_letter_elsewhere_is_wrong_place():
    # every letter of nacre is in crane, only the e is in place
    matches = evaluate("crane", "nacre")

    assert statuses(matches) == [WRONG, WRONG, WRONG, WRONG, CORRECT]


def test_repeated_guess_letters_do_not_consume_secret_letters():
    # both p's of apple are matched in place, yet the other p's still report present
    matches = evaluate("apple", "ppppp")

    assert statuses(matches) == [WRONG, CORRECT, CORRECT, WRONG, WRONG]


def test_single_secret_letter_reported_for_every_repeat():
    matches = evaluate("ghost", "hhhhh")

    assert statuses(matches) == [WRONG, CORRECT, WRONG, WRONG, WRONG]


def test_length_mismatch_is_rejected():
    with pytest.raises(ValueError):
        evaluate("crane", "cranes")


def test_invalid_matches_cover_every_submitted_character():
    assert invalid_matches("zzzzz") == tuple(
        CharacterMatchResult(position=i, status=MatchStatus.INVALID) for i in range(5)
    )
    assert len(invalid_matches("zz")) == 2


def test_empty_record_is_not_a_win():
    assert is_winning(()) is False
