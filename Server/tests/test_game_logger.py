"""
Testing structured game log entries.
"""

import json

from wordlet.utils.game_logger import MASKED_WORD, game_logger


def test_secret_word_is_masked_in_responses():
    sanitized = game_logger._sanitize_response_data({
        'user_id': 'alice',
        'word': 'crane',
        'guesses': [[{'index': 0, 'status': 'NotPresent'}]],
    })

    assert sanitized == {
        'user_id': 'alice',
        'word': MASKED_WORD,
        'guesses': {'guesses_count': 1},
    }


def test_non_dict_responses_are_summarized():
    assert game_logger._sanitize_response_data('Server is running.') == {'data_type': 'str'}


def test_log_entry_is_json():
    entry = json.loads(game_logger._create_log_entry(
        'GAME_EVENT', 'game_won', {'user_ip': None, 'player_id': 'alice'}, {'guesses_used': 3}
    ))

    assert entry['event_type'] == 'GAME_EVENT'
    assert entry['action'] == 'game_won'
    assert entry['user']['player_id'] == 'alice'
    assert entry['details'] == {'guesses_used': 3}
