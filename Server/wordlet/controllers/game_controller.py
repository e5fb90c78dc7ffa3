"""
Game Controller

Handles all game-related HTTP endpoints and maps errors to JSON responses.
"""

from flask import Blueprint, abort, current_app, jsonify, request
from werkzeug.exceptions import HTTPException

from ..config.game_settings import WORD_LENGTH
from ..errors import StorageError, ValidationError
from ..services.game_service import get_game_service
from ..utils.game_logger import game_logger

game_bp = Blueprint('game', __name__)

HTTP_ERROR_MESSAGES = {
    400: 'Invalid Body',
    404: 'Not Found',
    405: 'Method Not Allowed',
    413: 'Payload Too Large',
}


def _error_response(message: str, status_code: int):
    return jsonify({'message': message}), status_code


def _require_game_service():
    game_service = get_game_service()
    if not game_service:
        raise RuntimeError('Game service unavailable')
    return game_service


def _read_json_body(limit_setting: str) -> dict:
    """Parse the request body as a JSON object, enforcing the configured size limit."""
    limit = current_app.config[limit_setting]
    if request.content_length is not None and request.content_length > limit:
        abort(413)

    data = request.get_json(force=True, silent=True)
    if not isinstance(data, dict):
        raise ValidationError('Request body must be a JSON object')
    return data


def _read_guess() -> str:
    data = _read_json_body('MAX_GUESS_BODY_BYTES')
    guess = data.get('guess')
    if not isinstance(guess, str) or len(guess) != WORD_LENGTH:
        raise ValidationError(f'Guess must be a string of exactly {WORD_LENGTH} characters')
    return guess


@game_bp.route('/', methods=['GET'])
def health_check():
    """Health check endpoint."""
    return jsonify('Server is running.')


@game_bp.route('/users/<player_id>/games/current', methods=['GET'])
def get_current_game(player_id):
    """Get the player's current game."""
    game_service = _require_game_service()

    game_logger.log_user_action(request, 'get_current_game', player_id)

    game = game_service.get_current_game(player_id)
    if game is None:
        game_logger.log_server_response(
            request, 'get_current_game', False, {'message': 'Not Found'}, player_id
        )
        abort(404)

    response_data = game.to_dict()
    game_logger.log_server_response(
        request, 'get_current_game', True, response_data, player_id,
        guesses_used=len(game.guess_history)
    )
    return jsonify(response_data)


@game_bp.route('/users/<player_id>/games', methods=['POST'])
def new_game(player_id):
    """Start a new game for the player, replacing the current one."""
    game_service = _require_game_service()

    _read_json_body('MAX_NEW_GAME_BODY_BYTES')
    game_logger.log_user_action(request, 'new_game', player_id)

    game = game_service.start_game(player_id)

    response_data = game.to_dict()
    game_logger.log_server_response(request, 'new_game', True, response_data, player_id)
    return jsonify(response_data)


@game_bp.route('/users/<player_id>/games/current/guesses', methods=['POST'])
def submit_guess(player_id):
    """Submit a guess for evaluation against the player's current game."""
    game_service = _require_game_service()

    guess = _read_guess()
    game_logger.log_user_action(request, 'submit_guess', player_id, guess=guess)

    outcome = game_service.submit_guess(player_id, guess)
    if outcome is None:
        game_logger.log_server_response(
            request, 'submit_guess', False, {'message': 'Not Found'}, player_id
        )
        abort(404)

    response_data = outcome.to_dict()
    game_logger.log_server_response(
        request, 'submit_guess', True, response_data, player_id,
        guess=guess, status=outcome.status.value
    )
    return jsonify(response_data)


@game_bp.app_errorhandler(ValidationError)
def handle_validation_error(error):
    game_logger.log_error(request, error, 'validate_body')
    return _error_response(HTTP_ERROR_MESSAGES[400], 400)


@game_bp.app_errorhandler(StorageError)
def handle_storage_error(error):
    game_logger.log_error(request, error, 'storage')
    return _error_response('Failed to query DB', 500)


@game_bp.app_errorhandler(HTTPException)
def handle_http_error(error):
    message = HTTP_ERROR_MESSAGES.get(error.code, error.name)
    return _error_response(message, error.code)


@game_bp.app_errorhandler(Exception)
def handle_unexpected_error(error):
    game_logger.log_error(request, error, 'unhandled')
    game_logger.logger.exception('Unhandled error while serving %s', request.path)
    return _error_response('Internal Server Error', 500)
