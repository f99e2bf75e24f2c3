from flask import Blueprint, current_app, jsonify

games = Blueprint('games', __name__)


def _registry():
    return current_app.extensions['live_feed'].registry


@games.route('', methods=['GET'])
@games.route('/', methods=['GET'])
def list_games():
    """
    Returns every game in the registry, in the same shape as the socket snapshot.
    """
    return jsonify(_registry().snapshot()), 200


@games.route('/<string:game_id>', methods=['GET'])
def get_game(game_id):
    registry = _registry()
    with registry.lock:
        game = registry.get(game_id)
        if not game:
            return jsonify({'error': 'Game not found'}), 404
        return jsonify(game.to_dict()), 200
