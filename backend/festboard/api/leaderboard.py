from flask import Blueprint, current_app, jsonify

leaderboard = Blueprint('leaderboard', __name__)


@leaderboard.route('', methods=['GET'])
def get_leaderboard():
    """Read-only snapshot of the shared leaderboard."""
    return jsonify(current_app.extensions['festboard'].state.get())
