#!/usr/bin/env python3
import logging
import os

from flask import Flask, request, jsonify
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

from game_store import DEFAULT_GAMES_FILE, GameNotFoundError, load_games, append_game, delete_game
from parse_game_entry import GameValidationError, parse_game_entry, validate_game_entry
from stats_calculator import METRIC_DEFINITIONS, get_all_statistics, get_player_stats, get_radar_data

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def env_flag(name, default):
    return os.environ.get(name, default).strip().lower() in ('1', 'true', 'yes', 'on')


app = Flask(__name__)
app.secret_key = os.environ.get('FLASK_SECRET_KEY', "pitch-tracker-secret-key")
app.config['GAMES_FILE'] = os.environ.get('PITCH_GAMES_FILE', DEFAULT_GAMES_FILE)
app.config['SEED_DATA'] = env_flag('PITCH_SEED_DATA', 'true')
app.config['RATELIMIT_ENABLED'] = env_flag('RATELIMIT_ENABLED', 'true')

# Initialize rate limiter
limiter = Limiter(
    app=app,
    key_func=get_remote_address,
    default_limits=[limit.strip() for limit in os.environ.get('PITCH_RATE_LIMITS', "200 per day;50 per hour").split(';') if limit.strip()],
    storage_uri="memory://"
)

# Stricter rate limiting for anything that rewrites the game file
write_limiter = limiter.shared_limit(
    "20 per minute",
    scope="writes",
    error_message="Too many changes. Please try again later."
)


def current_games():
    return load_games(app.config['GAMES_FILE'], seed=app.config['SEED_DATA'])


@app.after_request
def allow_cross_origin(response):
    # The dashboard is served from a different port
    response.headers['Access-Control-Allow-Origin'] = '*'
    response.headers['Access-Control-Allow-Headers'] = 'Content-Type'
    response.headers['Access-Control-Allow-Methods'] = 'GET, POST, DELETE, OPTIONS'
    return response


@app.route('/api/games', methods=['GET'])
def list_games():
    """API endpoint to get the full game list in play order"""
    try:
        return jsonify(current_games())
    except Exception as e:
        logger.exception("Failed to load games")
        return jsonify({"error": str(e)}), 500


@app.route('/api/games', methods=['POST'])
@write_limiter
def add_game():
    """
    API endpoint to log a new game.

    Accepts a JSON body or form fields keyed by player name. Blank or missing
    fields mean the player sat out. The server assigns the id.
    """
    try:
        values = request.get_json(silent=True)
        if values is None:
            values = request.form
        if not hasattr(values, 'get'):
            return jsonify({"error": "Expected an object keyed by player name"}), 400

        entry = parse_game_entry(values)
        validate_game_entry(entry)
    except GameValidationError as e:
        logger.warning(f"Rejected game from {get_remote_address()}: {e}")
        return jsonify({"error": str(e)}), 400

    try:
        game = append_game(app.config['GAMES_FILE'], entry, seed=app.config['SEED_DATA'])
        return jsonify(game), 201
    except Exception as e:
        logger.exception("Failed to save game")
        return jsonify({"error": str(e)}), 500


@app.route('/api/games/<int:game_id>', methods=['DELETE'])
@write_limiter
def remove_game(game_id):
    """API endpoint to delete a game by id"""
    try:
        deleted = delete_game(app.config['GAMES_FILE'], game_id, seed=app.config['SEED_DATA'])
        return jsonify(deleted)
    except GameNotFoundError:
        logger.warning(f"Delete requested for missing game {game_id}")
        return jsonify({"error": "Game not found"}), 404
    except Exception as e:
        logger.exception(f"Failed to delete game {game_id}")
        return jsonify({"error": str(e)}), 500


@app.route('/api/statistics', methods=['GET'])
def statistics():
    """API endpoint with the player stats table, cumulative net and chart data"""
    try:
        return jsonify(get_all_statistics(current_games()))
    except Exception as e:
        logger.exception("Failed to calculate statistics")
        return jsonify({"error": str(e)}), 500


@app.route('/api/statistics/radar', methods=['GET'])
def radar():
    """
    API endpoint for the skill radar.

    Takes an optional comma-separated ?metrics= list of metric keys.
    """
    requested = request.args.get('metrics', '').strip()
    selected = [m.strip() for m in requested.split(',') if m.strip()] if requested else None

    try:
        stats = get_player_stats(current_games())
    except Exception as e:
        logger.exception("Failed to build radar data")
        return jsonify({"error": str(e)}), 500

    try:
        return jsonify({"radar": get_radar_data(stats, selected)})
    except ValueError as e:
        return jsonify({"error": str(e)}), 400


@app.route('/api/metrics', methods=['GET'])
def metrics():
    """API endpoint describing each radar metric"""
    return jsonify(METRIC_DEFINITIONS)


if __name__ == '__main__':
    # Configure rate limit headers for debugging
    app.config['RATELIMIT_HEADERS_ENABLED'] = True

    port = int(os.environ.get('PORT', 3001))
    logger.info(f"Pitch Tracker API running at http://localhost:{port}")
    app.run(host='0.0.0.0', debug=True, port=port)
