#!/usr/bin/env python3
import json
import logging
import os

from stats_calculator import PLAYERS

logger = logging.getLogger(__name__)

DEFAULT_GAMES_FILE = os.path.join(os.path.dirname(os.path.abspath(__file__)), "games.json")

# Season history carried over from the scoring spreadsheet
SEED_GAMES = [
    {"id": 1, "Matt": None, "Seth": 2, "Mack": -2, "Arnav": -2, "Henry": 2},
    {"id": 2, "Matt": 5, "Seth": -5, "Mack": None, "Arnav": 5, "Henry": -5},
    {"id": 3, "Matt": 2, "Seth": -2, "Mack": -2, "Arnav": 2, "Henry": None},
    {"id": 4, "Matt": 4, "Seth": None, "Mack": -4, "Arnav": 4, "Henry": -4},
    {"id": 5, "Matt": -2, "Seth": 2, "Mack": 2, "Arnav": -2, "Henry": None},
    {"id": 6, "Matt": None, "Seth": 3, "Mack": 3, "Arnav": -3, "Henry": -3},
    {"id": 7, "Matt": 3, "Seth": -3, "Mack": -3, "Arnav": None, "Henry": 3},
    {"id": 8, "Matt": 2, "Seth": -2, "Mack": None, "Arnav": -2, "Henry": 2},
    {"id": 9, "Matt": -3, "Seth": None, "Mack": 3, "Arnav": 3, "Henry": -3},
    {"id": 10, "Matt": 4, "Seth": 4, "Mack": -4, "Arnav": -4, "Henry": None},
    {"id": 11, "Matt": 4, "Seth": 4, "Mack": -4, "Arnav": None, "Henry": -4},
    {"id": 12, "Matt": 4, "Seth": 4, "Mack": None, "Arnav": -4, "Henry": -4},
    {"id": 13, "Matt": 3, "Seth": 3, "Mack": None, "Arnav": -3, "Henry": -3},
    {"id": 14, "Matt": -2, "Seth": 2, "Mack": 2, "Arnav": None, "Henry": -2},
    {"id": 15, "Matt": 4, "Seth": -4, "Mack": -4, "Arnav": 4, "Henry": None},
    {"id": 16, "Matt": -3, "Seth": None, "Mack": 3, "Arnav": -3, "Henry": 3},
    {"id": 17, "Matt": None, "Seth": 5, "Mack": -5, "Arnav": 5, "Henry": -5},
    {"id": 18, "Matt": 3, "Seth": -3, "Mack": None, "Arnav": -3, "Henry": 3},
    {"id": 19, "Matt": -3, "Seth": 3, "Mack": 3, "Arnav": None, "Henry": -3},
    {"id": 20, "Matt": 6, "Seth": -6, "Mack": -6, "Arnav": 6, "Henry": None},
    {"id": 21, "Matt": 4, "Seth": None, "Mack": -4, "Arnav": 4, "Henry": -4},
    {"id": 22, "Matt": 3, "Seth": None, "Mack": -3, "Arnav": 3, "Henry": -3},
    {"id": 23, "Matt": 2, "Seth": None, "Mack": -2, "Arnav": 2, "Henry": -2},
    {"id": 24, "Matt": 4, "Seth": None, "Mack": -4, "Arnav": 4, "Henry": -4},
    {"id": 25, "Matt": -5, "Seth": None, "Mack": 5, "Arnav": -5, "Henry": 5},
    {"id": 26, "Matt": -3, "Seth": None, "Mack": 3, "Arnav": -3, "Henry": 3},
    {"id": 27, "Matt": 2, "Seth": None, "Mack": -2, "Arnav": 2, "Henry": -2},
    {"id": 28, "Matt": 2, "Seth": 2, "Mack": None, "Arnav": -2, "Henry": -2},
    {"id": 29, "Matt": -4, "Seth": -4, "Mack": None, "Arnav": 4, "Henry": 4},
    {"id": 30, "Matt": -3, "Seth": -3, "Mack": None, "Arnav": 3, "Henry": 3},
    {"id": 31, "Matt": 2, "Seth": 2, "Mack": None, "Arnav": -2, "Henry": -2},
    {"id": 32, "Matt": -2, "Seth": 2, "Mack": None, "Arnav": -2, "Henry": 2},
    {"id": 33, "Matt": None, "Seth": 2, "Mack": -2, "Arnav": -2, "Henry": 2},
    {"id": 34, "Matt": 2, "Seth": -2, "Mack": 2, "Arnav": None, "Henry": -2},
    {"id": 35, "Matt": 3, "Seth": -3, "Mack": 3, "Arnav": -3, "Henry": None},
    {"id": 36, "Matt": 3, "Seth": None, "Mack": 3, "Arnav": -3, "Henry": -3},
    {"id": 37, "Matt": -2, "Seth": 2, "Mack": None, "Arnav": -2, "Henry": 2},
    {"id": 38, "Matt": -3, "Seth": 3, "Mack": -3, "Arnav": None, "Henry": 3},
    {"id": 39, "Matt": None, "Seth": 2, "Mack": -2, "Arnav": -2, "Henry": 2},
    {"id": 40, "Matt": -4, "Seth": 4, "Mack": None, "Arnav": -4, "Henry": 4},
    {"id": 41, "Matt": -2, "Seth": None, "Mack": 2, "Arnav": -2, "Henry": 2},
    {"id": 42, "Matt": None, "Seth": 2, "Mack": -2, "Arnav": 2, "Henry": -2},
    {"id": 43, "Matt": -3, "Seth": 3, "Mack": -3, "Arnav": 3, "Henry": None},
    {"id": 44, "Matt": -2, "Seth": 2, "Mack": None, "Arnav": 2, "Henry": -2},
    {"id": 45, "Matt": -5, "Seth": 5, "Mack": None, "Arnav": 5, "Henry": -5},
    {"id": 46, "Matt": 5, "Seth": -5, "Mack": None, "Arnav": -5, "Henry": 5},
    {"id": 47, "Matt": -2, "Seth": 2, "Mack": None, "Arnav": 2, "Henry": -2},
    {"id": 48, "Matt": 4, "Seth": -4, "Mack": None, "Arnav": -4, "Henry": 4},
    {"id": 49, "Matt": -4, "Seth": 4, "Mack": None, "Arnav": 4, "Henry": -4},
    {"id": 50, "Matt": 3, "Seth": -3, "Mack": None, "Arnav": -3, "Henry": 3},
    {"id": 51, "Matt": 3, "Seth": -3, "Mack": None, "Arnav": 3, "Henry": -3},
    {"id": 52, "Matt": 3, "Seth": -3, "Mack": None, "Arnav": 3, "Henry": -3},
    {"id": 53, "Matt": -2, "Seth": 2, "Mack": None, "Arnav": -2, "Henry": 2},
    {"id": 54, "Matt": 4, "Seth": -4, "Mack": None, "Arnav": 4, "Henry": -4},
    {"id": 55, "Matt": 3, "Seth": -3, "Mack": None, "Arnav": 3, "Henry": -3},
    {"id": 56, "Matt": -3, "Seth": 3, "Mack": None, "Arnav": -3, "Henry": 3},
    {"id": 57, "Matt": 4, "Seth": -4, "Mack": None, "Arnav": 4, "Henry": -4},
    {"id": 58, "Matt": -3, "Seth": 3, "Mack": None, "Arnav": -3, "Henry": 3},
]


class GameNotFoundError(Exception):
    def __init__(self, game_id):
        self.game_id = game_id
        super().__init__(f"Game {game_id} not found")


def _write_games(path, games):
    with open(path, 'w') as f:
        json.dump({"games": games}, f, indent=2)


def load_games(path=DEFAULT_GAMES_FILE, seed=True, create=True):
    """
    Load the full game list from the JSON store, in stored order.

    Creates the file if it doesn't exist, seeded with the season history
    unless seed is False. With create=False a missing file is never written;
    the seed (or an empty list) is returned instead.
    """
    if not os.path.exists(path):
        games = [dict(g) for g in SEED_GAMES] if seed else []
        if not create:
            return games
        _write_games(path, games)
        logger.info(f"Created {path} with {len(games)} games")
        return games

    with open(path, 'r') as f:
        data = json.load(f)
    return data.get("games", [])


def next_game_id(games):
    """One past the highest id ever stored, or 1 for an empty list"""
    if not games:
        return 1
    return max(g["id"] for g in games) + 1


def append_game(path, results, seed=True):
    """
    Append a game and return the stored record.

    Args:
        path: JSON store location
        results: Mapping of player name to result; missing players are stored as None
    """
    games = load_games(path, seed=seed)
    game = {"id": next_game_id(games)}
    for player in PLAYERS:
        game[player] = results.get(player)

    games.append(game)
    _write_games(path, games)
    logger.info(f"Saved game {game['id']}")
    return game


def delete_game(path, game_id, seed=True):
    """
    Remove a game by id and return the removed record.

    Raises:
        GameNotFoundError: No stored game has that id; the file is left untouched
    """
    games = load_games(path, seed=seed)

    for i, game in enumerate(games):
        if game.get("id") == game_id:
            deleted = games.pop(i)
            _write_games(path, games)
            logger.info(f"Deleted game {game_id}")
            return deleted

    raise GameNotFoundError(game_id)
