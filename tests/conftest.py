import json
import os

import pytest

# The limiter only installs its request hooks when enabled at startup;
# individual tests switch enforcement off through limiter.enabled instead.
os.environ["RATELIMIT_ENABLED"] = "true"

from pitch_web import app, limiter  # noqa: E402


@pytest.fixture
def games_file(tmp_path):
    path = tmp_path / "games.json"
    path.write_text(json.dumps({"games": []}), encoding="utf-8")
    return path


@pytest.fixture
def client(games_file):
    app.config.update(TESTING=True, GAMES_FILE=str(games_file), SEED_DATA=False)
    limiter.enabled = False
    with app.test_client() as client:
        yield client


@pytest.fixture
def limited_client(client):
    limiter.reset()
    limiter.enabled = True
    try:
        yield client
    finally:
        limiter.enabled = False
        limiter.reset()
