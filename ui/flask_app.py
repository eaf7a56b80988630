"""
Flask-based Kevin Bacon lookup page and JSON API.

Usage:
    python ui/flask_app.py
"""

import logging
import sys
import threading
from pathlib import Path

from dotenv import load_dotenv
from flask import Flask, current_app, jsonify, render_template_string, request

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Must run before six_degrees.config reads the environment
load_dotenv(project_root / ".env")

from six_degrees.config import (  # noqa: E402 - must be after sys.path modification
    DEFAULT_SOURCE_ACTOR,
    FLASK_HOST,
    FLASK_PORT,
    LOG_DATE_FORMAT,
    LOG_FORMAT,
    LOG_LEVEL,
    MOVIE_DATA_PATH,
)
from six_degrees.game import BaconGame  # noqa: E402

logger = logging.getLogger(__name__)

app = Flask(__name__)

# Built on first request unless a game is injected (tests do this)
app.config.setdefault("BACON_GAME", None)

# Serializes the first build across request threads
_game_lock = threading.Lock()

# HTML Templates
BASE_TEMPLATE = """
<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
    <title>Six Degrees of {{ source_name }}</title>
    <style>
        * { box-sizing: border-box; margin: 0; padding: 0; }
        body { font-family: system-ui, -apple-system, sans-serif; background: #f5f5f5; min-height: 100vh; }
        .header { background: #1a1a2e; color: white; padding: 15px 30px; display: flex; justify-content: space-between; align-items: center; }
        .header h1 { font-size: 1.5rem; }
        .header a { color: #88c0d0; text-decoration: none; }
        .container { max-width: 1000px; margin: 0 auto; padding: 20px; }
        .card { background: white; border-radius: 12px; box-shadow: 0 2px 8px rgba(0,0,0,0.1); padding: 30px; margin-bottom: 20px; }
        h2 { margin-bottom: 20px; color: #1a1a2e; }
        input[type="text"] { width: 100%; padding: 12px 15px; border: 2px solid #ddd; border-radius: 8px; font-size: 16px; margin-bottom: 15px; }
        input[type="text"]:focus { outline: none; border-color: #4ecdc4; }
        button { background: #4ecdc4; color: white; border: none; padding: 12px 30px; border-radius: 8px; font-size: 16px; cursor: pointer; }
        button:hover { background: #45b7aa; }
        .steps { font-size: 1.5rem; font-weight: 600; color: #27ae60; margin-bottom: 15px; }
        .not-found { color: #c0392b; }
        .path li { list-style: none; padding: 6px 0; }
        .path .actor { font-weight: 600; }
        .path .movie { color: #666; padding-left: 20px; font-style: italic; }
        .raw { background: #ecf0f1; padding: 10px 20px; border-radius: 8px; font-family: monospace; font-size: 13px; margin-top: 15px; word-break: break-all; }
    </style>
</head>
<body>
    <div class="header">
        <h1>Six Degrees of {{ source_name }}</h1>
        <a href="/api/stats">Stats</a>
    </div>
    <div class="container">
        <div class="card">
            <h2>Find an Actor</h2>
            <form method="GET" action="/">
                <input type="text" name="actor" value="{{ query or '' }}" placeholder="Last, First (I)">
                <button type="submit">Search</button>
            </form>
        </div>
        {% if result %}
        <div class="card">
            {% if result.found %}
            <div class="steps">{{ result.steps }} step{{ '' if result.steps == 1 else 's' }}</div>
            <ul class="path">
                {% for actor in result.actors %}
                {% if not loop.first %}<li class="movie">{{ result.movies[loop.index0 - 1] }}</li>{% endif %}
                <li class="actor">{{ actor }}</li>
                {% endfor %}
            </ul>
            {% else %}
            <p class="not-found">{{ result.render() }}</p>
            {% endif %}
            <div class="raw">{{ result.render() }}</div>
        </div>
        {% endif %}
    </div>
</body>
</html>
"""


def get_game() -> BaconGame:
    """Return the shared game, building it from the dataset on first use."""
    game = current_app.config["BACON_GAME"]
    if game is not None:
        return game

    with _game_lock:
        game = current_app.config["BACON_GAME"]
        if game is None:
            logger.info("Building game for web requests...")
            game = BaconGame.from_file(
                current_app.config.get("MOVIE_DATA_PATH", MOVIE_DATA_PATH),
                source=current_app.config.get("SOURCE_ACTOR", DEFAULT_SOURCE_ACTOR),
            )
            current_app.config["BACON_GAME"] = game
    return game


@app.route("/")
def home():
    """Search form, plus the path for ?actor= when given."""
    game = get_game()
    query = request.args.get("actor")
    result = game.query(query) if query and query.strip() else None
    return render_template_string(
        BASE_TEMPLATE,
        source_name=game.parent_map.source_name,
        query=query,
        result=result,
    )


@app.route("/api/path")
def api_path():
    query = request.args.get("actor", "")
    if not query.strip():
        return jsonify({"error": "Missing 'actor' parameter"}), 400
    return jsonify(get_game().query(query).to_dict())


@app.route("/api/stats")
def api_stats():
    return jsonify(get_game().stats())


def main() -> None:
    """Build the game up front, then serve."""
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    with app.app_context():
        get_game()
    app.run(host=FLASK_HOST, port=FLASK_PORT, debug=False)


if __name__ == "__main__":
    main()
