"""Flask API application."""

import logging
import uuid
from typing import Optional

from flask import Flask, jsonify, request
from pydantic import ValidationError
from werkzeug.exceptions import HTTPException

from docadventure.agents.generator import ContentGenerator, LLMContentGenerator
from docadventure.api.llm_config import LLMConfig, LLMConfigManager, create_llm
from docadventure.api.sessions import GameSession
from docadventure.config import DEFAULT_SITUATION_PROBABILITY
from docadventure.security.input_sanitizer import InputSanitizer

logging.basicConfig(level=logging.INFO, format='[%(name)-19s - %(levelname)5s] %(message)s')

app = Flask("flask.docadventure")


@app.before_request
def log_request_info():
    app.logger.info('Access to: %s from %s (%s)',
        request.url,
        request.headers.get('X-Forwarded-For', request.remote_addr),
        request.headers.get('User-Agent'))


# Error handlers for API routes
@app.errorhandler(HTTPException)
def handle_http_exception(e: HTTPException):
    """Return JSON instead of HTML for HTTP errors in API routes."""
    if request.path.startswith("/api/"):
        response = e.get_response()
        response.data = jsonify(
            {
                "error": e.name,
                "code": e.code,
                "description": e.description,
            }
        ).data
        response.content_type = "application/json"
        return response
    return e


@app.errorhandler(500)
def handle_internal_error(e: Exception):
    """Handle 500 errors."""
    app.logger.error(f"Internal server error: {e}", exc_info=True)
    return jsonify({"error": "Internal Server Error", "message": "An unexpected error occurred"}), 500


# Global game storage: game_id -> GameSession
_games: dict[str, GameSession] = {}
_llm_config_manager = LLMConfigManager()
_input_sanitizer = InputSanitizer()


def _create_generator(llm_config: Optional[LLMConfig] = None) -> ContentGenerator:
    """Create the content generator for a new game."""
    if llm_config is None:
        # Follow hot-reloads of the default config
        return LLMContentGenerator(llm_getter=_llm_config_manager.get_llm)
    return LLMContentGenerator(llm=create_llm(llm_config))


def _get_session(game_id: str) -> Optional[GameSession]:
    """Get session by game_id, or return None if not found."""
    return _games.get(game_id)


@app.route("/api/games", methods=["GET"])
def list_games():
    """List all games."""
    games = []
    for game_id, session in _games.items():
        character = session.loop.character
        games.append({
            "game_id": game_id,
            "created_at": session.created_at.isoformat(),
            "phase": session.loop.phase.value,
            "alive": session.alive,
            "name": character.name if character else None,
            "age": character.age if character else None,
        })
    return jsonify({"games": games})


@app.route("/api/games", methods=["POST"])
def create_game():
    """Create and start a new game."""
    data = request.get_json(silent=True) or {}

    llm_config = None
    if data.get("llm_config"):
        try:
            llm_config = LLMConfig(**data["llm_config"])
        except ValidationError as e:
            return jsonify({"error": "Invalid LLM configuration", "message": str(e)}), 400

    seed = data.get("seed")
    if seed is not None and not isinstance(seed, int):
        return jsonify({"error": "seed must be an integer"}), 400

    situation_probability = data.get("situation_probability", DEFAULT_SITUATION_PROBABILITY)
    if not isinstance(situation_probability, (int, float)) or not 0.0 <= situation_probability <= 1.0:
        return jsonify({"error": "situation_probability must be a number in [0, 1]"}), 400

    try:
        generator = _create_generator(llm_config)
        game_id = str(uuid.uuid4())
        session = GameSession(
            game_id=game_id,
            generator=generator,
            seed=seed,
            situation_probability=float(situation_probability),
        )
        _games[game_id] = session
        session.start()
    except Exception as e:
        app.logger.error(f"Error creating game: {e}", exc_info=True)
        return jsonify({"error": "Failed to create game", "message": str(e)}), 500

    return jsonify({"game_id": game_id, "game": session.snapshot()}), 201


@app.route("/api/games/<game_id>", methods=["GET"])
def get_game(game_id: str):
    """Get game phase, character and transcript (optionally from ?since=N)."""
    session = _get_session(game_id)
    if session is None:
        return jsonify({"error": "Game not found"}), 404
    since = request.args.get("since", default=0, type=int)
    return jsonify(session.snapshot(since=since))


@app.route("/api/games/<game_id>", methods=["DELETE"])
def delete_game(game_id: str):
    """Stop and forget a game."""
    session = _games.pop(game_id, None)
    if session is None:
        return jsonify({"error": "Game not found"}), 404
    session.stop(timeout=1.0)
    return jsonify({"success": True, "game_id": game_id})


@app.route("/api/games/<game_id>/input", methods=["POST"])
def submit_input(game_id: str):
    """Submit a line of player text."""
    if not request.is_json:
        return jsonify({"error": "Content-Type must be application/json"}), 400

    data = request.get_json(silent=True)
    if not data:
        return jsonify({"error": "No data provided"}), 400

    text = data.get("text")
    if not isinstance(text, str):
        return jsonify({"error": "Input text is required"}), 400

    session = _get_session(game_id)
    if session is None:
        return jsonify({"error": "Game not found"}), 404
    if not session.alive:
        return jsonify({"error": "Game is not running", "message": session.error}), 409

    sanitized = _input_sanitizer.sanitize(text)
    if not session.presenter.submit(sanitized):
        return jsonify({"error": "Input is empty"}), 400
    return jsonify({"success": True, "text": sanitized})


@app.route("/api/games/<game_id>/age-up", methods=["POST"])
def age_up(game_id: str):
    """Queue an age-up; it applies once the turn in progress completes."""
    session = _get_session(game_id)
    if session is None:
        return jsonify({"error": "Game not found"}), 404
    session.age_signal.trigger()
    return jsonify({"success": True, "pending_age_ups": session.age_signal.pending})


@app.route("/api/config/llm", methods=["GET"])
def get_llm_config():
    """Get current LLM configuration."""
    return jsonify({"config": _llm_config_manager.config.model_dump(exclude={"api_key"})})


@app.route("/api/config/llm", methods=["POST"])
def update_llm_config():
    """Update LLM configuration (hot-reload for games using the default config)."""
    if not request.is_json:
        return jsonify({"error": "Content-Type must be application/json"}), 400

    data = request.get_json(silent=True)
    if not data:
        return jsonify({"error": "No data provided"}), 400

    try:
        new_config = LLMConfig(**data)
    except ValidationError as e:
        app.logger.error(f"Error updating LLM config: {e}")
        return jsonify({"error": "Invalid configuration", "message": str(e)}), 400

    _llm_config_manager.update_config(new_config)
    return jsonify({"success": True, "config": _llm_config_manager.config.model_dump(exclude={"api_key"})})


if __name__ == "__main__":
    app.run(debug=True, port=5000)
