"""
HTTP front for a maze-solving session (Flask).
Endpoints:
  GET /awake             -> builds a new maze, returns the first survey
  GET /move/<direction>  -> up|down|left|right (or compass names), returns the new survey
  GET /done              -> solve count and average steps for the session
Failed moves answer 409 with error=true and a message.
"""
import logging

from flask import Flask, jsonify

from labyrinth.core.errors import MazeError
from labyrinth.core.grid import parse_direction
from labyrinth.core.navigator import Survey
from labyrinth.core.session import Session
from labyrinth.viz.ascii import render

logger = logging.getLogger(__name__)

CONFLICT = 409


def reply(survey: Survey = None, victory: bool = False, error: bool = False, message: str = ""):
    return {
        "survey": survey.as_dict() if survey is not None else None,
        "victory": victory,
        "error": error,
        "message": message,
    }


def create_app(session: Session) -> Flask:
    app = Flask(__name__)

    @app.route("/awake", methods=["GET"])
    def awake():
        try:
            survey = session.awake()
        except MazeError as e:
            return jsonify(reply(error=True, message=str(e))), CONFLICT
        logger.info("\n%s", render(session.grid, session.navigator.position))
        return jsonify(reply(survey))

    @app.route("/move/<direction>", methods=["GET"])
    def move(direction):
        try:
            survey = session.move(parse_direction(direction))
        except (MazeError, ValueError) as e:
            return jsonify(reply(error=True, message=str(e))), CONFLICT

        if survey.victory:
            steps = session.navigator.steps_taken
            return jsonify(reply(survey, victory=True, message=f"Victory achieved in {steps} steps"))
        return jsonify(reply(survey))

    @app.route("/done", methods=["GET"])
    def done():
        return jsonify(session.results())

    return app
