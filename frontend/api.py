# frontend/api.py

import logging
import re

from flask import Blueprint, Response, abort, current_app, jsonify, redirect, request

from backend.errors import GameInProgress
from frontend.redirects import safe_redirect_target

logger = logging.getLogger(__name__)

api_blueprint = Blueprint("api", __name__)

COORD_PATTERN = re.compile(r"-?[0-9]+")

NO_CACHE_HEADERS = {
    "Cache-Control": "no-cache, no-store, must-revalidate",
    "Pragma": "no-cache",
    "Expires": "0",
}


def get_engine():
    return current_app.extensions["minesweeper"]["engine"]


def get_images():
    return current_app.extensions["minesweeper"]["images"]


def parse_coords(row, col):
    if not (COORD_PATTERN.fullmatch(row) and COORD_PATTERN.fullmatch(col)):
        abort(400, description="Row and column must be integers.")
    return int(row), int(col)


def image_response(key):
    images = get_images()
    data = images.get(key)
    if data is None:
        abort(404)
    return Response(data, mimetype=images.content_type(key), headers=NO_CACHE_HEADERS)


def redirect_back():
    settings = current_app.config["REDIRECT"]
    target = safe_redirect_target(
        request.headers.get("Referer"),
        settings.get("github_user"),
        settings["fallback_url"],
    )
    return redirect(target)


@api_blueprint.route("/cell/<row>/<col>/image", methods=["GET"])
def cell_image(row, col):
    row, col = parse_coords(row, col)
    return image_response(get_engine().image_key_for_cell(row, col))


@api_blueprint.route("/cell/<row>/<col>/click", methods=["GET"])
def cell_click(row, col):
    row, col = parse_coords(row, col)
    get_engine().reveal_cell(row, col)
    return redirect_back()


@api_blueprint.route("/game/status", methods=["GET"])
def game_status():
    return image_response(get_engine().game_status_image_key())


@api_blueprint.route("/game/reset", methods=["GET"])
def game_reset():
    try:
        get_engine().reset_game()
    except GameInProgress as exc:
        logger.info("Reset ignored: %s", exc)
    return redirect_back()


@api_blueprint.route("/game/state", methods=["GET"])
def game_state():
    return jsonify(get_engine().get_state())
