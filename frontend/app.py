# frontend/app.py

import logging
import os

from flask import Flask, request

from backend.game import GameEngine
from backend.images import ImageStore
from frontend.api import api_blueprint
from frontend.config import load_config, merge_config
from frontend.table import generate_table_html

DEFAULT_IMAGE_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "static", "images")


def create_app(config: dict = None, engine: GameEngine = None, images: ImageStore = None) -> Flask:
    """
    Build the Flask app around one shared game engine.

    config is a dict shaped like config/server.yaml (missing keys take the
    defaults). engine and images can be passed in to share or fake them.
    """
    config = merge_config(config or {})
    game_cfg = config["game"]

    if engine is None:
        engine = GameEngine(
            rows=game_cfg["rows"],
            cols=game_cfg["cols"],
            num_mines=game_cfg["mines"],
            seed=game_cfg["seed"],
        )
    if images is None:
        images = ImageStore(config["images"]["directory"] or DEFAULT_IMAGE_DIR)

    app = Flask(__name__, static_folder="static")
    app.config["REDIRECT"] = config["redirect"]
    app.config["BASE_URL"] = config["server"]["base_url"]
    app.extensions["minesweeper"] = {"engine": engine, "images": images}
    app.register_blueprint(api_blueprint)

    @app.route("/")
    def index():
        base_url = app.config["BASE_URL"] or request.host_url
        table = generate_table_html(base_url, engine.rows, engine.cols)
        return f"<!DOCTYPE html>\n<html>\n<body>\n{table}\n</body>\n</html>\n"

    return app


def main():
    import argparse

    parser = argparse.ArgumentParser()
    parser.add_argument("--config", type=str, default=None, help="Path to server config yaml")
    parser.add_argument("--port", type=int, default=None, help="Port to run the server on")
    parser.add_argument("--host", type=str, default=None, help="Host IP")
    parser.add_argument("--debug", action="store_true", help="Enable debug mode")
    args = parser.parse_args()

    config = load_config(args.config)
    logging.basicConfig(
        level=config["logging"]["level"],
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    host = args.host or config["server"]["host"]
    port = args.port or config["server"]["port"]

    app = create_app(config)
    print(f"Running on http://{host}:{port}/")
    # Threaded requests all funnel through the engine lock.
    app.run(debug=args.debug, host=host, port=port, use_reloader=False)


if __name__ == "__main__":
    main()
