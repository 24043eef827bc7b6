"""
HTTP wrapper around the guessgame engine.

    $ python -m apps.web.app
    $ curl -H "Content-Type: application/json" -X POST http://localhost:5000/guess-word \
        -d '["=я^м^н=д=а"]'
    [["ябеда","ягода"]]

An empty array returns a cold-start starter set in the same envelope.
"""

from __future__ import annotations

import random
from typing import Optional, Sequence

from flask import Flask, jsonify, request

from guessgame.config import WebConfig
from guessgame.datasets import load_words, normalize_words
from guessgame.engine import FormatError, ValidationError, guess_word
from guessgame.starters import load_table, suggest

USAGE = "Usage: POST /guess-word with a JSON array of attempts, e.g. [\"=я^м^н=д=а\"]"


def create_app(cfg: Optional[WebConfig] = None, words: Optional[Sequence[str]] = None) -> Flask:
    """
    Build the Flask app. The dictionary is loaded (or the injected words
    cleaned) once here and shared, read-only, by every request.
    """
    cfg = cfg or WebConfig()
    app = Flask(__name__)
    app.json.ensure_ascii = False
    app.config["WORDS"] = normalize_words(words) if words is not None else load_words(cfg.WORDS_PATH)
    app.config["STARTER"] = cfg.STARTER
    app.config["STARTERS_TABLE"] = load_table(cfg.STARTERS_TABLE) if cfg.STARTERS_TABLE else None

    @app.route("/")
    def root():
        """Usage hint."""
        return USAGE

    @app.route("/guess-word", methods=["POST"])
    def guess_word_api():
        """Filter the dictionary by the posted attempts."""
        payload = request.get_json(silent=True)
        if not isinstance(payload, list) or not all(isinstance(s, str) for s in payload):
            return jsonify({"error": "bad_request",
                            "messages": ["Expected a JSON array of strings"]}), 400

        words = app.config["WORDS"]
        try:
            if payload:
                found = guess_word(payload, words)
            else:
                table = app.config["STARTERS_TABLE"]
                kwargs = {"table": table} if table is not None and app.config["STARTER"] == "curated" else {}
                found = suggest(words, strategy=app.config["STARTER"], rng=random.Random(), **kwargs)
        except FormatError as e:
            return jsonify({"error": "format", "messages": [str(e)]}), 400
        except ValidationError as e:
            return jsonify({"error": "validation", "messages": e.errors}), 400
        except ValueError as e:
            return jsonify({"error": "starter", "messages": [str(e)]}), 503

        return jsonify([found])

    return app


def main():
    cfg = WebConfig()
    create_app(cfg).run(host=cfg.HOST, port=cfg.PORT, debug=False)


if __name__ == "__main__":
    main()
