"""
Runtime settings for the guessgame apps.
Read from environment variables (a local .env file is honoured).
"""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from guessgame.datasets import DEFAULT_WORDS_PATH
from guessgame.starters import DEFAULT_STARTER, get_starter_ids

# Load environment variables from .env file if present
load_dotenv()


class Config:
    """Settings shared by the CLI and the web app."""

    def __init__(self):
        # Dictionary file, one word per line
        self.WORDS_PATH = Path(os.getenv("GUESSGAME_WORDS", str(DEFAULT_WORDS_PATH)))

        # Cold-start strategy id and optional JSON table for `curated`
        self.STARTER = os.getenv("GUESSGAME_STARTER", DEFAULT_STARTER)
        table = os.getenv("GUESSGAME_STARTERS_TABLE", "")
        self.STARTERS_TABLE: Optional[Path] = Path(table) if table else None

        self._validate_config()

    def _validate_config(self):
        """Validate that the settings are usable."""
        if self.STARTER not in get_starter_ids():
            raise ValueError(
                f"GUESSGAME_STARTER must be one of {get_starter_ids()}, got {self.STARTER!r}")


class WebConfig(Config):
    """Config plus the address the web app listens on."""

    def __init__(self):
        self.HOST = os.getenv("HOST", "127.0.0.1")
        self.PORT = os.getenv("PORT", "5000")
        super().__init__()

    def _validate_config(self):
        super()._validate_config()
        try:
            self.PORT = int(self.PORT)
        except (TypeError, ValueError) as e:
            raise ValueError(f"PORT must be an integer, got {self.PORT!r}") from e
