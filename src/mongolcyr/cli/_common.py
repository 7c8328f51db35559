"""Shared argument handling for the converter CLIs."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from dotenv import load_dotenv

from mongolcyr.config import TransliterationSettings
from mongolcyr.ingestion.txt_adapter import TXTReader


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def add_input_arguments(parser: argparse.ArgumentParser) -> None:
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--text", help="Romanized text to convert")
    source.add_argument("--path", help="Text file to convert line by line")
    parser.add_argument(
        "--lexicon",
        default=None,
        help="JSON file of extra {latin: cyrillic} word overrides (overrides MONGOLCYR_LEXICON_PATH)",
    )


def load_settings(args: argparse.Namespace) -> TransliterationSettings:
    """Read settings from the environment (and .env), then apply CLI overrides."""

    load_dotenv()
    settings = TransliterationSettings.from_env()
    logging.basicConfig(format=LOG_FORMAT, level=getattr(logging, settings.log_level))

    if args.lexicon:
        settings = TransliterationSettings(lexicon_path=Path(args.lexicon), log_level=settings.log_level)
    return settings


def read_input_lines(args: argparse.Namespace) -> tuple[str, list[str]]:
    """Return a source label and the input lines for *args*."""

    if args.path is not None:
        path = Path(args.path)
        return str(path), TXTReader().read_lines(path)
    return "<text>", args.text.splitlines() or [""]

