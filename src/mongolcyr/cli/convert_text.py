"""CLI entrypoint converting romanized Mongolian text to Cyrillic."""

from __future__ import annotations

import argparse
import json
import logging

from mongolcyr.cli._common import add_input_arguments, load_settings, read_input_lines
from mongolcyr.transliteration.engine import Transliterator
from mongolcyr.transliteration.lexicon import LexiconError


logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Convert Latin-script Mongolian to Mongolian Cyrillic")
    add_input_arguments(parser)
    parser.add_argument("--plain", action="store_true", help="Print only the converted text")
    args = parser.parse_args(argv)

    try:
        settings = load_settings(args)
        transliterator = Transliterator.from_settings(settings)
        source, lines = read_input_lines(args)
    except (LexiconError, ValueError, OSError) as error:
        logger.error("Conversion aborted: %s", error)
        print(json.dumps({"error": str(error)}, ensure_ascii=False, indent=2))
        return 1

    converted = "\n".join(transliterator.convert_lines(lines))
    if args.plain:
        print(converted)
        return 0

    payload = {
        "source": source,
        "lines": len(lines),
        "text": converted,
    }
    print(json.dumps(payload, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
