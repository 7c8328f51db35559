"""CLI entrypoint reporting converted words that mix harmony classes."""

from __future__ import annotations

import argparse
import json
import logging

from mongolcyr.cli._common import add_input_arguments, load_settings, read_input_lines
from mongolcyr.transliteration.engine import Transliterator, tokenize
from mongolcyr.transliteration.harmony import is_harmony_consistent
from mongolcyr.transliteration.lexicon import LexiconError


logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Flag converted words whose vowels break harmony")
    add_input_arguments(parser)
    args = parser.parse_args(argv)

    try:
        settings = load_settings(args)
        transliterator = Transliterator.from_settings(settings)
        _, lines = read_input_lines(args)
    except (LexiconError, ValueError, OSError) as error:
        logger.error("Harmony check aborted: %s", error)
        print(json.dumps({"error": str(error)}, ensure_ascii=False, indent=2))
        return 1

    word_count = 0
    mixed: list[dict[str, str]] = []
    for line in lines:
        for word in tokenize(line):
            word_count += 1
            converted = transliterator.convert(word)
            if not is_harmony_consistent(converted):
                mixed.append({"source": word, "converted": converted})

    if mixed:
        logger.warning("%s of %s words mix harmony classes", len(mixed), word_count)

    payload = {
        "words": word_count,
        "mixed": mixed,
    }
    print(json.dumps(payload, ensure_ascii=False, indent=2))
    return 0 if not mixed else 1


if __name__ == "__main__":
    raise SystemExit(main())
