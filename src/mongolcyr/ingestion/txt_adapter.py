"""Plain-text input reader with encoding detection."""

from __future__ import annotations

from pathlib import Path

from charset_normalizer import from_bytes


class TXTReader:
    """Read romanized text files whose encoding is not known up front."""

    def read_text(self, path: Path) -> str:
        raw = path.read_bytes()
        if not raw:
            return ""
        encoding = self._detect_encoding(raw)
        return raw.decode(encoding)

    def read_lines(self, path: Path) -> list[str]:
        return self.read_text(path).splitlines()

    def _detect_encoding(self, raw: bytes) -> str:
        # Single romanized lines are too short for detection; valid UTF-8 wins outright.
        try:
            raw.decode("utf-8")
            return "utf-8"
        except UnicodeDecodeError:
            pass

        best = from_bytes(raw).best()
        if best and best.encoding:
            name = best.encoding.lower()
            if name in {"windows-1251", "cp1251"}:
                return "cp1251"
            return best.encoding

        try:
            raw.decode("cp1251")
            return "cp1251"
        except UnicodeDecodeError:
            raise ValueError("Could not detect TXT encoding") from None
