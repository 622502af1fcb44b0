# wordfilter/engine/classifier.py

"""Separator classification for scanned characters."""

import logging
from typing import Iterable, List, Sequence, Tuple

from wordfilter.core.definitions import Script
from wordfilter.core.loader import CharsetLoader

logger = logging.getLogger(__name__)


class CharClassifier:
    """Decides which characters take part in keyword matching.

    ASCII letters and digits are always matchable, as is any character inside
    one of the configured code point ranges. Everything else (punctuation,
    whitespace, symbols, other scripts) is a separator.
    """

    def __init__(self, ranges: Sequence[Tuple[int, int]] = ()) -> None:
        self._ranges: List[Tuple[int, int]] = sorted(ranges)

    @classmethod
    def from_scripts(cls, scripts: Iterable[str] = (Script.CJK,)) -> "CharClassifier":
        """Builds a classifier from script names declared in charsets.yaml.

        Raises:
            ConfigurationError: If a script is unknown.
        """
        loader = CharsetLoader.get_instance()
        ranges = [loader.get_range(script) for script in scripts]
        logger.debug("Character classifier created", extra={"ranges": ranges})
        return cls(ranges)

    @property
    def ranges(self) -> List[Tuple[int, int]]:
        return list(self._ranges)

    def is_separator(self, char: str) -> bool:
        if char.isascii():
            return not char.isalnum()

        code_point = ord(char)
        for start, end in self._ranges:
            if start <= code_point <= end:
                return False
        return True
