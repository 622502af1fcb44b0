# wordfilter/engine/scanner.py

"""Single-pass keyword masking over a built Dictionary."""

import logging
from typing import List, Optional, Tuple

from wordfilter.core.definitions import Defaults
from wordfilter.core.domain import MaskedSpan
from wordfilter.engine.classifier import CharClassifier
from wordfilter.engine.trie import Dictionary
from wordfilter.logic.validators import ValidationLogic

logger = logging.getLogger(__name__)


class Scanner:
    """Masks every dictionary keyword found in a text.

    The scan walks the text once with a match start index, a position index
    and a trie node. A mismatch emits the character at the match start and
    restarts the trie descent one character to the right; there are no
    failure links. Separators are emitted when no match is in progress and
    skipped while one is, so "b-a-d" still matches "bad".
    """

    def __init__(
        self,
        dictionary: Dictionary,
        classifier: CharClassifier,
        replacement: str = Defaults.REPLACEMENT,
    ) -> None:
        self._dictionary = dictionary
        self._classifier = classifier
        self._replacement = replacement

    @property
    def replacement(self) -> str:
        return self._replacement

    def scan(self, text: Optional[str]) -> Optional[str]:
        """Returns the masked text, or None for blank input."""
        masked, _ = self.scan_with_matches(text)
        return masked

    def scan_with_matches(
        self, text: Optional[str]
    ) -> Tuple[Optional[str], List[MaskedSpan]]:
        """Masks keywords and reports the spans that were replaced.

        Args:
            text: Input text; None, empty and whitespace-only are blank

        Returns:
            Tuple of masked text (None for blank input) and masked spans
        """
        if not text or ValidationLogic.is_blank(text):
            return None, []

        root = self._dictionary.root
        child_of = self._dictionary.child_of
        is_separator = self._classifier.is_separator

        node = root
        begin = position = 0
        length = len(text)
        output: List[str] = []
        matches: List[MaskedSpan] = []

        while position < length:
            char = text[position]

            if is_separator(char):
                # At the root begin == position, so the separator is emitted
                if node is root:
                    output.append(char)
                    begin += 1
                position += 1
                continue

            node = child_of(node, char)

            if node is None:
                # Restart one character right of the failed start
                output.append(text[begin])
                begin += 1
                position = begin
                node = root
            elif node.is_terminal:
                output.append(self._replacement)
                matches.append(
                    MaskedSpan(start=begin, end=position + 1, text=text[begin : position + 1])
                )
                position += 1
                begin = position
                node = root
            else:
                position += 1

            # Drain a window that reached the end without completing a keyword
            if position == length and begin != position:
                output.append(text[begin])
                begin += 1
                position = begin
                node = root

        return "".join(output), matches
