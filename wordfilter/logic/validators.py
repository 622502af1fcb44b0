# wordfilter/logic/validators.py

"""Validation helpers for sensitive word list entries."""

import re
import logging
from typing import List

logger = logging.getLogger(__name__)


class ValidationLogic:
    """Utility methods for cleaning and checking keywords."""

    # Byte order marks and zero-width characters left behind by editors
    INVISIBLE = re.compile(r"[\ufeff\u200b\u200c\u200d\u2060]")

    @staticmethod
    def clean_keyword(line: str) -> str:
        """Strips invisible characters and surrounding whitespace.

        Args:
            line: Raw line read from a word list

        Returns:
            Cleaned keyword, empty when the line holds no keyword
        """
        return ValidationLogic.INVISIBLE.sub("", line).strip()

    @staticmethod
    def unmatchable_characters(keyword: str, classifier) -> List[str]:
        """Returns the characters of a keyword the scanner can never match.

        The scanner skips separators instead of descending the trie on them,
        so a keyword containing one is compiled but never detected.

        Args:
            keyword: Keyword to check
            classifier: Object exposing is_separator(char)

        Returns:
            Separator characters found in the keyword, in order
        """
        return [c for c in keyword if classifier.is_separator(c)]

    # Unicode spaces that still count as content
    NON_BREAKING = frozenset("\u00a0\u2007\u202f\u0085")

    @staticmethod
    def is_blank(text: str) -> bool:
        """True for empty text or text made only of breaking whitespace.

        Non-breaking spaces (U+00A0, U+2007, U+202F) and NEL (U+0085) are
        treated as content, so a text holding only those is scanned.
        """
        return all(
            c.isspace() and c not in ValidationLogic.NON_BREAKING for c in text
        )
