# wordfilter/engine/filter.py

"""Sensitive word filter engine wiring the dictionary, classifier and scanner."""

import logging
from typing import Iterable, Optional

from wordfilter.core.definitions import Defaults, Script
from wordfilter.core.domain import FilterResult
from wordfilter.core.exceptions import InitializationError, ValidationError
from wordfilter.engine.classifier import CharClassifier
from wordfilter.engine.scanner import Scanner
from wordfilter.engine.trie import Dictionary, DictionaryBuilder
from wordfilter.logic.validators import ValidationLogic

logger = logging.getLogger(__name__)


class SensitiveWordFilter:
    """Long-lived filter over an immutable keyword dictionary.

    Safe to share between threads: scanning only reads the dictionary.
    """

    def __init__(
        self,
        dictionary: Dictionary,
        classifier: CharClassifier,
        replacement: str = Defaults.REPLACEMENT,
    ) -> None:
        self.dictionary = dictionary
        self.classifier = classifier
        self._scanner = Scanner(dictionary, classifier, replacement)

    @classmethod
    def from_keywords(
        cls,
        keywords: Iterable[str],
        replacement: str = Defaults.REPLACEMENT,
        scripts: Iterable[str] = (Script.CJK,),
    ) -> "SensitiveWordFilter":
        """Compiles a keyword list into a ready-to-use filter.

        Args:
            keywords: Keywords to mask, in any order
            replacement: Token substituted for each occurrence
            scripts: Matchable scripts declared in charsets.yaml

        Returns:
            Initialized SensitiveWordFilter

        Raises:
            ConfigurationError: If a script name is unknown.
            InitializationError: If the dictionary cannot be built.
        """
        if not replacement:
            raise InitializationError("Replacement token cannot be empty")

        classifier = CharClassifier.from_scripts(scripts)
        builder = DictionaryBuilder()

        try:
            for keyword in keywords:
                builder.insert(keyword)

                unmatchable = ValidationLogic.unmatchable_characters(
                    keyword, classifier
                )
                if unmatchable:
                    logger.warning(
                        "Keyword contains separator characters and will never match",
                        extra={"keyword": keyword, "separators": unmatchable},
                    )

            dictionary = builder.build()

        except ValidationError as e:
            logger.error("Invalid keyword in word list", exc_info=True)
            raise InitializationError(f"Failed to build keyword dictionary: {e}") from e

        logger.info(
            "Sensitive word filter initialized",
            extra={"keyword_count": dictionary.keyword_count},
        )
        return cls(dictionary, classifier, replacement)

    @property
    def replacement(self) -> str:
        return self._scanner.replacement

    def scan(self, text: Optional[str]) -> Optional[str]:
        """Returns the masked text, or None for blank input."""
        return self._scanner.scan(text)

    def process(self, text: str) -> FilterResult:
        """Masks keywords and returns the result with masked spans.

        Args:
            text: Raw input text

        Returns:
            FilterResult; blank input yields an empty filtered text
        """
        filtered, matches = self._scanner.scan_with_matches(text)

        if filtered is None:
            return FilterResult(
                original_text=text or "",
                filtered_text="",
                metadata={"status": "empty", "count": 0},
            )

        logger.debug(
            "Filtering completed",
            extra={"match_count": len(matches), "text_length": len(text)},
        )

        return FilterResult(
            original_text=text,
            filtered_text=filtered,
            matches=matches,
            metadata={
                "status": "ok",
                "count": len(matches),
                "keyword_count": self.dictionary.keyword_count,
                "replacement": self.replacement,
            },
        )
