# wordfilter/service/pipeline.py

"""Main filtering service pipeline."""

import logging
import threading
from typing import Iterable, Optional

from wordfilter.service.config import settings
from wordfilter.engine.filter import SensitiveWordFilter
from wordfilter.core.domain import FilterResult
from wordfilter.core.loader import load_keywords
from wordfilter.logic.validators import ValidationLogic
from wordfilter.core.exceptions import (
    ConfigurationError,
    FilterError,
    InitializationError,
)

logger = logging.getLogger(__name__)


class FilterService:
    """Singleton service wrapper for the sensitive word filter.

    The engine is built once on first use. reload() builds a complete new
    engine and swaps the shared reference, so scans already running keep
    reading the previous, untouched dictionary.
    """

    _instance: Optional[SensitiveWordFilter] = None
    _lock = threading.Lock()

    @classmethod
    def _build(cls, keywords: Optional[Iterable[str]] = None) -> SensitiveWordFilter:
        if keywords is None:
            keywords = load_keywords(settings.word_list_path)

        try:
            return SensitiveWordFilter.from_keywords(
                keywords,
                replacement=settings.replacement,
                scripts=settings.matchable_scripts,
            )
        except Exception as e:
            logger.error("Failed to initialize sensitive word filter", exc_info=True)
            if isinstance(e, (InitializationError, ConfigurationError)):
                raise
            raise InitializationError("Sensitive word filter initialization failed") from e

    @classmethod
    def get_instance(cls) -> SensitiveWordFilter:
        """Returns singleton filter engine instance.

        Returns:
            Initialized SensitiveWordFilter

        Raises:
            InitializationError: If engine initialization fails
        """
        if cls._instance is None:
            with cls._lock:
                # Double-checked locking pattern
                if cls._instance is None:
                    logger.info("Initializing sensitive word filter")
                    cls._instance = cls._build()

        return cls._instance

    @classmethod
    def reload(cls, keywords: Optional[Iterable[str]] = None) -> SensitiveWordFilter:
        """Rebuilds the engine and atomically replaces the shared instance.

        Args:
            keywords: New keyword list; the configured word list is re-read when omitted

        Returns:
            The newly installed engine. On failure the previous engine stays active.
        """
        engine = cls._build(keywords)

        with cls._lock:
            previous = cls._instance
            cls._instance = engine

        logger.info(
            "Sensitive word filter reloaded",
            extra={
                "keyword_count": engine.dictionary.keyword_count,
                "previous_keyword_count": (
                    previous.dictionary.keyword_count if previous else 0
                ),
            },
        )
        return engine

    @classmethod
    def reset(cls) -> None:
        """Drops the shared engine; the next call rebuilds it."""
        with cls._lock:
            cls._instance = None


def filter_text(text: str) -> FilterResult:
    """Main entry point for text filtering.

    Args:
        text: Input text to filter

    Returns:
        FilterResult with masked text and metadata.
        On failure, returns the text unmasked with the error recorded.
    """
    if text is None or (isinstance(text, str) and ValidationLogic.is_blank(text)):
        logger.debug("Blank text provided for filtering")
        return FilterResult(
            original_text=text or "",
            filtered_text="",
            metadata={"status": "empty", "count": 0},
        )

    if not isinstance(text, str):
        logger.error(f"Invalid input type received: {type(text)}")
        return FilterResult(
            original_text=str(text),
            filtered_text=str(text),
            metadata={"error": "Invalid input format", "status": "failed"},
        )

    try:
        engine = FilterService.get_instance()
        result = engine.process(text)

        logger.info(
            "Filtering request completed",
            extra={"text_length": len(text), "match_count": len(result.matches)},
        )
        return result

    except FilterError as e:
        # Known errors, log with context but hide internal details in response
        logger.error(
            f"Known error during filtering: {type(e).__name__}",
            exc_info=True,
            extra={"text_length": len(text)},
        )
        return FilterResult(
            original_text=text,
            filtered_text=text,
            metadata={
                "error": "The filter service encountered a processing error.",
                "status": "failed",
                "error_type": type(e).__name__,
            },
        )

    except Exception:
        # Catch-all for unexpected bugs
        logger.error(
            "Unexpected critical error in filtering pipeline",
            exc_info=True,
            extra={"text_length": len(text)},
        )
        return FilterResult(
            original_text=text,
            filtered_text=text,
            metadata={
                "error": "An unexpected system error occurred.",
                "status": "failed",
            },
        )
