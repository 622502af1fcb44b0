# wordfilter/core/domain.py

"""Domain models for filter results."""

from dataclasses import dataclass, field
from typing import List, Dict, Any


@dataclass
class MaskedSpan:
    """Represents a single keyword occurrence that was masked.

    Attributes:
        start: Starting character position in original text
        end: Ending character position (exclusive) in original text
        text: Original text of the span, including absorbed separators
    """

    start: int
    end: int
    text: str


@dataclass
class FilterResult:
    """Result object returned by the filter service.

    Attributes:
        original_text: Unfiltered input text
        filtered_text: Text with sensitive keywords masked
        matches: Masked spans in order of appearance
        metadata: Additional processing information
    """

    original_text: str
    filtered_text: str
    matches: List[MaskedSpan] = field(default_factory=list)
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def flagged(self) -> bool:
        """True when at least one keyword was masked."""
        return bool(self.matches)
