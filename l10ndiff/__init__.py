"""
l10ndiff - Side-by-side review of localized documents

Splits a localized markdown document and its source into comparable
blocks and pairs them by position, with markdown-aware handling of
lists and blockquotes.
"""

from l10ndiff.core.engine import compare_entries, compare_texts, ComparisonError, ComparisonResult
from l10ndiff.core.segmenter import segment
from l10ndiff.core.aligner import align
from l10ndiff.core.models import (
    AlignedRow,
    ConfigurationError,
    Entry,
    RowKind,
    SplitConfig,
    SplitMethod,
    UNAVAILABLE,
    CONTINUATION_MARKER,
    PLACEHOLDER,
)
from l10ndiff.core.metadata import (
    CompareSettings,
    MetadataItem,
    MetadataPanel,
    source_file_url,
)
from l10ndiff.core.diagnostics import ComparisonSummary

__version__ = "0.1.0"
__all__ = [
    # Core pipeline
    "segment",
    "align",
    "compare_entries",
    "compare_texts",
    "ComparisonError",
    "ComparisonResult",
    # Models and configuration
    "AlignedRow",
    "ConfigurationError",
    "Entry",
    "RowKind",
    "SplitConfig",
    "SplitMethod",
    "UNAVAILABLE",
    "CONTINUATION_MARKER",
    "PLACEHOLDER",
    # Metadata
    "CompareSettings",
    "MetadataItem",
    "MetadataPanel",
    "source_file_url",
    # Statistics
    "ComparisonSummary",
]
