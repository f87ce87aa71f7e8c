"""
Core segmentation and alignment engine.

This module provides the foundational logic for:
- Document segmentation (blank-line or line splitting, markdown refinement)
- Positional alignment with continuation and spacer rows
- Entry comparison with the unavailable-entry short circuit
- Metadata panels and row statistics
"""

from l10ndiff.core.segmenter import segment
from l10ndiff.core.aligner import align
from l10ndiff.core.engine import compare_entries, compare_texts, ComparisonError, ComparisonResult
from l10ndiff.core.models import (
    AlignedRow,
    ConfigurationError,
    Entry,
    RowKind,
    SplitConfig,
    SplitMethod,
    UNAVAILABLE,
)
from l10ndiff.core.diagnostics import ComparisonSummary, summarize_rows

__all__ = [
    # Segmentation and alignment
    "segment",
    "align",
    # Comparison
    "compare_entries",
    "compare_texts",
    "ComparisonError",
    "ComparisonResult",
    # Models
    "AlignedRow",
    "ConfigurationError",
    "Entry",
    "RowKind",
    "SplitConfig",
    "SplitMethod",
    "UNAVAILABLE",
    # Statistics
    "ComparisonSummary",
    "summarize_rows",
]
