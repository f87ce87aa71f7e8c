"""
Row-level statistics for a comparison.

This module turns the aligner's output into a small summary used by the
review page header: how many blocks each side has, how many rows of
each kind were emitted, and how many indices have text on one side
only.

Design Principles:
- Pure transformation: no re-segmentation or re-alignment
- Inspection-first: counts are raw, interpretation is left to the UI
"""

from dataclasses import dataclass
from typing import Any, Dict, Sequence

from l10ndiff.core.models import AlignedRow, RowKind


@dataclass
class ComparisonSummary:
    """
    Counts describing one aligned comparison.

    Attributes:
        left_block_count: Blocks in the localized document
        right_block_count: Blocks in the source document
        total_rows: All rows, synthetic ones included
        pair_rows: PAIR rows (== max of the two block counts)
        continuation_rows: LEFT_ and RIGHT_CONTINUATION rows
        spacer_rows: SPACER rows
        unmatched_indices: PAIR rows with text on exactly one side
    """
    left_block_count: int
    right_block_count: int
    total_rows: int
    pair_rows: int
    continuation_rows: int
    spacer_rows: int
    unmatched_indices: int

    @property
    def block_count_delta(self) -> int:
        """Localized blocks minus source blocks (negative: localized is shorter)."""
        return self.left_block_count - self.right_block_count

    @property
    def is_balanced(self) -> bool:
        """Both documents split into the same number of blocks."""
        return self.left_block_count == self.right_block_count

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "left_block_count": self.left_block_count,
            "right_block_count": self.right_block_count,
            "total_rows": self.total_rows,
            "pair_rows": self.pair_rows,
            "continuation_rows": self.continuation_rows,
            "spacer_rows": self.spacer_rows,
            "unmatched_indices": self.unmatched_indices,
            "block_count_delta": self.block_count_delta,
        }


def summarize_rows(
    left: Sequence[str],
    right: Sequence[str],
    rows: Sequence[AlignedRow],
) -> ComparisonSummary:
    """
    Build a ComparisonSummary from blocks and their aligned rows.

    Args:
        left: Localized blocks passed to align()
        right: Source blocks passed to align()
        rows: Rows returned by align()

    Returns:
        ComparisonSummary
    """
    counts = {kind: 0 for kind in RowKind}
    unmatched = 0
    for row in rows:
        counts[row.kind] += 1
        if row.is_unmatched:
            unmatched += 1

    return ComparisonSummary(
        left_block_count=len(left),
        right_block_count=len(right),
        total_rows=len(rows),
        pair_rows=counts[RowKind.PAIR],
        continuation_rows=counts[RowKind.LEFT_CONTINUATION] + counts[RowKind.RIGHT_CONTINUATION],
        spacer_rows=counts[RowKind.SPACER],
        unmatched_indices=unmatched,
    )
