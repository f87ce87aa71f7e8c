"""
Positional alignment of two block sequences.

Block i of the localized document is shown next to block i of the
source document. There is no content matching: a missing block on the
shorter side is simply rendered as an empty cell.

With the markdown-aware paragraph strategy the aligner also emits
synthetic rows after each pair:
- a continuation row ('>' on one side) when that side has blockquotes
  at i and i+1, so a multi-paragraph quote reads as one quote
- a spacer row when either index i or i+1 has no markdown on either
  side, to separate prose from list/quote runs

Emission order within an index is fixed:
    PAIR, LEFT_CONTINUATION, RIGHT_CONTINUATION, SPACER
"""

import logging
from typing import List, Sequence

from l10ndiff.core.models import (
    AlignedRow,
    RowKind,
    SplitConfig,
    CONTINUATION_MARKER,
    DEFAULT_SPLIT_CONFIG,
    is_blockquote,
    is_markdown,
)

logger = logging.getLogger(__name__)


def _block_at(blocks: Sequence[str], index: int) -> str:
    """Block at index, or "" past the end of the sequence."""
    if index < len(blocks):
        return blocks[index]
    return ""


def align(
    left: Sequence[str],
    right: Sequence[str],
    config: SplitConfig = DEFAULT_SPLIT_CONFIG,
) -> List[AlignedRow]:
    """
    Pair two block sequences index by index.

    Args:
        left: Blocks of the localized document
        right: Blocks of the source document
        config: The SplitConfig both sequences were produced with

    Returns:
        Rows in render order. There is one PAIR row per index up to
        max(len(left), len(right)); synthetic rows only add to that.
    """
    max_length = max(len(left), len(right))
    rows: List[AlignedRow] = []

    for i in range(max_length):
        current_left = _block_at(left, i)
        current_right = _block_at(right, i)
        rows.append(AlignedRow(i, RowKind.PAIR, current_left, current_right))

        if not config.emits_markers or i + 1 >= max_length:
            continue

        next_left = _block_at(left, i + 1)
        next_right = _block_at(right, i + 1)

        if is_blockquote(current_left) and is_blockquote(next_left):
            rows.append(AlignedRow(i, RowKind.LEFT_CONTINUATION, left=CONTINUATION_MARKER))

        if is_blockquote(current_right) and is_blockquote(next_right):
            rows.append(AlignedRow(i, RowKind.RIGHT_CONTINUATION, right=CONTINUATION_MARKER))

        current_is_markdown = is_markdown(current_left) or is_markdown(current_right)
        next_is_markdown = is_markdown(next_left) or is_markdown(next_right)
        if not current_is_markdown or not next_is_markdown:
            rows.append(AlignedRow(i, RowKind.SPACER))

    logger.debug("Aligned %d/%d blocks into %d rows", len(left), len(right), len(rows))
    return rows
