"""
Document segmentation for side-by-side review.

This module splits a document into the blocks that the aligner pairs
by position. Both documents of a comparison go through the same
configuration so that corresponding units land on the same index.

Strategy:
1. Split on the method's literal delimiter ("\\n\\n" or "\\n")
2. Optionally run a markdown refinement pass on every piece:
   - DOUBLE: regroup lines, normalizing blockquote markers to "> "
   - SINGLE: cut again before list items and blockquote lines

Design Decisions:
- Plain delimiter split keeps empty pieces (nothing is dropped)
- Refinement uses explicit line scans rather than regex lookahead
- Pure functions: no state between calls
"""

import logging
from typing import List, Optional, Union

from l10ndiff.core.models import (
    BlockSequence,
    SplitConfig,
    SplitMethod,
    DEFAULT_SPLIT_CONFIG,
)

logger = logging.getLogger(__name__)

# Canonical prefix for blockquote lines after normalization.
BLOCKQUOTE_PREFIX = "> "

LIST_ITEM_MARKER = "- "


def segment(
    content: str,
    config: Union[SplitConfig, SplitMethod, str, None] = None,
    markdown_aware: Optional[bool] = None,
) -> BlockSequence:
    """
    Split a document into an ordered list of blocks.

    Args:
        content: Raw document text
        config: SplitConfig, or a SplitMethod (enum or string) combined
                with markdown_aware
        markdown_aware: Overrides/sets the markdown flag when config is
                        given as a method

    Returns:
        List of block strings in document order

    Raises:
        ConfigurationError: If the method cannot be recognised

    Example:
        >>> segment("> a\\n> b\\n\\n> c", SplitConfig(SplitMethod.DOUBLE, True))
        ['> a\\n> b', '> c']
        >>> segment("a\\n\\nb", "double", False)
        ['a', 'b']
    """
    cfg = _resolve_config(config, markdown_aware)
    pieces = content.split(cfg.method.delimiter)

    if not cfg.markdown_aware:
        logger.debug("Segmented %d chars into %d blocks (%s)",
                     len(content), len(pieces), cfg.method.value)
        return pieces

    blocks: List[str] = []
    for piece in pieces:
        if cfg.method is SplitMethod.DOUBLE:
            blocks.extend(_regroup_block(piece))
        else:
            blocks.extend(_split_markdown_boundaries(piece))

    if not blocks:
        # Empty document: keep the single empty block of the plain split
        blocks = [""]

    logger.debug("Segmented %d chars into %d blocks (%s, markdown)",
                 len(content), len(blocks), cfg.method.value)
    return blocks


def _resolve_config(
    config: Union[SplitConfig, SplitMethod, str, None],
    markdown_aware: Optional[bool],
) -> SplitConfig:
    """Normalize the accepted config spellings to a SplitConfig."""
    if config is None:
        config = DEFAULT_SPLIT_CONFIG

    if isinstance(config, SplitConfig):
        if markdown_aware is None or markdown_aware == config.markdown_aware:
            return config
        return SplitConfig.from_values(config.method, markdown_aware)

    if markdown_aware is None:
        markdown_aware = DEFAULT_SPLIT_CONFIG.markdown_aware
    return SplitConfig.from_values(config, markdown_aware)


def _normalize_line(line: str) -> str:
    """
    Normalize one line of a blank-line-delimited block.

    Blockquote lines lose their '>' and surrounding whitespace and get
    the canonical "> " prefix back. Other lines are returned verbatim,
    so a whitespace-only line stays part of the block. Returns "" only
    for an empty line or a quote marker without text.
    """
    stripped = line.strip()
    if stripped.startswith(">"):
        payload = stripped[1:].strip()
        return BLOCKQUOTE_PREFIX + payload if payload else ""
    return line


def _regroup_block(block: str) -> BlockSequence:
    """
    Re-segment one blank-line-delimited block line by line.

    Non-empty lines accumulate into a running sub-block; an empty line
    flushes it. Quoted paragraphs with inconsistent marker spacing on
    either side end up identical.

    Args:
        block: One piece of a "\\n\\n" split

    Returns:
        Sub-blocks in order (possibly none)
    """
    result: List[str] = []
    current: List[str] = []

    for line in block.split("\n"):
        normalized = _normalize_line(line)
        if not normalized:
            if current:
                result.append("\n".join(current))
                current = []
        else:
            current.append(normalized)

    if current:
        result.append("\n".join(current))

    return result


def _starts_list_item(rest: str) -> bool:
    """Text after a newline opens a list item (leading whitespace allowed)."""
    return rest.lstrip().startswith(LIST_ITEM_MARKER)


def _starts_blockquote(rest: str) -> bool:
    """Text after a newline opens a blockquote (marker in first column)."""
    return rest.startswith(">")


def _split_markdown_boundaries(piece: str) -> BlockSequence:
    """
    Cut a piece before list items and blockquote lines.

    Boundaries are found by scanning every newline:
    - newline + list item: the newline is dropped, the item starts a
      new piece
    - newline + '>': the cut falls before the newline, which stays at
      the start of the following piece

    Args:
        piece: One piece of the first splitting pass

    Returns:
        Pieces in order; concatenation loses only the consumed newlines
    """
    result: List[str] = []
    start = 0
    pos = piece.find("\n")

    while pos != -1:
        rest = piece[pos + 1:]
        if _starts_list_item(rest):
            result.append(piece[start:pos])
            start = pos + 1
        elif _starts_blockquote(rest) and pos > start:
            result.append(piece[start:pos])
            start = pos
        pos = piece.find("\n", pos + 1)

    result.append(piece[start:])
    return result
