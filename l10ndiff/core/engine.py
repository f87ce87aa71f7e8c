"""
Comparison engine orchestrating the review pipeline.

This module provides the high-level API for comparing a localized entry
against its source entry. It coordinates:
1. The availability check (short circuit before any segmentation)
2. Segmentation of both documents with the same configuration
3. Positional alignment of the two block sequences
4. Metadata panels and row statistics

The primary entry point is compare_entries(), which takes the two entry
slots and returns a structured ComparisonResult.

Design Principles:
- Orchestration only: delegates to segmenter, aligner, metadata
- Fail-fast on configuration: bad split settings raise ComparisonError
- Deterministic: same inputs produce same outputs
- No side effects: no persistence or external calls
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Union

from l10ndiff.core.models import (
    AlignedRow,
    BlockSequence,
    ConfigurationError,
    EntrySlot,
    SplitConfig,
    SplitMethod,
    is_entry_present,
)
from l10ndiff.core.segmenter import segment
from l10ndiff.core.aligner import align
from l10ndiff.core.metadata import (
    CompareSettings,
    MetadataPanel,
    DEFAULT_SETTINGS,
    l10n_entry_properties,
    source_entry_properties,
)
from l10ndiff.core.diagnostics import ComparisonSummary, summarize_rows

logger = logging.getLogger(__name__)


UNAVAILABLE_MESSAGE = "Entries are not available for comparison."


class ComparisonError(Exception):
    """Raised when a comparison cannot be set up."""
    pass


@dataclass
class ComparisonResult:
    """
    Complete result of comparing a localized entry with its source.

    When either entry is missing, available is False, message holds the
    fixed explanation and the block/row lists are empty.

    Attributes:
        available: Whether both entries were present
        locale: Locale of the localized entry
        config: Split configuration used for both documents
        message: Explanation shown instead of rows when unavailable
        left_blocks: Blocks of the localized document
        right_blocks: Blocks of the source document
        rows: Aligned rows in render order
        l10n_panel: Metadata panel for the localized entry
        source_panel: Metadata panel for the source entry
        summary: Row statistics (None when unavailable)
    """
    available: bool
    locale: str
    config: SplitConfig
    message: Optional[str] = None
    left_blocks: BlockSequence = field(default_factory=list)
    right_blocks: BlockSequence = field(default_factory=list)
    rows: List[AlignedRow] = field(default_factory=list)
    l10n_panel: Optional[MetadataPanel] = None
    source_panel: Optional[MetadataPanel] = None
    summary: Optional[ComparisonSummary] = None

    @property
    def row_count(self) -> int:
        return len(self.rows)


def _normalize_config(
    config: Union[SplitConfig, SplitMethod, str],
    markdown_aware: Optional[bool],
) -> SplitConfig:
    """Turn the accepted config spellings into a SplitConfig or raise."""
    try:
        if isinstance(config, SplitConfig):
            if markdown_aware is None:
                return config
            return SplitConfig.from_values(config.method, markdown_aware)
        return SplitConfig.from_values(
            config,
            True if markdown_aware is None else markdown_aware,
        )
    except ConfigurationError as e:
        raise ComparisonError(f"Invalid split configuration: {e}") from e


def compare_texts(
    left: str,
    right: str,
    config: Union[SplitConfig, SplitMethod, str] = SplitMethod.DOUBLE,
    markdown_aware: Optional[bool] = None,
) -> List[AlignedRow]:
    """
    Segment and align two raw documents.

    Args:
        left: Localized document text
        right: Source document text
        config: SplitConfig, or a split method (enum or "double"/"single")
        markdown_aware: Markdown flag when config is a method (default True)

    Returns:
        Aligned rows in render order

    Raises:
        ComparisonError: If the split configuration is invalid
    """
    cfg = _normalize_config(config, markdown_aware)
    return align(segment(left, cfg), segment(right, cfg), cfg)


def compare_entries(
    l10n_entry: EntrySlot,
    source_entry: EntrySlot,
    locale: str,
    config: Union[SplitConfig, SplitMethod, str] = SplitMethod.DOUBLE,
    path: Optional[str] = None,
    markdown_aware: Optional[bool] = None,
    settings: CompareSettings = DEFAULT_SETTINGS,
) -> ComparisonResult:
    """
    Compare a localized entry against its source entry.

    This is the main entry point for the review page. It:
    1. Validates the split configuration
    2. Returns an unavailable result if either entry is missing
    3. Segments both documents with the same configuration
    4. Aligns the blocks and builds panels and statistics

    Args:
        l10n_entry: Localized Entry, None (not localized yet) or UNAVAILABLE
        source_entry: Source Entry, None or UNAVAILABLE
        locale: Locale identifier of the localized entry (e.g. "zh-tw")
        config: SplitConfig, or a split method (enum or string value)
        path: Repository-relative folder of the source file, for the link
        markdown_aware: Markdown flag when config is a method (default True)
        settings: Repository coordinates for the source link

    Returns:
        ComparisonResult

    Raises:
        ComparisonError: If the split configuration is invalid

    Example:
        >>> result = compare_entries(l10n, source, "zh-tw", "double")
        >>> for row in result.rows:
        ...     print(row.display_left, "|", row.display_right)
    """
    cfg = _normalize_config(config, markdown_aware)

    l10n_panel = l10n_entry_properties(l10n_entry)
    source_panel = source_entry_properties(source_entry, path, settings)

    if not is_entry_present(l10n_entry) or not is_entry_present(source_entry):
        logger.warning(
            "Comparison skipped for locale %s: l10n=%r source=%r",
            locale,
            "present" if is_entry_present(l10n_entry) else l10n_entry,
            "present" if is_entry_present(source_entry) else source_entry,
        )
        return ComparisonResult(
            available=False,
            locale=locale,
            config=cfg,
            message=UNAVAILABLE_MESSAGE,
            l10n_panel=l10n_panel,
            source_panel=source_panel,
        )

    left_blocks = segment(l10n_entry.content, cfg)
    right_blocks = segment(source_entry.content, cfg)
    rows = align(left_blocks, right_blocks, cfg)
    summary = summarize_rows(left_blocks, right_blocks, rows)

    logger.info(
        "Compared %s (%s): %d/%d blocks, %d rows",
        source_entry.slug, locale, len(left_blocks), len(right_blocks), len(rows),
    )

    return ComparisonResult(
        available=True,
        locale=locale,
        config=cfg,
        left_blocks=left_blocks,
        right_blocks=right_blocks,
        rows=rows,
        l10n_panel=l10n_panel,
        source_panel=source_panel,
        summary=summary,
    )
