"""
Data models for the localization review engine.

These dataclasses define the structured types used throughout the
segmentation and alignment pipeline. They are intentionally simple and
transparent: an Entry goes in, AlignedRows come out.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union
from enum import Enum


# Literal marker rendered on a blockquote continuation row.
CONTINUATION_MARKER = ">"

# Shown instead of an empty side so that row height stays stable.
PLACEHOLDER = "\u00a0"

# A block is one contiguous string segment of a document.
Block = str
BlockSequence = List[Block]


class ConfigurationError(ValueError):
    """Raised when a split configuration cannot be built from its inputs."""
    pass


class SplitMethod(Enum):
    """
    Where block boundaries fall when a document is split.

    DOUBLE: Split on blank lines (paragraph-level blocks)
    SINGLE: Split on every line break (line-level blocks)
    """
    DOUBLE = "double"
    SINGLE = "single"

    @property
    def delimiter(self) -> str:
        """Literal delimiter used for the first splitting pass."""
        if self is SplitMethod.SINGLE:
            return "\n"
        return "\n\n"


@dataclass(frozen=True)
class SplitConfig:
    """
    Segmentation settings shared by both documents of a comparison.

    Attributes:
        method: Delimiter strategy (DOUBLE or SINGLE)
        markdown_aware: Run the markdown refinement pass after splitting
    """
    method: SplitMethod = SplitMethod.DOUBLE
    markdown_aware: bool = True

    def __post_init__(self):
        """
        Coerce a string method to SplitMethod and reject anything else.

        Raises:
            ConfigurationError: If the method or flag is not recognised
        """
        method = self.method
        if isinstance(method, str):
            try:
                method = SplitMethod(method.strip().lower())
            except ValueError as e:
                raise ConfigurationError(f"Invalid split method: {method!r}") from e
        elif not isinstance(method, SplitMethod):
            raise ConfigurationError(f"Invalid split method: {method!r}")

        if not isinstance(self.markdown_aware, bool):
            raise ConfigurationError(
                f"markdown_aware must be a bool, got {type(self.markdown_aware).__name__}"
            )

        # Frozen dataclass: bypass __setattr__ for the coerced value
        object.__setattr__(self, "method", method)

    @property
    def emits_markers(self) -> bool:
        """Whether the aligner adds continuation and spacer rows."""
        return self.method is SplitMethod.DOUBLE and self.markdown_aware

    @classmethod
    def from_values(
        cls,
        method: Union[SplitMethod, str],
        markdown_aware: bool = True,
    ) -> "SplitConfig":
        """
        Build a config from an enum or its string value.

        Validation happens in __post_init__, so direct construction is
        checked the same way.

        Raises:
            ConfigurationError: If the method or flag is not recognised
        """
        return cls(method=method, markdown_aware=markdown_aware)


# Default configuration
DEFAULT_SPLIT_CONFIG = SplitConfig()


@dataclass(frozen=True)
class Entry:
    """
    One version of a document plus the metadata shown next to it.

    Attributes:
        title: Document title
        slug: Document slug (URL path segment)
        source_commit: Commit the content corresponds to
        content: Raw markdown text
        path: Repository-relative folder of the source file (if known)
    """
    title: str
    slug: str
    source_commit: str
    content: str
    path: Optional[str] = None


class _Unavailable:
    """Sentinel type for an entry that could not be retrieved at all."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNAVAILABLE"

    def __bool__(self) -> bool:
        return False


# An entry slot holds an Entry, None (not localized yet) or UNAVAILABLE.
UNAVAILABLE = _Unavailable()

EntrySlot = Union[Entry, None, _Unavailable]


def is_entry_present(entry: EntrySlot) -> bool:
    """True only for an actual Entry (not None, not UNAVAILABLE)."""
    return isinstance(entry, Entry)


class RowKind(Enum):
    """
    Kind of row produced by the aligner.

    PAIR: Block i of the left document next to block i of the right one
    LEFT_CONTINUATION: '>' marker on the left side between two blockquotes
    RIGHT_CONTINUATION: '>' marker on the right side between two blockquotes
    SPACER: Empty separator between markdown and non-markdown runs
    """
    PAIR = "pair"
    LEFT_CONTINUATION = "left_continuation"
    RIGHT_CONTINUATION = "right_continuation"
    SPACER = "spacer"


@dataclass
class AlignedRow:
    """
    A single row in the side-by-side view.

    Attributes:
        index: Block index that produced this row (shared by the
               synthetic rows emitted after a PAIR row)
        kind: Row kind
        left: Left (localized) text, empty string when absent
        right: Right (source) text, empty string when absent
    """
    index: int
    kind: RowKind
    left: str = ""
    right: str = ""

    @property
    def display_left(self) -> str:
        """Left text as rendered, with the placeholder for empty text."""
        return self.left or PLACEHOLDER

    @property
    def display_right(self) -> str:
        """Right text as rendered, with the placeholder for empty text."""
        return self.right or PLACEHOLDER

    @property
    def is_synthetic(self) -> bool:
        """Whether the row was added by the aligner rather than paired."""
        return self.kind != RowKind.PAIR

    @property
    def is_unmatched(self) -> bool:
        """A paired row where exactly one side has text."""
        return self.kind == RowKind.PAIR and bool(self.left) != bool(self.right)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "index": self.index,
            "kind": self.kind.value,
            "left": self.left,
            "right": self.right,
        }


def is_list_item(text: str) -> bool:
    """Trimmed text starts with a '- ' list marker."""
    return text.strip().startswith("- ")


def is_blockquote(text: str) -> bool:
    """Trimmed text starts with a '>' blockquote marker."""
    return text.strip().startswith(">")


def is_markdown(text: str) -> bool:
    """Text is a list item or a blockquote."""
    return is_list_item(text) or is_blockquote(text)
