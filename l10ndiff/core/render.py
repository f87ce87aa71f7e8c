"""
HTML for the side-by-side row view.

Block text is shown literally: it is escaped and line breaks become
<br> tags, so nothing in a block is ever read as markdown or HTML by the
page that displays it. The output holds no blank lines, which keeps a
markdown host from ending the HTML block partway through a cell.
"""

import html
from typing import Sequence

from l10ndiff.core.models import AlignedRow, RowKind


ROW_STYLE = (
    "display:flex;gap:1rem;padding:0.25rem 1rem;font-family:monospace;"
    "white-space:pre-wrap;word-break:break-all;"
)
MARKER_STYLE = "color:#9ca3af;"
SPACER_HTML = '<div style="height:1rem"></div>'


def escape_block(text: str) -> str:
    """Escape block text and turn each line break into <br>."""
    return "<br>".join(html.escape(line) for line in text.split("\n"))


def _cell(text: str, style: str = "") -> str:
    return f'<div style="width:50%;{style}">{escape_block(text)}</div>'


def render_row_html(row: AlignedRow) -> str:
    """HTML for a single aligned row."""
    if row.kind == RowKind.SPACER:
        return SPACER_HTML
    if row.is_synthetic:
        # Continuation marker: only the marked side has text
        left = _cell(row.left, MARKER_STYLE) if row.left else _cell("")
        right = _cell(row.right, MARKER_STYLE) if row.right else _cell("")
        return f'<div style="{ROW_STYLE}">{left}{right}</div>'
    return f'<div style="{ROW_STYLE}">{_cell(row.display_left)}{_cell(row.display_right)}</div>'


def render_rows_html(rows: Sequence[AlignedRow]) -> str:
    """HTML for all rows in render order."""
    return "".join(render_row_html(row) for row in rows)
