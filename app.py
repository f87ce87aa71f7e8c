"""
l10ndiff - Side-by-side Localization Review

A lightweight UI layer for reviewing a localized markdown document
against its source. This app wraps l10ndiff.core with no additional
segmentation or alignment logic.

Usage:
    streamlit run app.py

Design Principles:
- Thin UI layer: all segmentation and alignment lives in l10ndiff.core
- Literal rendering: blocks are shown as text, never rendered as markdown
- Explicit actions: user triggers each comparison manually
- No persistence: session resets on reload
"""

import logging

import streamlit as st
from markitdown import MarkItDown

from l10ndiff.core.engine import compare_entries, ComparisonError
from l10ndiff.core.models import Entry, SplitMethod
from l10ndiff.core.metadata import MetadataPanel
from l10ndiff.core.render import render_rows_html

logger = logging.getLogger("l10ndiff.app")


# =============================================================================
# Session State Initialization
# =============================================================================

def init_session_state():
    """
    Initialize session state variables.

    Session state tracks:
    - comparison_result: Output of compare_entries
    - status_message: Current status for user feedback
    - error_message: Current error message (if any)
    - fetch_status: Status message from the last URL fetch
    """
    defaults = {
        "comparison_result": None,
        "status_message": "",
        "error_message": "",
        "fetch_status": "",
    }
    for key, value in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = value


def fetch_url_as_markdown(url: str) -> tuple[bool, str]:
    """
    Fetch a URL and convert it to Markdown using markitdown.

    Args:
        url: The document URL (raw markdown or a web page)

    Returns:
        Tuple of (success: bool, content_or_error: str)
    """
    try:
        md = MarkItDown()
        result = md.convert(url)
        content = result.text_content
        if content and len(content.strip()) > 0:
            return True, content
        else:
            return False, "Conversion returned empty content"
    except Exception as e:
        logger.warning("Fetch failed for %s: %s", url, e)
        return False, f"Error: {str(e)}"


# =============================================================================
# Backend Integration
# =============================================================================

def _entry_from_inputs(side: str):
    """
    Build the entry slot for one side from its widgets.

    Returns an Entry, or None when the "not localized yet" box is ticked.
    """
    if st.session_state.get(f"{side}_missing"):
        return None
    return Entry(
        title=st.session_state.get(f"{side}_title", ""),
        slug=st.session_state.get(f"{side}_slug", ""),
        source_commit=st.session_state.get(f"{side}_commit", ""),
        content=st.session_state.get(f"{side}_content", ""),
    )


def run_comparison(locale: str, method: str, markdown_aware: bool, path: str) -> bool:
    """
    Run the comparison and store the result in session state.

    Returns True on success, False on error.
    """
    try:
        st.session_state.error_message = ""
        result = compare_entries(
            _entry_from_inputs("l10n"),
            _entry_from_inputs("source"),
            locale,
            method,
            path=path or None,
            markdown_aware=markdown_aware,
        )
        st.session_state.comparison_result = result

        if result.available:
            st.session_state.status_message = (
                f"Compared {result.summary.left_block_count} localized blocks "
                f"with {result.summary.right_block_count} source blocks "
                f"in {result.row_count} rows."
            )
        else:
            st.session_state.status_message = ""
        return True

    except ComparisonError as e:
        st.session_state.error_message = f"Comparison failed: {e}"
        st.session_state.comparison_result = None
        return False


# =============================================================================
# UI Components
# =============================================================================

def render_header():
    """Render the app header."""
    st.title("l10ndiff")
    st.caption("Side-by-side review of a localized document and its source")


def _render_entry_inputs(side: str, label: str):
    """Render the metadata and content widgets for one entry."""
    st.write(f"**{label}**")
    st.checkbox("Entry not localized yet", key=f"{side}_missing")
    st.text_input("Title", key=f"{side}_title")
    st.text_input("Slug", key=f"{side}_slug")
    st.text_input("Commit", key=f"{side}_commit")

    with st.expander("Fetch from URL", expanded=False):
        url = st.text_input("URL", key=f"{side}_url", label_visibility="collapsed")
        if st.button("Fetch", key=f"{side}_fetch", disabled=not (url and url.strip())):
            with st.spinner("Fetching and converting..."):
                success, result = fetch_url_as_markdown(url.strip())
            if success:
                st.session_state[f"{side}_content"] = result
                st.session_state.fetch_status = f"Fetched {len(result):,} characters"
                st.rerun()
            else:
                st.error(f"Failed to fetch: {result}")

    st.text_area("Markdown", height=240, key=f"{side}_content")


def render_input_section():
    """
    Render the entry inputs and comparison settings.

    Returns tuple of (locale, method, markdown_aware, path).
    """
    st.subheader("Entries")

    col1, col2 = st.columns(2)
    with col1:
        _render_entry_inputs("l10n", "Localized")
    with col2:
        _render_entry_inputs("source", "Source")

    if st.session_state.get("fetch_status"):
        st.success(st.session_state.fetch_status)

    st.subheader("Settings")
    col1, col2, col3, col4 = st.columns([1, 1, 1, 2])

    with col1:
        locale = st.text_input("Locale", value="zh-tw", key="locale")

    with col2:
        method = st.selectbox(
            "Split method",
            options=[m.value for m in SplitMethod],
            format_func=lambda x: {
                "double": "Double - blank lines",
                "single": "Single - every line",
            }[x],
            key="split_method",
        )

    with col3:
        markdown_aware = st.toggle("Markdown processing", value=True, key="markdown_aware")

    with col4:
        path = st.text_input(
            "Source path",
            placeholder="web/javascript/reference/global_objects/array",
            help="Folder of the source file, used for the GitHub link",
            key="source_path",
        )

    return locale, method, markdown_aware, path


def render_action_buttons(locale: str, method: str, markdown_aware: bool, path: str):
    """Render the compare button and status messages."""
    col1, col2 = st.columns([1, 2])

    with col1:
        if st.button("Compare", type="primary", use_container_width=True):
            if run_comparison(locale, method, markdown_aware, path):
                st.rerun()

    with col2:
        if st.session_state.error_message:
            st.error(st.session_state.error_message)
        elif st.session_state.status_message:
            st.success(st.session_state.status_message)


def _render_panel(panel: MetadataPanel):
    """Render one metadata panel (nothing for an unavailable entry)."""
    if panel is None:
        return
    if panel.message:
        st.write(panel.message)
        return

    st.write(f"**{panel.heading}**")
    for item in panel.items:
        if item.link:
            st.markdown(f"- **{item.label}**: [Click HERE!]({item.link})")
        else:
            st.markdown(f"- **{item.label}**: `{item.value}`")


def render_metadata(result):
    """Render the two metadata panels side by side."""
    col1, col2 = st.columns(2)
    with col1:
        st.subheader(f"Localized {result.locale}")
        _render_panel(result.l10n_panel)
    with col2:
        st.subheader("Source")
        _render_panel(result.source_panel)


def render_rows(result):
    """Render the aligned rows."""
    st.divider()

    if not result.available:
        st.info(result.message)
        return

    summary = result.summary
    c1, c2, c3, c4 = st.columns(4)
    c1.metric(
        "Localized blocks",
        summary.left_block_count,
        delta=None if summary.is_balanced else summary.block_count_delta,
    )
    c2.metric("Source blocks", summary.right_block_count)
    c3.metric("Rows", result.row_count)
    c4.metric("Unmatched", summary.unmatched_indices, help="Indices with text on one side only")

    st.html(render_rows_html(result.rows))

    with st.expander("Debug Info"):
        st.json(summary.to_dict())


# =============================================================================
# Main App
# =============================================================================

def main():
    """Main application entry point."""
    st.set_page_config(
        page_title="l10ndiff",
        page_icon="🌐",
        layout="wide",
    )
    logging.basicConfig(level=logging.INFO)

    init_session_state()
    render_header()

    locale, method, markdown_aware, path = render_input_section()
    render_action_buttons(locale, method, markdown_aware, path)

    result = st.session_state.comparison_result
    if result is not None:
        st.divider()
        render_metadata(result)
        render_rows(result)

    st.divider()
    st.caption("l10ndiff v0.1.0 | Positional block alignment | No data leaves your machine")


if __name__ == "__main__":
    main()
