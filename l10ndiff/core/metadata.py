"""
Metadata panels shown above the side-by-side view.

Each document gets a small panel: title, slug and commit, plus a link
to the source file on GitHub for the source document. The panel content
depends on the entry state:
- Entry: the metadata list
- None: the entry has not been localized yet (fixed message)
- UNAVAILABLE: no panel at all

This module does NOT render anything; it returns plain data for the UI.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from l10ndiff.core.models import Entry, EntrySlot


NOT_LOCALIZED_MESSAGE = "Entry not localized yet"


@dataclass(frozen=True)
class CompareSettings:
    """
    Where source files live, for the "Link to File" item.

    Attributes:
        github_org: GitHub organisation of the content repository
        github_repo: Content repository name
        branch: Branch the link points at
        source_locale: Folder of the source locale under files/
    """
    github_org: str = "mdn"
    github_repo: str = "content"
    branch: str = "main"
    source_locale: str = "en-us"


DEFAULT_SETTINGS = CompareSettings()


@dataclass
class MetadataItem:
    """One labelled value in a metadata panel."""
    label: str
    value: str
    link: Optional[str] = None


@dataclass
class MetadataPanel:
    """
    Metadata for one side of the comparison.

    Attributes:
        heading: Panel heading
        items: Labelled values, empty when message is set
        message: Fixed text shown instead of items
    """
    heading: str
    items: List[MetadataItem] = field(default_factory=list)
    message: Optional[str] = None


def source_file_url(path: Optional[str], settings: CompareSettings = DEFAULT_SETTINGS) -> str:
    """
    Build the GitHub URL of a source document.

    Args:
        path: Repository-relative folder of the document (e.g. "web/html")
        settings: Repository coordinates

    Returns:
        https://github.com/<org>/<repo>/blob/<branch>/files/<locale>/<path>/index.md
    """
    folder = (path or "").strip("/")
    return (
        f"https://github.com/{settings.github_org}/{settings.github_repo}"
        f"/blob/{settings.branch}/files/{settings.source_locale}/{folder}/index.md"
    )


def _common_items(entry: Entry, commit_label: str) -> List[MetadataItem]:
    return [
        MetadataItem("Title", entry.title),
        MetadataItem("Slug", entry.slug),
        MetadataItem(commit_label, entry.source_commit),
    ]


def l10n_entry_properties(entry: EntrySlot) -> Optional[MetadataPanel]:
    """Panel for the localized entry; None when the entry is unavailable."""
    if entry is None:
        return MetadataPanel(heading="Metadata", message=NOT_LOCALIZED_MESSAGE)
    if not isinstance(entry, Entry):
        return None
    return MetadataPanel(heading="Metadata", items=_common_items(entry, "Source Commit"))


def source_entry_properties(
    entry: EntrySlot,
    path: Optional[str] = None,
    settings: CompareSettings = DEFAULT_SETTINGS,
) -> Optional[MetadataPanel]:
    """
    Panel for the source entry; None when the entry is unavailable.

    The link uses the explicit path, falling back to the entry's own path.
    """
    if entry is None:
        return MetadataPanel(heading="Metadata", message=NOT_LOCALIZED_MESSAGE)
    if not isinstance(entry, Entry):
        return None

    items = _common_items(entry, "Current Commit")
    url = source_file_url(path if path is not None else entry.path, settings)
    items.append(MetadataItem("Link to File", url, link=url))
    return MetadataPanel(heading="Metadata", items=items)
