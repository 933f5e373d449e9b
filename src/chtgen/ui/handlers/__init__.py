"""UI event handlers organized by feature area.

This package provides handlers for all Gradio UI events:
- generation: Article submission and the two-phase loading/result updates
- export: Copy Tags, Copy for Sheets and Download Image affordances
"""

from .export import (
    copy_sheets,
    copy_tags,
    refresh_copy_labels,
    write_download_file,
)
from .generation import (
    generate_assets,
    update_submit_button,
)

__all__ = [
    # Generation handlers
    "generate_assets",
    "update_submit_button",
    # Export handlers
    "copy_sheets",
    "copy_tags",
    "refresh_copy_labels",
    "write_download_file",
]
