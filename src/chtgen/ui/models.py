"""Data models for CHT-Gen UI state."""

import logging
from dataclasses import dataclass, field
from typing import Literal

from chtgen.core.models import GenerationResult

from .feedback import CopyAcknowledgment

logger = logging.getLogger(__name__)

ViewName = Literal["loading", "error", "result", "empty"]


@dataclass
class UIState:
    """Session state for the Gradio UI.

    Each user session gets its own UIState instance. It is only mutated by
    the controller functions in :mod:`chtgen.ui.state` and by the copy
    handlers (acknowledgment windows).

    Attributes
    ----------
    article_text : str
        Text most recently submitted for generation
    result : GenerationResult | None
        Result of the last successful run
    is_loading : bool
        True while a generation request is in flight
    error : str | None
        User-facing error message of the last attempt
    tags_copied : CopyAcknowledgment
        "Copied!" window of the Copy Tags button
    sheets_copied : CopyAcknowledgment
        "Copied!" window of the Copy for Sheets button
    download_path : str | None
        File offered by the Download Image button for the current result
    """

    article_text: str = ""
    result: GenerationResult | None = None
    is_loading: bool = False
    error: str | None = None

    tags_copied: CopyAcknowledgment = field(default_factory=CopyAcknowledgment)
    sheets_copied: CopyAcknowledgment = field(default_factory=CopyAcknowledgment)
    download_path: str | None = None

    def has_result(self) -> bool:
        """Check if a generation result is available."""
        return self.result is not None

    def __repr__(self) -> str:
        """String representation for debugging."""
        return (
            f"UIState(loading={self.is_loading}, "
            f"has_result={self.has_result()}, "
            f"error={self.error!r})"
        )


# UI constants
APP_TITLE = "CHT-Gen"
APP_SUBTITLE = "Content-to-Header & Tag Generator"

MIN_ARTICLE_LENGTH = 100
ARTICLE_TOO_SHORT_MESSAGE = (
    "Article content is too short. Please provide at least {min_length} characters."
)
UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred."

ARTICLE_PLACEHOLDER = (
    "Paste your full blog article here (plain text or Markdown)... "
    "The more content you provide, the better the results."
)
EMPTY_RESULT_MESSAGE = "Your generated image and tags will appear here."

GENERATE_LABEL = "Generate Assets"
GENERATING_LABEL = "Generating..."
COPY_TAGS_LABEL = "Copy Tags"
COPY_SHEETS_LABEL = "Copy for Sheets"
COPIED_LABEL = "Copied!"
DOWNLOAD_LABEL = "Download Image"
DOWNLOAD_FILENAME = "generated-header.png"
SHEETS_HINT = "Copies a row (Image URL, Tags) for pasting into a spreadsheet."
