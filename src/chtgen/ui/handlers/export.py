"""Export handlers: clipboard copies and the image download."""

import logging
import tempfile
from pathlib import Path

import gradio as gr

from chtgen.core.models import GenerationResult

from ..components import copy_sheets_label, copy_tags_label
from ..models import DOWNLOAD_FILENAME, UIState
from ..state import initialize_ui_state

logger = logging.getLogger(__name__)

# Client-side hooks; Gradio runs these in the browser before the Python handler.
COPY_TO_CLIPBOARD_JS = """
(text) => {
    if (text) {
        navigator.clipboard.writeText(text);
    }
    return text;
}
"""


def copy_tags(state: UIState) -> tuple[gr.Button, gr.Timer, UIState]:
    """Acknowledge a Copy Tags click.

    The clipboard write itself happens in the browser (COPY_TO_CLIPBOARD_JS).
    A triggered acknowledgment also starts the label refresh timer.

    Args:
        state: UI state

    Returns:
        Tuple of (copy_tags_button_update, timer_update, updated_state)
    """
    state = initialize_ui_state(state)
    if state.result is not None:
        state.tags_copied.trigger()
        logger.debug("Tags copied to clipboard")
    return gr.update(value=copy_tags_label(state)), _timer_update(state), state


def copy_sheets(state: UIState) -> tuple[gr.Button, gr.Timer, UIState]:
    """Acknowledge a Copy for Sheets click.

    Args:
        state: UI state

    Returns:
        Tuple of (copy_sheets_button_update, timer_update, updated_state)
    """
    state = initialize_ui_state(state)
    if state.result is not None:
        state.sheets_copied.trigger()
        logger.debug("Sheets row copied to clipboard")
    return gr.update(value=copy_sheets_label(state)), _timer_update(state), state


def refresh_copy_labels(state: UIState) -> tuple[gr.Button, gr.Button, gr.Timer, UIState]:
    """Timer tick: revert copy buttons whose acknowledgment has expired.

    The timer is switched off once neither acknowledgment is active.

    Args:
        state: UI state

    Returns:
        Tuple of (copy_tags_update, copy_sheets_update, timer_update, state)
    """
    state = initialize_ui_state(state)
    return (
        gr.update(value=copy_tags_label(state)),
        gr.update(value=copy_sheets_label(state)),
        _timer_update(state),
        state,
    )


def _timer_update(state: UIState) -> gr.Timer:
    """Keep the refresh timer running only while an acknowledgment is showing."""
    active = state.tags_copied.is_active() or state.sheets_copied.is_active()
    return gr.update(active=active)


def write_download_file(result: GenerationResult, downloads_dir: Path | None = None) -> Path:
    """Write the result image to a fresh folder as ``generated-header.png``.

    Each result gets its own folder so the fixed filename never collides
    between sessions.

    Args:
        result: Generation result holding the PNG data URI
        downloads_dir: Parent directory (system temp dir if None)

    Returns:
        Path to the written PNG file

    Raises:
        ValueError: If the image URL is not a PNG data URI
        OSError: If the file cannot be written
    """
    image_bytes = result.image_bytes()
    folder = Path(tempfile.mkdtemp(prefix="chtgen-", dir=downloads_dir))
    path = folder / DOWNLOAD_FILENAME
    path.write_bytes(image_bytes)
    logger.info(f"Prepared image download: {path} ({len(image_bytes)} bytes)")
    return path
