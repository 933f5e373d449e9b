"""Article submission handlers."""

import logging
from collections.abc import Iterator
from pathlib import Path

import gradio as gr

from chtgen.core.clients import GenerationClient

from ..components import ResultPanelUI, select_view, submit_enabled, submit_label
from ..models import MIN_ARTICLE_LENGTH, UIState
from ..state import initialize_ui_state, run_generation, start_submission
from .export import write_download_file

logger = logging.getLogger(__name__)


def update_submit_button(article_text: str, state: UIState) -> gr.Button:
    """Enable the submit button only when there is text and nothing is running.

    Args:
        article_text: Current textarea value
        state: UI state

    Returns:
        Button update
    """
    state = initialize_ui_state(state)
    return gr.update(value=submit_label(state), interactive=submit_enabled(state, article_text))


def _render(article_text: str, state: UIState) -> tuple:
    """Full set of updates for (textarea, submit button, result panel..., state)."""
    return (
        gr.update(interactive=not state.is_loading),
        gr.update(value=submit_label(state), interactive=submit_enabled(state, article_text)),
        *ResultPanelUI.render(state),
        state,
    )


def generate_assets(
    article_text: str,
    state: UIState,
    client: GenerationClient,
    min_length: int = MIN_ARTICLE_LENGTH,
    downloads_dir: Path | None = None,
) -> Iterator[tuple]:
    """Generate a header image and tags from the submitted article.

    Yields twice on an accepted submit: once in the loading state so the
    spinner shows and the controls lock, then once the external calls settle.
    A rejected submit (too short, or already loading) yields once.

    Args:
        article_text: Text from the article textarea
        state: UI state
        client: Service client used by the orchestrator
        min_length: Minimum trimmed article length
        downloads_dir: Parent directory for the downloadable image file

    Yields:
        Tuple of (textarea_update, button_update, *result_panel_updates, state)
    """
    state = initialize_ui_state(state)

    if not start_submission(state, article_text, min_length=min_length):
        yield _render(article_text, state)
        return

    yield _render(article_text, state)

    run_generation(state, client)

    if select_view(state) == "result":
        try:
            state.download_path = str(write_download_file(state.result, downloads_dir))
        except (OSError, ValueError) as e:
            # The image and tags are still shown; only the download is unavailable
            logger.error(f"Could not prepare image download: {e}", exc_info=True)
            state.download_path = None

    yield _render(article_text, state)
