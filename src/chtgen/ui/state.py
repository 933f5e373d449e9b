"""State management for the CHT-Gen UI.

This module is the application controller: every change to a session's
:class:`~chtgen.ui.models.UIState` other than the copy acknowledgments goes
through the functions below.

Transitions
-----------
    idle --submit (too short)--> idle + validation error
    idle --submit--> loading (error and result cleared)
    loading --success--> idle + result
    loading --failure--> idle + error

A submit while loading is ignored.
"""

import logging
import shutil
from pathlib import Path

from chtgen.core.clients import GenerationClient
from chtgen.core.errors import GenerationError
from chtgen.core.generator import generate_content
from chtgen.core.models import GenerationResult

from .feedback import DEFAULT_FEEDBACK_SECONDS, CopyAcknowledgment
from .models import MIN_ARTICLE_LENGTH, UNEXPECTED_ERROR_MESSAGE, UIState
from .validation import ValidationError, validate_article_text

logger = logging.getLogger(__name__)


def initialize_ui_state(
    state: UIState | None = None, feedback_seconds: float = DEFAULT_FEEDBACK_SECONDS
) -> UIState:
    """Create a UI state, or return the existing one.

    Args:
        state: Existing UIState or None
        feedback_seconds: Duration of the "Copied!" acknowledgments for a new state

    Returns:
        UIState instance
    """
    if state is not None:
        return state

    logger.info("Creating new UIState")
    return UIState(
        tags_copied=CopyAcknowledgment(duration=feedback_seconds),
        sheets_copied=CopyAcknowledgment(duration=feedback_seconds),
    )


def start_submission(
    state: UIState, article_text: str, min_length: int = MIN_ARTICLE_LENGTH
) -> bool:
    """Validate the article and enter the loading state.

    Args:
        state: UI state
        article_text: Text from the article textarea
        min_length: Minimum trimmed article length

    Returns:
        True if generation should proceed, False if the submit was rejected
    """
    if state.is_loading:
        logger.info("Ignoring submit: a generation request is already in flight")
        return False

    state.article_text = article_text or ""

    try:
        validate_article_text(state.article_text, min_length=min_length)
    except ValidationError as e:
        logger.warning(f"Validation error: {e}")
        state.error = str(e)
        return False

    begin_generation(state)
    return True


def begin_generation(state: UIState) -> UIState:
    """Enter the loading state, clearing the previous outcome."""
    state.is_loading = True
    state.error = None
    state.result = None
    state.tags_copied.cancel()
    state.sheets_copied.cancel()
    discard_download(state)
    return state


def complete_generation(state: UIState, result: GenerationResult) -> UIState:
    """Store a successful result and leave the loading state."""
    state.result = result
    state.error = None
    state.is_loading = False
    return state


def fail_generation(state: UIState, message: str) -> UIState:
    """Store a failure message and leave the loading state."""
    state.error = message
    state.result = None
    state.is_loading = False
    return state


def run_generation(state: UIState, client: GenerationClient) -> UIState:
    """Invoke the orchestrator for an already-started submission.

    Args:
        state: UI state in the loading state
        client: Service client passed to the orchestrator

    Returns:
        Updated state, never loading
    """
    try:
        result = generate_content(state.article_text, client)
    except GenerationError as e:
        fail_generation(state, str(e))
    except Exception as e:
        logger.error(f"Unexpected error during generation: {e}", exc_info=True)
        fail_generation(state, UNEXPECTED_ERROR_MESSAGE)
    else:
        complete_generation(state, result)
    finally:
        state.is_loading = False

    logger.info(f"Generation settled: {state}")
    return state


def submit(
    state: UIState,
    article_text: str,
    client: GenerationClient,
    min_length: int = MIN_ARTICLE_LENGTH,
) -> UIState:
    """Validate the article and run the full generation.

    Args:
        state: UI state
        article_text: Text from the article textarea
        client: Service client passed to the orchestrator
        min_length: Minimum trimmed article length

    Returns:
        Updated state
    """
    if start_submission(state, article_text, min_length=min_length):
        run_generation(state, client)
    return state


def discard_download(state: UIState) -> None:
    """Remove the downloadable image file of the previous result, if any."""
    if state.download_path is None:
        return

    folder = Path(state.download_path).parent
    shutil.rmtree(folder, ignore_errors=True)
    logger.debug(f"Removed download folder {folder}")
    state.download_path = None


def cleanup_ui_state(state: UIState) -> None:
    """Clean up session resources when the session ends.

    Args:
        state: UI state to clean up
    """
    logger.info("Cleaning up UIState resources")
    state.tags_copied.cancel()
    state.sheets_copied.cancel()
    discard_download(state)
