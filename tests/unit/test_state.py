"""Unit tests for UI state management (the application controller)."""

from pathlib import Path
from unittest.mock import patch

import pytest

from chtgen.core.errors import GenerationError
from chtgen.core.models import GenerationResult
from chtgen.ui.models import UIState
from chtgen.ui.state import (
    begin_generation,
    cleanup_ui_state,
    complete_generation,
    discard_download,
    fail_generation,
    initialize_ui_state,
    run_generation,
    start_submission,
    submit,
)

TOO_SHORT = "Article content is too short. Please provide at least 100 characters."


@pytest.fixture
def sample_result() -> GenerationResult:
    """A finished generation result."""
    return GenerationResult(image_url="data:image/png;base64,AAAA", tags="#a #b")


class TestInitializeUIState:
    """Tests for initialize_ui_state function."""

    def test_initialize_none_creates_new_state(self):
        """Test that passing None creates a new UIState."""
        result = initialize_ui_state(None)

        assert isinstance(result, UIState)
        assert not result.is_loading
        assert result.result is None
        assert result.error is None

    def test_existing_state_returned_as_is(self, ui_state):
        """Test that an existing state is returned unchanged."""
        assert initialize_ui_state(ui_state) is ui_state

    def test_feedback_duration(self):
        """Test that both acknowledgments use the configured duration."""
        state = initialize_ui_state(feedback_seconds=5.0)

        assert state.tags_copied.duration == 5.0
        assert state.sheets_copied.duration == 5.0


class TestSubmit:
    """Tests for submit function."""

    def test_short_text_never_calls_orchestrator(self, ui_state, short_text, fake_client):
        """Test that a short article is rejected without any external call."""
        with patch("chtgen.ui.state.generate_content") as mock_generate:
            submit(ui_state, short_text, fake_client)

        mock_generate.assert_not_called()
        assert ui_state.error == TOO_SHORT
        assert ui_state.is_loading is False
        assert fake_client.analyze_calls == []

    def test_short_text_keeps_previous_result(self, ui_state, short_text, fake_client, sample_result):
        """Test that a rejected submit does not clear an earlier result."""
        ui_state.result = sample_result

        submit(ui_state, short_text, fake_client)

        assert ui_state.result is sample_result

    def test_success_stores_result(self, ui_state, article_text, fake_client):
        """Test that a successful run stores the result and no error."""
        submit(ui_state, article_text, fake_client)

        assert ui_state.result is not None
        assert ui_state.result.tags == "#remotework #productivity #wfh #focus #timemanagement"
        assert ui_state.error is None
        assert ui_state.is_loading is False
        assert ui_state.article_text == article_text

    def test_failure_stores_message(self, ui_state, article_text, make_client):
        """Test that a failed run stores the orchestrator's message."""
        client = make_client(image=RuntimeError("boom"))

        submit(ui_state, article_text, client)

        assert ui_state.error == "AI generation failed: boom"
        assert ui_state.result is None
        assert ui_state.is_loading is False

    def test_unexpected_error_is_generic(self, ui_state, article_text, fake_client):
        """Test that a non-GenerationError becomes the generic message."""
        with patch("chtgen.ui.state.generate_content", side_effect=KeyError("x")):
            submit(ui_state, article_text, fake_client)

        assert ui_state.error == "An unexpected error occurred."
        assert ui_state.is_loading is False

    def test_submit_while_loading_is_noop(self, ui_state, article_text, fake_client):
        """Test that a second submit during a request is ignored."""
        ui_state.is_loading = True
        ui_state.article_text = "in flight"

        submit(ui_state, article_text, fake_client)

        assert fake_client.analyze_calls == []
        assert ui_state.is_loading is True
        assert ui_state.article_text == "in flight"

    def test_previous_error_cleared_on_new_submit(self, ui_state, article_text, fake_client):
        """Test that a new accepted submit clears the previous error."""
        ui_state.error = "old error"

        submit(ui_state, article_text, fake_client)

        assert ui_state.error is None

    def test_custom_min_length(self, ui_state, fake_client):
        """Test that the minimum length can be configured."""
        submit(ui_state, "x" * 30, fake_client, min_length=20)

        assert ui_state.error is None
        assert fake_client.analyze_calls == ["x" * 30]


class TestTransitions:
    """Tests for the individual state transitions."""

    def test_start_submission_enters_loading(self, ui_state, article_text, sample_result):
        """Test that an accepted submission clears error and result."""
        ui_state.error = "old"
        ui_state.result = sample_result

        assert start_submission(ui_state, article_text) is True
        assert ui_state.is_loading is True
        assert ui_state.error is None
        assert ui_state.result is None

    def test_start_submission_rejects_short_text(self, ui_state, short_text):
        """Test that validation failure does not set the loading flag."""
        assert start_submission(ui_state, short_text) is False
        assert ui_state.is_loading is False
        assert ui_state.error == TOO_SHORT

    def test_begin_generation_cancels_acknowledgments(self, ui_state):
        """Test that starting a new run resets copy acknowledgments."""
        ui_state.tags_copied.trigger()
        ui_state.sheets_copied.trigger()

        begin_generation(ui_state)

        assert not ui_state.tags_copied.is_active()
        assert not ui_state.sheets_copied.is_active()

    def test_complete_generation(self, ui_state, sample_result):
        """Test that completion stores the result and leaves loading."""
        ui_state.is_loading = True

        complete_generation(ui_state, sample_result)

        assert ui_state.result is sample_result
        assert ui_state.is_loading is False

    def test_fail_generation(self, ui_state):
        """Test that failure stores the message and leaves loading."""
        ui_state.is_loading = True

        fail_generation(ui_state, "Image generation failed.")

        assert ui_state.error == "Image generation failed."
        assert ui_state.result is None
        assert ui_state.is_loading is False

    def test_run_generation_settles_loading(self, ui_state, article_text, make_client):
        """Test that loading is cleared whatever the outcome."""
        start_submission(ui_state, article_text)

        with patch(
            "chtgen.ui.state.generate_content", side_effect=GenerationError("Image generation failed.")
        ):
            run_generation(ui_state, make_client())

        assert ui_state.is_loading is False
        assert ui_state.error == "Image generation failed."


class TestDownloadCleanup:
    """Tests for download file cleanup."""

    def test_discard_download_removes_folder(self, ui_state, temp_dir):
        """Test that the previous download folder is deleted."""
        folder = temp_dir / "chtgen-abc"
        folder.mkdir()
        path = folder / "generated-header.png"
        path.write_bytes(b"png")
        ui_state.download_path = str(path)

        discard_download(ui_state)

        assert not folder.exists()
        assert ui_state.download_path is None

    def test_discard_without_download(self, ui_state):
        """Test that discarding with no download is a no-op."""
        discard_download(ui_state)
        assert ui_state.download_path is None

    def test_cleanup_ui_state(self, ui_state, temp_dir):
        """Test that session cleanup cancels timers and removes files."""
        path = Path(temp_dir) / "session" / "generated-header.png"
        path.parent.mkdir()
        path.write_bytes(b"png")
        ui_state.download_path = str(path)
        ui_state.tags_copied.trigger()

        cleanup_ui_state(ui_state)

        assert not path.exists()
        assert not ui_state.tags_copied.is_active()
