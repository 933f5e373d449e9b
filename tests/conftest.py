"""Shared pytest fixtures for CHT-Gen tests."""

import shutil
import tempfile
from pathlib import Path
from typing import Generator

import pytest

from chtgen.core.clients import GenerationClient
from chtgen.core.config import CHTGenConfig
from chtgen.core.models import AnalysisResult
from chtgen.ui.models import UIState

# Smallest byte string that looks like a PNG to a human reader
PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00\x00\x00\rIHDR" + b"fake-image-data"

REMOTE_WORK_TAGS = ["remote work", "productivity", "wfh", "focus", "time management"]


class FakeClient(GenerationClient):
    """In-memory GenerationClient recording every call.

    Attributes:
        analysis: Value (or exception) returned by analyze()
        image: Value (or exception) returned by render_image()
        analyze_calls: Article texts passed to analyze()
        render_calls: Prompts passed to render_image()
    """

    name = "Fake"

    def __init__(self, analysis=None, image=PNG_BYTES):
        self.analysis = analysis if analysis is not None else AnalysisResult(
            image_prompt="A calm home office at sunrise, minimalist vector art",
            tags=list(REMOTE_WORK_TAGS),
        )
        self.image = image
        self.analyze_calls: list[str] = []
        self.render_calls: list[str] = []

    def analyze(self, article_text: str) -> AnalysisResult:
        self.analyze_calls.append(article_text)
        if isinstance(self.analysis, BaseException):
            raise self.analysis
        return self.analysis

    def render_image(self, prompt: str) -> bytes | None:
        self.render_calls.append(prompt)
        if isinstance(self.image, BaseException):
            raise self.image
        return self.image


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files.

    Yields:
        Path to temporary directory

    Cleanup:
        Directory is removed after test completes
    """
    temp_path = Path(tempfile.mkdtemp())
    try:
        yield temp_path
    finally:
        shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def test_config(temp_dir: Path) -> CHTGenConfig:
    """Create a test configuration with a temporary downloads directory.

    Args:
        temp_dir: Temporary directory from fixture

    Returns:
        CHTGenConfig instance for testing
    """
    return CHTGenConfig(
        _env_file=None,
        api_key="test-api-key",
        downloads_dir=str(temp_dir / "downloads"),
    )


@pytest.fixture
def fake_client() -> FakeClient:
    """GenerationClient that succeeds with the remote-work analysis."""
    return FakeClient()


@pytest.fixture
def article_text() -> str:
    """A 120-character article about remote work productivity."""
    text = (
        "Remote work productivity depends on clear goals, a quiet workspace, "
        "deep focus blocks and honest time management habits."
    )
    assert len(text) == 120
    return text


@pytest.fixture
def short_text() -> str:
    """Article text that is too short to submit."""
    return "Too short to analyze."


@pytest.fixture
def ui_state() -> UIState:
    """Create empty UI state for testing.

    Returns:
        UIState instance
    """
    return UIState()


@pytest.fixture
def make_client() -> type[FakeClient]:
    """Factory for FakeClient instances with custom analysis/image behavior."""
    return FakeClient


@pytest.fixture
def png_bytes() -> bytes:
    """Stand-in PNG bytes returned by the fake image model."""
    return PNG_BYTES
