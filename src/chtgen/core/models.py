"""Result models for the two-step generation workflow."""

from __future__ import annotations

import base64
import binascii

from pydantic import BaseModel, ConfigDict, Field

PNG_DATA_URI_PREFIX = "data:image/png;base64,"


class AnalysisResult(BaseModel):
    """Structured output of the article analysis call.

    Fields default to empty so that an incomplete payload still parses; the
    orchestrator decides whether the analysis is usable.

    Attributes:
        image_prompt: Prompt for the image model (``imagePrompt`` on the wire).
        tags: SEO tags as returned by the model, before formatting.
    """

    model_config = ConfigDict(populate_by_name=True)

    image_prompt: str = Field(default="", alias="imagePrompt")
    tags: list[str] = Field(default_factory=list)

    def is_complete(self) -> bool:
        """Check that both a prompt and at least one non-blank tag are present."""
        has_prompt = bool(self.image_prompt and self.image_prompt.strip())
        return has_prompt and any(tag.strip() for tag in self.tags)


class GenerationResult(BaseModel):
    """Final artifact of a successful run.

    Attributes:
        image_url: PNG image encoded as a base64 data URI.
        tags: Space-joined ``#tag`` string.
    """

    model_config = ConfigDict(frozen=True)

    image_url: str
    tags: str

    def image_bytes(self) -> bytes:
        """Decode the data URI back into raw PNG bytes.

        Raises:
            ValueError: If the URL is not a base64 PNG data URI
        """
        if not self.image_url.startswith(PNG_DATA_URI_PREFIX):
            raise ValueError("Image URL is not a PNG data URI")
        try:
            return base64.b64decode(self.image_url[len(PNG_DATA_URI_PREFIX) :], validate=True)
        except binascii.Error as e:
            raise ValueError(f"Invalid base64 image data: {e}") from e

    def sheets_row(self) -> str:
        """Tab-separated ``image_url<TAB>tags`` row for spreadsheet pasting."""
        return f"{self.image_url}\t{self.tags}"
