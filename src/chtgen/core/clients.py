"""Generation clients: the boundary to the external AI service.

The orchestrator only ever talks to a :class:`GenerationClient`, a narrow
two-method interface:

- ``analyze(article_text) -> AnalysisResult``
- ``render_image(prompt) -> bytes | None``

:class:`GeminiClient` implements it on top of the ``google-genai`` SDK
(Gemini for the structured analysis, Imagen for the header image). Tests
substitute their own implementation, so the orchestration logic never needs
the network.

Usage Example
-------------
    >>> from chtgen.core.clients import create_client
    >>> from chtgen.core.config import config
    >>>
    >>> client = create_client(config)  # raises ConfigurationError without a key
    >>> analysis = client.analyze(article_text)
    >>> png = client.render_image(analysis.image_prompt)
"""

import json
import logging
from abc import ABC, abstractmethod

from google import genai
from google.genai import types
from pydantic import ValidationError

from .config import CHTGenConfig
from .errors import ConfigurationError, MalformedAnalysisError
from .models import AnalysisResult
from .prompts import ANALYSIS_SCHEMA, IMAGE_ASPECT_RATIO, build_analysis_prompt

logger = logging.getLogger(__name__)

MISSING_API_KEY_MESSAGE = "API_KEY environment variable not set"


class GenerationClient(ABC):
    """Abstract interface to the text and image generation service.

    Implementations raise whatever their transport raises; the orchestrator
    wraps those errors. The one exception is :class:`MalformedAnalysisError`,
    which implementations raise when the analysis payload cannot be parsed.
    """

    name: str = "Base Client"

    @abstractmethod
    def analyze(self, article_text: str) -> AnalysisResult:
        """Ask the text model for an image prompt and SEO tags.

        Args:
            article_text: Raw article text

        Returns:
            Parsed analysis (possibly incomplete)

        Raises:
            MalformedAnalysisError: If the payload is not a JSON object
        """

    @abstractmethod
    def render_image(self, prompt: str) -> bytes | None:
        """Render a single header image.

        Args:
            prompt: Image prompt produced by :meth:`analyze`

        Returns:
            PNG bytes, or None if the service returned no image
        """

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"


class GeminiClient(GenerationClient):
    """Gemini / Imagen implementation using the google-genai SDK."""

    name = "Gemini"

    def __init__(
        self,
        api_key: str,
        text_model: str = "gemini-2.5-pro",
        image_model: str = "imagen-4.0-generate-001",
        sdk_client: genai.Client | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            api_key: Gemini API key
            text_model: Model used for the analysis call
            image_model: Model used for the image call
            sdk_client: Pre-built SDK client (tests); created from api_key if None
        """
        self.text_model = text_model
        self.image_model = image_model
        self._client = sdk_client or genai.Client(api_key=api_key)
        logger.info(f"Initialized {self.name} client (text={text_model}, image={image_model})")

    def analyze(self, article_text: str) -> AnalysisResult:
        response = self._client.models.generate_content(
            model=self.text_model,
            contents=build_analysis_prompt(article_text),
            config=types.GenerateContentConfig(
                response_mime_type="application/json",
                response_schema=ANALYSIS_SCHEMA,
            ),
        )
        return parse_analysis(response.text)

    def render_image(self, prompt: str) -> bytes | None:
        response = self._client.models.generate_images(
            model=self.image_model,
            prompt=prompt,
            config=types.GenerateImagesConfig(
                number_of_images=1,
                aspect_ratio=IMAGE_ASPECT_RATIO,
                output_mime_type="image/png",
            ),
        )

        if not response.generated_images:
            logger.warning("Image model returned no images")
            return None

        image = response.generated_images[0].image
        if image is None or not image.image_bytes:
            logger.warning("Image model returned an image without inline bytes")
            return None

        return image.image_bytes


def parse_analysis(payload: str | None) -> AnalysisResult:
    """Parse the JSON text returned by the analysis call.

    Args:
        payload: Raw response text

    Returns:
        AnalysisResult (fields may be empty)

    Raises:
        MalformedAnalysisError: If the payload is empty, not JSON, or not an object
    """
    if not payload:
        raise MalformedAnalysisError("Empty analysis response")

    try:
        data = json.loads(payload)
    except json.JSONDecodeError as e:
        raise MalformedAnalysisError(f"Analysis response is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise MalformedAnalysisError(
            f"Analysis response is a {type(data).__name__}, expected an object"
        )

    try:
        return AnalysisResult.model_validate(data)
    except ValidationError as e:
        raise MalformedAnalysisError(f"Analysis response has the wrong shape: {e}") from e


def create_client(config: CHTGenConfig) -> GenerationClient:
    """Build the Gemini client from configuration.

    Args:
        config: Application configuration

    Returns:
        Ready-to-use GeminiClient

    Raises:
        ConfigurationError: If no API key is configured
    """
    if not config.has_api_key:
        logger.error(MISSING_API_KEY_MESSAGE)
        raise ConfigurationError(MISSING_API_KEY_MESSAGE)

    return GeminiClient(
        api_key=config.api_key.get_secret_value(),
        text_model=config.text_model,
        image_model=config.image_model,
    )
