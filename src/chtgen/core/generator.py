"""Two-step generation workflow: article -> (image prompt, tags) -> header image.

:func:`generate_content` is the single entry point. It is stateless: all
service access goes through the :class:`~chtgen.core.clients.GenerationClient`
passed in, and every failure leaves as a :class:`GenerationError` whose
message can be shown to the user unchanged. Nothing is retried and no partial
result is ever returned.
"""

import base64
import logging
import re

from .clients import GenerationClient
from .errors import GenerationError, MalformedAnalysisError
from .models import PNG_DATA_URI_PREFIX, AnalysisResult, GenerationResult
from .prompts import TAG_COUNT

logger = logging.getLogger(__name__)

ANALYSIS_FAILED_MESSAGE = "Failed to get a valid analysis from the AI."
IMAGE_FAILED_MESSAGE = "Image generation failed."
TRANSPORT_FAILED_PREFIX = "AI generation failed: "
UNKNOWN_FAILURE_MESSAGE = "An unknown error occurred during AI generation."

_WHITESPACE = re.compile(r"\s+")


def generate_content(article_text: str, client: GenerationClient) -> GenerationResult:
    """Generate a header image and SEO tags for an article.

    Args:
        article_text: Article text (length is validated by the caller)
        client: Service client used for both external calls

    Returns:
        GenerationResult with a PNG data URI and a formatted tag string

    Raises:
        GenerationError: On transport failure, unusable analysis, or missing image
    """
    logger.info(f"Analyzing article ({len(article_text)} characters) with {client.name}")
    analysis = _run_analysis(article_text, client)

    logger.info(f"Rendering header image ({len(analysis.tags)} tags received)")
    image_bytes = _run_image(analysis.image_prompt, client)

    result = GenerationResult(
        image_url=encode_data_uri(image_bytes),
        tags=format_tags(analysis.tags),
    )
    logger.info(f"Generation complete: {len(image_bytes)} image bytes, tags={result.tags!r}")
    return result


def _run_analysis(article_text: str, client: GenerationClient) -> AnalysisResult:
    try:
        analysis = client.analyze(article_text)
    except MalformedAnalysisError as e:
        logger.error(f"Malformed analysis response: {e}")
        raise GenerationError(ANALYSIS_FAILED_MESSAGE) from e
    except Exception as e:
        raise _transport_error(e) from e

    if not analysis.is_complete():
        logger.error(
            f"Incomplete analysis: prompt={'set' if analysis.image_prompt else 'missing'}, "
            f"tags={len(analysis.tags)}"
        )
        raise GenerationError(ANALYSIS_FAILED_MESSAGE)

    if len(analysis.tags) != TAG_COUNT:
        logger.warning(f"Expected {TAG_COUNT} tags, got {len(analysis.tags)}")

    return analysis


def _run_image(prompt: str, client: GenerationClient) -> bytes:
    try:
        image_bytes = client.render_image(prompt)
    except Exception as e:
        raise _transport_error(e) from e

    if not image_bytes:
        logger.error("Image response contained no image bytes")
        raise GenerationError(IMAGE_FAILED_MESSAGE)

    return image_bytes


def _transport_error(error: Exception) -> GenerationError:
    """Map a lower-level failure to a user-facing GenerationError."""
    logger.error(f"Error in generation service: {error}", exc_info=error)
    message = str(error)
    if message:
        return GenerationError(f"{TRANSPORT_FAILED_PREFIX}{message}")
    return GenerationError(UNKNOWN_FAILURE_MESSAGE)


def encode_data_uri(image_bytes: bytes) -> str:
    """Encode PNG bytes as a ``data:image/png;base64,...`` URI."""
    return PNG_DATA_URI_PREFIX + base64.b64encode(image_bytes).decode("ascii")


def format_tags(tags: list[str]) -> str:
    """Format tags as ``#tag`` tokens joined by single spaces.

    All whitespace inside a tag is removed, so ``"time management"`` becomes
    ``"#timemanagement"``. Tags that are empty once whitespace is removed are
    dropped rather than rendered as a bare ``#``.
    """
    cleaned = (_WHITESPACE.sub("", tag) for tag in tags)
    return " ".join(f"#{tag}" for tag in cleaned if tag)
