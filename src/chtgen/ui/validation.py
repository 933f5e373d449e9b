"""Validation utilities for CHT-Gen UI inputs."""

import logging

from .models import ARTICLE_TOO_SHORT_MESSAGE, MIN_ARTICLE_LENGTH

logger = logging.getLogger(__name__)


class ValidationError(Exception):
    """User-friendly validation error.

    This exception is raised when user input fails validation.
    The message is intended to be displayed directly to the user.
    """

    pass


def validate_article_text(article_text: str | None, min_length: int = MIN_ARTICLE_LENGTH) -> str:
    """Check that the article is long enough to be worth analyzing.

    Only the trimmed length is checked; there is no upper bound.

    Args:
        article_text: Text from the article textarea
        min_length: Minimum trimmed length (default: 100 characters)

    Returns:
        The article text, unchanged

    Raises:
        ValidationError: If the trimmed text is shorter than min_length
    """
    text = article_text or ""
    trimmed_length = len(text.strip())
    if trimmed_length < min_length:
        logger.debug(f"Article rejected: {trimmed_length} < {min_length} characters")
        raise ValidationError(ARTICLE_TOO_SHORT_MESSAGE.format(min_length=min_length))
    return text
