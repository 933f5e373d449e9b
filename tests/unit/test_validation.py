"""Unit tests for validation utilities."""

import pytest

from chtgen.ui.validation import ValidationError, validate_article_text

TOO_SHORT = "Article content is too short. Please provide at least 100 characters."


class TestValidationError:
    """Tests for ValidationError exception."""

    def test_validation_error_is_exception(self):
        """Test that ValidationError is an Exception."""
        assert issubclass(ValidationError, Exception)

    def test_validation_error_message(self):
        """Test that ValidationError preserves error message."""
        msg = "Custom validation error"
        with pytest.raises(ValidationError, match=msg):
            raise ValidationError(msg)


class TestValidateArticleText:
    """Tests for validate_article_text function."""

    def test_exactly_minimum_passes(self):
        """Test that 100 characters is accepted."""
        text = "x" * 100
        assert validate_article_text(text) == text

    def test_one_below_minimum_fails(self):
        """Test that 99 characters is rejected with the fixed message."""
        with pytest.raises(ValidationError) as exc_info:
            validate_article_text("x" * 99)
        assert str(exc_info.value) == TOO_SHORT

    def test_surrounding_whitespace_not_counted(self):
        """Test that padding does not make a short article long enough."""
        with pytest.raises(ValidationError):
            validate_article_text("   " + "x" * 99 + "\n\n\n")

    @pytest.mark.parametrize("text", [None, "", "    \n\t"])
    def test_empty_input_fails(self, text):
        """Test that empty and whitespace-only input is rejected."""
        with pytest.raises(ValidationError, match="too short"):
            validate_article_text(text)

    def test_no_upper_bound(self):
        """Test that very long articles are accepted."""
        text = "word " * 50_000
        assert validate_article_text(text) == text

    def test_custom_minimum(self):
        """Test that the minimum and message follow the configured length."""
        with pytest.raises(ValidationError, match="at least 20 characters"):
            validate_article_text("short", min_length=20)
