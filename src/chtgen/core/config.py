"""Configuration management for CHT-Gen.

This module provides centralized configuration management using Pydantic Settings.
Configuration is loaded from environment variables with the CHTGEN_ prefix,
allowing easy customization without code changes.

Environment Variable Loading
-----------------------------
Configuration values are loaded in the following priority order:
1. Environment variables (CHTGEN_* prefix)
2. .env file in the project root
3. Default values defined in CHTGenConfig

Example .env file:
    CHTGEN_API_KEY=your-gemini-key
    CHTGEN_TEXT_MODEL=gemini-2.5-pro
    CHTGEN_IMAGE_MODEL=imagen-4.0-generate-001
    CHTGEN_SERVER_PORT=7860

API Credential
--------------
The Gemini API key is the only required setting. It is accepted under any of
``CHTGEN_API_KEY``, ``API_KEY`` or ``GEMINI_API_KEY`` (first match wins).
The configuration itself does not fail when the key is absent; the check
happens in :func:`chtgen.core.clients.create_client`, which the application
entry point calls before the UI is launched.

Global Configuration Instance
------------------------------
A global `config` instance is created automatically at module import time.

Usage Example
-------------
    from chtgen.core.config import config

    print(config.text_model)
    print(config.min_article_length)

See Also
--------
- CHTGenConfig: Full configuration class documentation
"""

from pathlib import Path

from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class CHTGenConfig(BaseSettings):
    """Main configuration for CHT-Gen.

    Attributes
    ----------
    Service Settings:
        api_key : SecretStr | None
            Gemini API key (CHTGEN_API_KEY, API_KEY or GEMINI_API_KEY)
        text_model : str
            Model used to analyze the article (image prompt + tags)
        image_model : str
            Model used to render the header image

    Generation Settings:
        min_article_length : int
            Minimum trimmed article length accepted for generation
        copy_feedback_seconds : float
            How long the "Copied!" acknowledgment stays visible

    Paths:
        downloads_dir : Path | None
            Where downloadable images are written (system temp dir if unset)

    UI Settings:
        server_name : str
            Server bind address
        server_port : int
            Server port (1024-65535)
        share : bool
            Create public gradio.live link
        log_level : str
            Root logging level for the application

    Examples
    --------
        >>> custom_config = CHTGenConfig(api_key="test-key", server_port=8080)
        >>> custom_config.image_model
        'imagen-4.0-generate-001'
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="CHTGEN_",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # Service settings
    api_key: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices("api_key", "CHTGEN_API_KEY", "API_KEY", "GEMINI_API_KEY"),
        description="Gemini API key",
    )
    text_model: str = Field(
        default="gemini-2.5-pro",
        description="Model used for article analysis",
    )
    image_model: str = Field(
        default="imagen-4.0-generate-001",
        description="Model used for header image generation",
    )

    # Generation settings
    min_article_length: int = Field(
        default=100,
        ge=1,
        description="Minimum trimmed article length",
    )
    copy_feedback_seconds: float = Field(
        default=2.0,
        gt=0,
        description="Duration of the 'Copied!' acknowledgment",
    )

    # Paths
    downloads_dir: Path | None = Field(
        default=None,
        description="Directory for downloadable images (system temp dir if unset)",
    )

    # UI settings
    server_name: str = Field(
        default="0.0.0.0",
        description="Server bind address (0.0.0.0 for local network)",
    )
    server_port: int = Field(
        default=7860,
        description="Server port",
        ge=1024,
        le=65535,
    )
    share: bool = Field(
        default=False,
        description="Create public gradio.live link (keep False for local-only)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )

    def __init__(self, **kwargs):
        """Initialize configuration and create the downloads directory if one is set."""
        super().__init__(**kwargs)

        if self.downloads_dir is not None:
            self.downloads_dir.mkdir(parents=True, exist_ok=True)

    @property
    def has_api_key(self) -> bool:
        """True if a non-blank API key is configured."""
        return self.api_key is not None and bool(self.api_key.get_secret_value().strip())


# Global configuration instance
# Loads values from environment variables (CHTGEN_* prefix, API_KEY) and .env file.
config = CHTGenConfig()
