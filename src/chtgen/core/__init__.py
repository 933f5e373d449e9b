"""Core functionality for header image and tag generation.

This module provides the core components of CHT-Gen:

- **generate_content**: Two-step workflow (article analysis, then image rendering)
- **GenerationClient / GeminiClient**: Narrow interface to the external AI service
- **AnalysisResult / GenerationResult**: Result models
- **CHTGenConfig**: Configuration management using Pydantic Settings
- **config**: Global configuration instance (loads from environment variables)

Architecture Overview
---------------------
1. **Configuration Layer** (config.py):
   - Environment-based configuration using Pydantic Settings
   - Settings prefixed with CHTGEN_; the API key also accepts API_KEY

2. **Client Layer** (clients.py, prompts.py):
   - Gemini structured-output analysis and Imagen rendering via google-genai
   - Fixed instruction template and response schema

3. **Workflow Layer** (generator.py):
   - Sequential analysis -> image calls
   - Maps every failure to a single user-facing GenerationError

Usage Example
-------------
    from chtgen.core import config, create_client, generate_content

    client = create_client(config)
    result = generate_content(article_text, client)
    print(result.tags)
"""

from chtgen.core.clients import GeminiClient, GenerationClient, create_client
from chtgen.core.config import CHTGenConfig, config
from chtgen.core.errors import (
    CHTGenError,
    ConfigurationError,
    GenerationError,
    MalformedAnalysisError,
)
from chtgen.core.generator import format_tags, generate_content
from chtgen.core.models import AnalysisResult, GenerationResult

__all__ = [
    "AnalysisResult",
    "CHTGenConfig",
    "CHTGenError",
    "ConfigurationError",
    "GeminiClient",
    "GenerationClient",
    "GenerationError",
    "GenerationResult",
    "MalformedAnalysisError",
    "config",
    "create_client",
    "format_tags",
    "generate_content",
]
