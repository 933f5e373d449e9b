"""CHT-Gen - Content-to-Header & Tag Generator."""

__version__ = "0.1.0"

from chtgen.core.config import CHTGenConfig, config
from chtgen.core.errors import ConfigurationError, GenerationError
from chtgen.core.generator import generate_content
from chtgen.core.models import AnalysisResult, GenerationResult

__all__ = [
    "AnalysisResult",
    "CHTGenConfig",
    "ConfigurationError",
    "GenerationError",
    "GenerationResult",
    "config",
    "generate_content",
]
