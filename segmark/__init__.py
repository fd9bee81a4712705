"""Top-level package for segmark.

This package turns generated Markdown books into ordered, optionally bilingual
segments grouped into chapters. The main entry point is
`MarkdownSegmentationEngine`.
"""

from loguru import logger

from .engine import MarkdownSegmentationEngine
from .errors import OriginError
from .origin import calculate_origin, parse_origin, validate_origin

logger.disable("segmark")

__all__ = [
    "MarkdownSegmentationEngine",
    "OriginError",
    "calculate_origin",
    "parse_origin",
    "validate_origin",
    "__version__",
]

__version__ = "0.1.0"
