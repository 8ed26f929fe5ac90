"""Text normalization layer.

This module provides:
- NormalizedText: Lowercase, stop-word-filtered token sequence
- TextNormalizer: Service turning raw documents into NormalizedText
- normalize: Convenience function using the default stop-word list
"""

from .models import NormalizedText
from .service import STOP_WORDS, TextNormalizer, normalize

__all__ = [
    "NormalizedText",
    "TextNormalizer",
    "normalize",
    "STOP_WORDS",
]
