"""Conector Google Vision: OCR com confiança média por palavra."""

from .client import VisionClient, build_annotate_request, summarize_annotation
from .confidence import average_word_confidence, iter_words

__all__ = [
    "VisionClient",
    "average_word_confidence",
    "build_annotate_request",
    "iter_words",
    "summarize_annotation",
]
