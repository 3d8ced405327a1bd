"""Character processing layer: charset detection and transcoding."""

from .encoding import (
    DECLARATION_SCAN_LIMIT,
    BOMDetector,
    DetectionMethod,
    EncodingDetector,
    EncodingResult,
    XMLDeclarationParser,
    decode_document,
)

__all__ = [
    "DECLARATION_SCAN_LIMIT",
    "BOMDetector",
    "DetectionMethod",
    "EncodingDetector",
    "EncodingResult",
    "XMLDeclarationParser",
    "decode_document",
]
