"""Deterministic transcript synthesis stages shared by every provider."""

from .content import ContentSynthesizer, ProfileClass
from .formatter import TranscriptFormatter, static_fallback_transcript
from .segments import SegmentDetector
from .summary import SummaryExtractor

__all__ = [
    "ContentSynthesizer",
    "ProfileClass",
    "SegmentDetector",
    "SummaryExtractor",
    "TranscriptFormatter",
    "static_fallback_transcript",
]
