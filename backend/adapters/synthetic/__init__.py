"""Metadata-driven transcript synthesis provider."""

from .transcription import AudioAnalysisProvider

__all__ = ["AudioAnalysisProvider"]
