"""TranscriptionProvider: uniform interface for one fallback strategy."""

from abc import ABC, abstractmethod


class TranscriptionProvider(ABC):
    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable provider name used in logs and responses."""

    @abstractmethod
    def try_transcribe(self, audio_path: str) -> str:
        """Produce a transcript for the file or raise. Never returns partial output."""
