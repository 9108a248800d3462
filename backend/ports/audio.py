"""AudioProcessingPort: abstract interface for audio normalization and probing."""

from abc import ABC, abstractmethod

from domain.models import AudioProfile


class AudioProcessingPort(ABC):
    @abstractmethod
    def convert_to_wav(self, input_path: str, sample_rate: int = 16000) -> str:
        """Convert audio to mono WAV. Returns the input path when it is already WAV."""

    @abstractmethod
    def probe(self, path: str) -> AudioProfile:
        """Extract duration, codec, sample rate and stream layout. Raises ProbeError."""
