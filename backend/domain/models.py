"""Framework-agnostic domain models for Scribe Digest.

Pydantic DTOs in models.py stay at the HTTP boundary; the synthesis pipeline
only ever sees these dataclasses.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class AudioProfile:
    """Technical metadata extracted from a media file."""
    duration_seconds: float = 0.0
    bitrate: int = 0
    size_bytes: int = 0
    audio_codec: str = "unknown"
    sample_rate_hz: int = 0
    channel_count: int = 0
    has_video_track: bool = False
    source_name: str = ""


@dataclass(frozen=True)
class SpeechSegment:
    """A slice of the timeline with a speech-presence judgment."""
    start_seconds: float
    end_seconds: float
    confidence: float
    has_speech: bool


@dataclass
class TranscriptionResult:
    """What the pipeline hands back to its caller."""
    transcript: str
    summary: str
    provider: str


@dataclass
class ChainOutcome:
    """Terminal state of the provider fallback chain."""
    transcript: str
    provider: str
    state: str
    failures: list[tuple[str, str]] = field(default_factory=list)
