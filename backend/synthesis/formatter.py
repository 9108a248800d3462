"""TranscriptFormatter: assembles header, timestamped body and trailer.

The output is plain text; SummaryExtractor parses it back using the section
markers defined here.
"""

import math
from datetime import datetime
from typing import Callable, Optional

from domain.models import AudioProfile, SpeechSegment
from synthesis.content import NO_SPEECH_MARKER

CONTENT_START = "--- TIMESTAMPED CONTENT ---"
CONTENT_END = "--- END TRANSCRIPT ---"
DURATION_PREFIX = "Duration: "

HIGH_QUALITY_HZ = 44100
MEDIUM_QUALITY_HZ = 22050

SUGGESTED_PROVIDERS = (
    "AssemblyAI (free tier: 5 hours/month)",
    "Deepgram (free tier: $200 credit)",
    "Rev.ai (pay-per-minute)",
    "Google Speech-to-Text (free tier: 60 minutes/month)",
)


def format_duration(seconds: float) -> str:
    """H:MM:SS at or above one hour, otherwise M:SS."""
    total = int(math.floor(seconds))
    hours, rem = divmod(total, 3600)
    minutes, secs = divmod(rem, 60)
    if hours > 0:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"


format_timestamp = format_duration


def audio_quality(sample_rate_hz: int) -> str:
    if sample_rate_hz >= HIGH_QUALITY_HZ:
        return "High"
    if sample_rate_hz >= MEDIUM_QUALITY_HZ:
        return "Medium"
    return "Basic"


def _round_percent(value: float) -> int:
    return int(math.floor(value * 100 + 0.5))


class TranscriptFormatter:
    def __init__(self, clock: Optional[Callable[[], datetime]] = None):
        self._clock = clock or datetime.now

    def render(
        self,
        profile: AudioProfile,
        segments: list[SpeechSegment],
        fragments: list[str],
    ) -> str:
        if profile.duration_seconds < 0:
            raise ValueError(f"duration must be non-negative, got {profile.duration_seconds}")
        if not segments:
            raise ValueError("at least one segment is required")
        if len(fragments) != len(segments):
            raise ValueError(f"expected {len(segments)} fragments, got {len(fragments)}")

        lines = [
            f"TRANSCRIPT - {profile.source_name}",
            f"{DURATION_PREFIX}{format_duration(profile.duration_seconds)}",
            f"Audio: {profile.audio_codec.upper()}, {profile.sample_rate_hz}Hz",
            f"Type: {'Video with Audio' if profile.has_video_track else 'Audio Only'}",
            f"Generated: {self._clock().strftime('%Y-%m-%d %H:%M:%S')}",
            "",
            CONTENT_START,
            "",
        ]

        for seg, text in zip(segments, fragments):
            if seg.has_speech:
                lines.append(
                    f"[{format_timestamp(seg.start_seconds)} --> {format_timestamp(seg.end_seconds)}]"
                )
                lines.append(text)
            else:
                lines.append(f"[{format_timestamp(seg.start_seconds)}] {NO_SPEECH_MARKER}")
            lines.append("")

        speech_count = sum(1 for s in segments if s.has_speech)
        mean_confidence = sum(s.confidence for s in segments) / len(segments)

        lines += [
            CONTENT_END,
            "",
            "ANALYSIS SUMMARY:",
            f"• Total duration: {format_duration(profile.duration_seconds)}",
            f"• Total segments: {len(segments)}",
            f"• Speech segments: {speech_count}",
            f"• Average confidence: {_round_percent(mean_confidence)}%",
            f"• Audio quality: {audio_quality(profile.sample_rate_hz)}",
            "",
            "TECHNICAL NOTES:",
            "This transcript was generated using audio analysis.",
            "For accurate speech-to-text, connect one of:",
        ]
        lines += [f"• {name}" for name in SUGGESTED_PROVIDERS]
        return "\n".join(lines) + "\n"


def static_fallback_transcript(source_name: str) -> str:
    """Minimal notice used when every provider failed."""
    return (
        f"Audio file processed successfully: {source_name}\n"
        "\n"
        "This transcript was generated without speech recognition. The file was received, "
        "but its audio could not be analyzed in detail.\n"
        "\n"
        "In a production environment with a real speech-to-text service, this would contain "
        "the actual spoken words from your audio file.\n"
        "\n"
        "For actual speech-to-text conversion, you could integrate services like:\n"
        "- Google Speech-to-Text (has free tier)\n"
        "- AssemblyAI (free tier available)\n"
        "- Wit.ai by Meta (free with usage limits)\n"
        "\n"
        f"File processed: {source_name}"
    )
