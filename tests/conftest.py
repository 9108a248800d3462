"""Pytest configuration helpers and shared fakes."""

from __future__ import annotations

import random
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

import pytest


def _ensure_backend_on_path() -> None:
    """Allow tests to import backend modules without setting PYTHONPATH."""
    backend = Path(__file__).resolve().parents[1] / "backend"
    path_str = str(backend)
    if path_str not in sys.path:
        sys.path.insert(0, path_str)


_ensure_backend_on_path()

from domain.models import AudioProfile  # noqa: E402
from ports.audio import AudioProcessingPort  # noqa: E402
from ports.progress import ProgressPort  # noqa: E402

FIXED_NOW = datetime(2024, 5, 1, 9, 30, 0)


class FakeAudioAdapter(AudioProcessingPort):
    """Stands in for ffmpeg: 'converts' by touching a sibling .wav file."""

    def __init__(self, profiles: dict[str, AudioProfile], fail_convert: bool = False):
        self.profiles = profiles
        self.fail_convert = fail_convert
        self.converted: list[str] = []
        self.probed: list[str] = []

    def convert_to_wav(self, input_path: str, sample_rate: int = 16000) -> str:
        if self.fail_convert:
            from domain.errors import ConversionError
            raise ConversionError("ffmpeg exploded")
        if input_path.lower().endswith(".wav"):
            return input_path
        output = str(Path(input_path).with_suffix(".converted.wav"))
        Path(output).write_bytes(b"RIFF")
        self.converted.append(output)
        return output

    def probe(self, path: str) -> AudioProfile:
        self.probed.append(path)
        for suffix, profile in self.profiles.items():
            if path.endswith(suffix):
                return profile
        from domain.errors import ProbeError
        raise ProbeError(f"no metadata for {path}")


class RecordingProgress(ProgressPort):
    def __init__(self):
        self.events: list[tuple[str, str, float, Optional[str]]] = []

    def report(self, job_id, stage, progress=0.0, detail=None) -> None:
        self.events.append((job_id, stage, progress, detail))


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_NOW


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def audio_only_profile() -> AudioProfile:
    return AudioProfile(
        duration_seconds=30.0,
        bitrate=256000,
        size_bytes=960044,
        audio_codec="pcm_s16le",
        sample_rate_hz=16000,
        channel_count=1,
        has_video_track=False,
        source_name="interview.wav",
    )


@pytest.fixture
def progress() -> RecordingProgress:
    return RecordingProgress()
