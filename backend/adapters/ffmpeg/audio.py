"""FFmpegAudioAdapter: format normalization and metadata probing via ffmpeg/ffprobe."""

import os
import json
import uuid
import logging
import subprocess
from typing import Optional

from domain.errors import ConversionError, ProbeError
from domain.models import AudioProfile
from ports.audio import AudioProcessingPort

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 120.0


def _to_float(value) -> float:
    try:
        return max(float(value), 0.0)
    except (TypeError, ValueError):
        return 0.0


def _to_int(value) -> int:
    try:
        return max(int(float(value)), 0)
    except (TypeError, ValueError):
        return 0


def parse_probe_output(metadata: dict, path: str) -> AudioProfile:
    """Build an AudioProfile from ffprobe's JSON, defaulting whatever is missing."""
    fmt = metadata.get("format") or {}
    streams = metadata.get("streams") or []
    audio_stream = next((s for s in streams if s.get("codec_type") == "audio"), {})
    has_video = any(s.get("codec_type") == "video" for s in streams)

    return AudioProfile(
        duration_seconds=_to_float(fmt.get("duration")),
        bitrate=_to_int(fmt.get("bit_rate")),
        size_bytes=_to_int(fmt.get("size")),
        audio_codec=audio_stream.get("codec_name") or "unknown",
        sample_rate_hz=_to_int(audio_stream.get("sample_rate")),
        channel_count=_to_int(audio_stream.get("channels")),
        has_video_track=has_video,
        source_name=os.path.basename(path),
    )


class FFmpegAudioAdapter(AudioProcessingPort):
    def __init__(self, temp_dir: Optional[str] = None, timeout: float = DEFAULT_TIMEOUT):
        self._temp_dir = temp_dir
        self._timeout = timeout

    def convert_to_wav(self, input_path: str, sample_rate: int = 16000) -> str:
        if os.path.splitext(input_path)[1].lower() == ".wav":
            return input_path

        output_dir = self._temp_dir or os.path.dirname(os.path.abspath(input_path))
        output_path = os.path.join(output_dir, f"{uuid.uuid4().hex}.wav")

        cmd = [
            "ffmpeg", "-y",
            "-i", input_path,
            "-c:a", "pcm_s16le",
            "-ar", str(sample_rate),
            "-ac", "1",
            output_path,
        ]
        try:
            result = subprocess.run(cmd, capture_output=True, text=True, timeout=self._timeout)
        except FileNotFoundError as e:
            raise ConversionError(f"ffmpeg not available: {e}") from e
        except subprocess.TimeoutExpired as e:
            self._discard(output_path)
            raise ConversionError(f"ffmpeg timed out after {self._timeout}s") from e

        if result.returncode != 0:
            logger.error(f"Error converting audio: {result.stderr}")
            self._discard(output_path)
            raise ConversionError(f"Failed to convert audio: {result.stderr[-500:]}")

        logger.debug(f"Converted {input_path} -> {output_path}")
        return output_path

    def probe(self, path: str) -> AudioProfile:
        cmd = [
            "ffprobe",
            "-v", "error",
            "-print_format", "json",
            "-show_format",
            "-show_streams",
            path,
        ]
        try:
            result = subprocess.run(cmd, capture_output=True, text=True, timeout=self._timeout)
        except FileNotFoundError as e:
            raise ProbeError(f"ffprobe not available: {e}") from e
        except subprocess.TimeoutExpired as e:
            raise ProbeError(f"ffprobe timed out after {self._timeout}s") from e

        if result.returncode != 0:
            logger.error(f"Error probing {path}: {result.stderr}")
            raise ProbeError(f"Failed to probe media: {result.stderr[-500:]}")

        try:
            metadata = json.loads(result.stdout or "")
        except json.JSONDecodeError as e:
            raise ProbeError(f"Unreadable ffprobe output for {path}") from e
        if not isinstance(metadata, dict):
            raise ProbeError(f"Unexpected ffprobe output for {path}")

        profile = parse_probe_output(metadata, path)
        logger.info(f"Detailed audio info: {profile}")
        return profile

    @staticmethod
    def _discard(path: str) -> None:
        if os.path.exists(path):
            os.unlink(path)
