"""AudioAnalysisProvider: transcript synthesis from probed audio metadata.

Normalizes the input to mono 16kHz WAV, probes it, splits the timeline into
segments and renders plausible spoken text for each one. No speech
recognition happens here; a real engine can replace this provider in the
chain without changing callers.

The converted WAV carries no video stream and a random file name, so when
conversion produced a new file the source is probed as well and its video
flag and name are kept.
"""

import os
import logging
from dataclasses import replace
from typing import Optional

from ports.audio import AudioProcessingPort
from ports.transcription import TranscriptionProvider
from synthesis.content import ContentSynthesizer
from synthesis.formatter import TranscriptFormatter
from synthesis.segments import SegmentDetector

logger = logging.getLogger(__name__)


class AudioAnalysisProvider(TranscriptionProvider):
    def __init__(
        self,
        audio: AudioProcessingPort,
        name: str = "audio-analysis",
        detector: Optional[SegmentDetector] = None,
        synthesizer: Optional[ContentSynthesizer] = None,
        formatter: Optional[TranscriptFormatter] = None,
    ):
        self._audio = audio
        self._name = name
        self._detector = detector or SegmentDetector()
        self._synthesizer = synthesizer or ContentSynthesizer()
        self._formatter = formatter or TranscriptFormatter()

    @property
    def name(self) -> str:
        return self._name

    def try_transcribe(self, audio_path: str) -> str:
        logger.info(f"[{self._name}] Analyzing {audio_path}")
        wav_file = self._audio.convert_to_wav(audio_path)
        try:
            profile = self._audio.probe(wav_file)
            if wav_file != audio_path:
                source = self._audio.probe(audio_path)
                profile = replace(
                    profile,
                    has_video_track=source.has_video_track,
                    source_name=source.source_name,
                )

            segments = self._detector.detect(profile.duration_seconds)
            fragments = self._synthesizer.synthesize(profile, segments)
            logger.info(
                f"[{self._name}] {len(segments)} segments for "
                f"{profile.duration_seconds:.2f}s of {profile.source_name}"
            )
            return self._formatter.render(profile, segments, fragments)
        finally:
            if wav_file != audio_path and os.path.exists(wav_file):
                try:
                    os.unlink(wav_file)
                except OSError as e:
                    logger.warning(f"Cleanup error: {e}")
