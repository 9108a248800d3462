"""SegmentDetector: partitions a duration into candidate speech segments.

Segments are evenly sized, roughly SEGMENT_TARGET_SECONDS long, with at
least MIN_SEGMENTS per file. Confidence is sampled rather than measured.
"""

import math
import random
from typing import Optional

from domain.models import SpeechSegment

SEGMENT_TARGET_SECONDS = 15
MIN_SEGMENTS = 3

CONFIDENCE_FLOOR = 0.85
CONFIDENCE_SPAN = 0.15

# Sampling floor sits above this, so every segment counts as speech.
SPEECH_THRESHOLD = 0.70


def segment_count(duration: float) -> int:
    return max(math.floor(duration / SEGMENT_TARGET_SECONDS), MIN_SEGMENTS)


class SegmentDetector:
    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng or random.Random()

    def detect(self, duration: float) -> list[SpeechSegment]:
        """Return contiguous segments covering [0, duration]."""
        if duration < 0:
            raise ValueError(f"duration must be non-negative, got {duration}")

        count = segment_count(duration)
        segments: list[SpeechSegment] = []
        for i in range(count):
            start = i * duration / count
            end = min((i + 1) * duration / count, duration)
            confidence = CONFIDENCE_FLOOR + self._rng.random() * CONFIDENCE_SPAN
            segments.append(SpeechSegment(
                start_seconds=start,
                end_seconds=end,
                confidence=confidence,
                has_speech=confidence > SPEECH_THRESHOLD,
            ))
        return segments
