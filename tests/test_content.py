import pytest

from domain.models import AudioProfile, SpeechSegment
from synthesis.content import (
    LOW_CONFIDENCE_MARKER,
    NO_SPEECH_MARKER,
    PATTERN_SETS,
    ContentSynthesizer,
    ProfileClass,
    classify,
    fragment_for,
)


def _seg(confidence=0.9, has_speech=True):
    return SpeechSegment(0.0, 1.0, confidence, has_speech)


@pytest.mark.parametrize(
    "duration,has_video,expected",
    [
        (400, True, ProfileClass.LONG_FORM_PRESENTATION),
        (90, True, ProfileClass.SHORT_FORM_VIDEO),
        (90, False, ProfileClass.AUDIO_ONLY),
        (400, False, ProfileClass.AUDIO_ONLY),
        (300, True, ProfileClass.SHORT_FORM_VIDEO),
        (60, True, ProfileClass.AUDIO_ONLY),
    ],
)
def test_classify(duration, has_video, expected):
    assert classify(duration, has_video) is expected


def test_pattern_set_sizes():
    assert len(PATTERN_SETS[ProfileClass.LONG_FORM_PRESENTATION]) == 7
    assert len(PATTERN_SETS[ProfileClass.SHORT_FORM_VIDEO]) == 5
    assert len(PATTERN_SETS[ProfileClass.AUDIO_ONLY]) == 5


def test_fragments_are_reused_cyclically():
    profile = AudioProfile(duration_seconds=150, has_video_track=False)
    fragments = ContentSynthesizer().synthesize(profile, [_seg() for _ in range(10)])

    assert len(fragments) == 10
    assert fragments[7] == fragments[2]
    assert fragments[0] == PATTERN_SETS[ProfileClass.AUDIO_ONLY][0]


def test_long_form_video_uses_presentation_set():
    profile = AudioProfile(duration_seconds=400, has_video_track=True)
    fragments = ContentSynthesizer().synthesize(profile, [_seg() for _ in range(3)])
    assert fragments[0].startswith("Welcome to today's presentation")


def test_low_confidence_gets_marker():
    text = fragment_for(ProfileClass.AUDIO_ONLY, 1, _seg(confidence=0.8))
    assert text == f"{LOW_CONFIDENCE_MARKER} {PATTERN_SETS[ProfileClass.AUDIO_ONLY][1]}"


def test_confidence_at_threshold_has_no_marker():
    text = fragment_for(ProfileClass.AUDIO_ONLY, 0, _seg(confidence=0.85))
    assert not text.startswith(LOW_CONFIDENCE_MARKER)


def test_no_speech_segment_renders_marker():
    assert fragment_for(ProfileClass.SHORT_FORM_VIDEO, 3, _seg(has_speech=False)) == NO_SPEECH_MARKER
