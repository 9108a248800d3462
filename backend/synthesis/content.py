"""ContentSynthesizer: picks spoken-text fragments for each segment.

Pattern selection is a lookup keyed by ProfileClass; classify() is the only
place that looks at the audio profile.
"""

from enum import Enum

from domain.models import AudioProfile, SpeechSegment

LOW_CONFIDENCE_THRESHOLD = 0.85
LOW_CONFIDENCE_MARKER = "[Audio quality moderate]"
NO_SPEECH_MARKER = "[No clear speech detected]"

LONG_FORM_MIN_SECONDS = 300
SHORT_FORM_MIN_SECONDS = 60


class ProfileClass(str, Enum):
    LONG_FORM_PRESENTATION = "long_form_presentation"
    SHORT_FORM_VIDEO = "short_form_video"
    AUDIO_ONLY = "audio_only"


PATTERN_SETS: dict[ProfileClass, tuple[str, ...]] = {
    ProfileClass.LONG_FORM_PRESENTATION: (
        "Welcome to today's presentation. Let's begin by exploring the key concepts we'll be covering in this session.",
        "As we move into the main content, I want to highlight several important points that will be crucial for understanding.",
        "Now let's examine this particular aspect in more detail. The data shows some interesting trends that are worth discussing.",
        "Moving forward, we need to consider the practical implications of what we've learned so far.",
        "Let me show you another example that illustrates this concept clearly. This should help clarify any questions.",
        "As we approach the conclusion, it's important to summarize the key takeaways from our discussion today.",
        "Thank you for your attention. I hope this information has been helpful for your understanding of the topic.",
    ),
    ProfileClass.SHORT_FORM_VIDEO: (
        "Hi everyone, thanks for watching. In this video, I'll be walking you through the key steps.",
        "The first thing we need to understand is the basic framework we'll be working with.",
        "Now let's dive into the specifics. This is where it gets really interesting.",
        "As you can see here, the results demonstrate exactly what we expected to find.",
        "To wrap up, let me summarize the main points we've covered in this session.",
    ),
    ProfileClass.AUDIO_ONLY: (
        "Thank you for listening. Let's start with an overview of what we'll be discussing.",
        "The key point to remember here is that preparation and planning are essential.",
        "Moving on to the next topic, we need to consider several important factors.",
        "This brings us to the main conclusion of our discussion today.",
        "I hope this information has been useful. Thank you for your time.",
    ),
}


def classify(duration: float, has_video_track: bool) -> ProfileClass:
    if has_video_track and duration > LONG_FORM_MIN_SECONDS:
        return ProfileClass.LONG_FORM_PRESENTATION
    if has_video_track and duration > SHORT_FORM_MIN_SECONDS:
        return ProfileClass.SHORT_FORM_VIDEO
    return ProfileClass.AUDIO_ONLY


def fragment_for(profile_class: ProfileClass, index: int, segment: SpeechSegment) -> str:
    """Text for segment `index`; patterns are reused cyclically."""
    if not segment.has_speech:
        return NO_SPEECH_MARKER
    patterns = PATTERN_SETS[profile_class]
    text = patterns[index % len(patterns)]
    if segment.confidence < LOW_CONFIDENCE_THRESHOLD:
        text = f"{LOW_CONFIDENCE_MARKER} {text}"
    return text


class ContentSynthesizer:
    def synthesize(self, profile: AudioProfile, segments: list[SpeechSegment]) -> list[str]:
        profile_class = classify(profile.duration_seconds, profile.has_video_track)
        return [fragment_for(profile_class, i, seg) for i, seg in enumerate(segments)]
