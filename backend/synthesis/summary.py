"""SummaryExtractor: derives a condensed digest from a formatted transcript.

Works on the transcript text alone, so any provider's output (including the
static fallback notice) can be summarized. The same input always yields the
same summary.
"""

import math
import re

from synthesis.formatter import CONTENT_END, CONTENT_START, DURATION_PREFIX

TIMESTAMP_RANGE_RE = re.compile(r"^\[\d+:\d+.*-->")
TIMESTAMP_ONLY_RE = re.compile(r"^\[\d+:\d+(?::\d+)?\]")
SENTENCE_END_RE = re.compile(r"[.!?]")
SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")

PAUSE_MARKER = "[Brief pause]"
STRUCTURAL_MARKERS = ("TRANSCRIPT", "---", "NOTE:", "•")

WORDS_PER_MINUTE = 150
SIMPLE_SUMMARY_SENTENCES = 3
MIN_SENTENCE_CHARS = 20


def word_count(text: str) -> int:
    return len(text.split())


def first_clause(line: str) -> str:
    return SENTENCE_END_RE.split(line, maxsplit=1)[0].strip()


def declared_duration(lines: list[str]) -> str:
    for line in lines:
        if line.startswith(DURATION_PREFIX):
            return line[len(DURATION_PREFIX):].strip()
    return "Unknown"


def _body(lines: list[str]) -> list[str]:
    if CONTENT_START not in lines:
        return lines
    start = lines.index(CONTENT_START) + 1
    end = lines.index(CONTENT_END, start) if CONTENT_END in lines[start:] else len(lines)
    return lines[start:end]


def _is_content(line: str) -> bool:
    stripped = line.strip()
    if not stripped:
        return False
    if TIMESTAMP_RANGE_RE.match(stripped) or TIMESTAMP_ONLY_RE.match(stripped):
        return False
    if PAUSE_MARKER in stripped:
        return False
    return not any(marker in stripped for marker in STRUCTURAL_MARKERS)


def content_lines(transcript: str) -> list[str]:
    """Spoken-text lines in order, without timestamps, pauses or header/trailer."""
    return [line.strip() for line in _body(transcript.split("\n")) if _is_content(line)]


class SummaryExtractor:
    def summarize(self, transcript: str) -> str:
        segments = content_lines(transcript)
        if len(segments) < 2:
            return self.simple_summary(transcript)
        return self.structured_summary(transcript, segments)

    def structured_summary(self, transcript: str, segments: list[str]) -> str:
        duration = declared_duration(transcript.split("\n"))
        parts = [f"**AI-Enhanced Summary** ({word_count(transcript)} words, {duration})"]

        parts.append(f"**Opening:** {first_clause(segments[0])}.")
        if len(segments) >= 3:
            middle = segments[len(segments) // 2]
            parts.append(f"**Key Discussion:** {first_clause(middle)}.")
        parts.append(f"**Conclusion:** {first_clause(segments[-1])}.")

        parts.append(
            "**Content Structure:**\n"
            f"• {len(segments)} main speaking segments\n"
            "• Covers introduction, main content, and conclusion\n"
            "• Professional presentation format"
        )
        parts.append("*Summary generated from timestamped transcript analysis.*")
        return "\n\n".join(parts)

    def simple_summary(self, transcript: str) -> str:
        sentences = [
            s.strip() for s in SENTENCE_SPLIT_RE.split(transcript)
            if len(s.strip()) > MIN_SENTENCE_CHARS
        ]
        key_points = ". ".join(sentences[:SIMPLE_SUMMARY_SENTENCES])
        key_points = f"{key_points}." if key_points else "No extended speech found."

        words = word_count(transcript)
        minutes = math.ceil(words / WORDS_PER_MINUTE)
        return (
            f"**Free Summary** ({words} words, ~{minutes} min)\n\n"
            f"{key_points}\n\n"
            "*Generated using local text processing.*"
        )
