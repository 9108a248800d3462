import random

from adapters.synthetic.transcription import AudioAnalysisProvider
from conftest import FakeAudioAdapter
from synthesis.formatter import TranscriptFormatter
from synthesis.segments import SegmentDetector
from synthesis.summary import SummaryExtractor
from use_cases.fallback_chain import ProviderFallbackChain, STATIC_FALLBACK_NAME
from use_cases.transcribe import TranscribeMediaUseCase


def _use_case(audio, progress, clock, summarizer=None):
    providers = [
        AudioAnalysisProvider(
            audio,
            name=name,
            detector=SegmentDetector(random.Random(11)),
            formatter=TranscriptFormatter(clock),
        )
        for name in ("assemblyai", "witai", "audio-analysis")
    ]
    return TranscribeMediaUseCase(ProviderFallbackChain(providers), progress, summarizer)


def test_probe_and_synthesize_end_to_end(tmp_path, audio_only_profile, progress, fixed_clock):
    source = tmp_path / "interview.wav"
    source.write_bytes(b"RIFF")
    use_case = _use_case(FakeAudioAdapter({".wav": audio_only_profile}), progress, fixed_clock)

    result = use_case.probe_and_synthesize(str(source))

    assert result.provider == "assemblyai"
    assert result.transcript.count(" --> ") == 3
    assert "• Audio quality: Basic" in result.transcript
    assert result.summary.startswith("**AI-Enhanced Summary**")
    assert "**Opening:** Thank you for listening." in result.summary
    assert [e[1] for e in progress.events] == ["transcribing", "summarizing", "done"]


def test_unreadable_file_gets_static_transcript(tmp_path, progress, fixed_clock):
    source = tmp_path / "garbage.mp3"
    source.write_bytes(b"??")
    use_case = _use_case(FakeAudioAdapter({}), progress, fixed_clock)

    result = use_case.probe_and_synthesize(str(source))

    assert result.provider == STATIC_FALLBACK_NAME
    assert "garbage.mp3" in result.transcript
    assert result.summary


def test_summary_error_falls_back_to_simple_summary(tmp_path, audio_only_profile, progress, fixed_clock):
    class BrokenSummarizer(SummaryExtractor):
        def structured_summary(self, transcript, segments):
            raise RuntimeError("boom")

    source = tmp_path / "interview.wav"
    source.write_bytes(b"RIFF")
    use_case = _use_case(
        FakeAudioAdapter({".wav": audio_only_profile}), progress, fixed_clock, BrokenSummarizer()
    )

    result = use_case.probe_and_synthesize(str(source))
    assert result.summary.startswith("**Free Summary**")


def test_cleanup_removes_files_and_ignores_missing(tmp_path, progress, fixed_clock):
    present = tmp_path / "upload.mp3"
    present.write_bytes(b"data")
    use_case = _use_case(FakeAudioAdapter({}), progress, fixed_clock)

    use_case.cleanup(str(present), str(tmp_path / "never-existed.wav"))
    assert not present.exists()
