"""TranscribeMediaUseCase: turns a stored media file into {transcript, summary}.

Accepts the fallback chain, summarizer and progress port via dependency
injection. Temporary files belong to the caller, which must call cleanup()
once the request is finished, whether it succeeded or not.
"""

import os
import logging
import uuid
from typing import Optional

from domain.models import TranscriptionResult
from ports.progress import ProgressPort
from synthesis.summary import SummaryExtractor
from use_cases.fallback_chain import ProviderFallbackChain

logger = logging.getLogger(__name__)


class TranscribeMediaUseCase:
    def __init__(
        self,
        chain: ProviderFallbackChain,
        progress: ProgressPort,
        summarizer: Optional[SummaryExtractor] = None,
    ):
        self._chain = chain
        self._progress = progress
        self._summarizer = summarizer or SummaryExtractor()

    def probe_and_synthesize(self, audio_path: str) -> TranscriptionResult:
        """Run the provider chain, then summarize whatever transcript it produced."""
        job_id = uuid.uuid4().hex[:12]
        logger.info(f"Transcribing audio file: {audio_path}")

        # 1. Provider fallback chain
        self._progress.report(job_id, "transcribing", detail=", ".join(self._chain.provider_names))
        outcome = self._chain.run(audio_path)
        if outcome.failures:
            failed = ", ".join(name for name, _ in outcome.failures)
            logger.info(f"[{job_id}] Fell back past: {failed}")

        # 2. Summary
        self._progress.report(job_id, "summarizing", progress=0.5, detail=outcome.provider)
        try:
            summary = self._summarizer.summarize(outcome.transcript)
        except Exception as e:
            logger.error(f"Summary generation error: {e}")
            summary = self._summarizer.simple_summary(outcome.transcript)

        self._progress.report(job_id, "done", progress=1.0)
        return TranscriptionResult(
            transcript=outcome.transcript,
            summary=summary,
            provider=outcome.provider,
        )

    def cleanup(self, *paths: str) -> None:
        """Delete temporary media files; missing files are ignored."""
        for path in paths:
            try:
                if path and os.path.exists(path):
                    os.unlink(path)
            except OSError as e:
                logger.warning(f"Cleanup error: {e}")
