"""ProviderFallbackChain: tries named providers in order, then a static notice.

States run TRY_PRIMARY -> TRY_SECONDARY -> TRY_TERTIARY -> STATIC_FALLBACK
-> DONE. A provider failure of any kind moves to the next state; the static
fallback cannot fail, so the chain always ends with a transcript.
"""

import os
import logging
from enum import Enum
from typing import Optional

from domain.errors import ChainExhaustedError
from domain.models import ChainOutcome
from ports.transcription import TranscriptionProvider
from synthesis.formatter import static_fallback_transcript

logger = logging.getLogger(__name__)

STATIC_FALLBACK_NAME = "static-fallback"


class ChainState(str, Enum):
    TRY_PRIMARY = "try_primary"
    TRY_SECONDARY = "try_secondary"
    TRY_TERTIARY = "try_tertiary"
    STATIC_FALLBACK = "static_fallback"
    DONE = "done"


PROVIDER_STATES = (ChainState.TRY_PRIMARY, ChainState.TRY_SECONDARY, ChainState.TRY_TERTIARY)


def _select(providers: list[TranscriptionProvider], names: list[str]) -> list[TranscriptionProvider]:
    by_name = {p.name: p for p in providers}
    unknown = [n for n in names if n not in by_name]
    if unknown:
        raise ValueError(f"Unknown provider(s): {', '.join(unknown)}. Available: {', '.join(by_name)}")
    return [by_name[n] for n in names]


class ProviderFallbackChain:
    """Runs providers in order until one returns a transcript.

    Args:
        providers: Candidate providers, tried in list order.
        config: Optional Config; when given, its `providers` names select
            and order the candidates.
    """

    def __init__(self, providers: list[TranscriptionProvider], config: Optional[object] = None):
        names = getattr(config, "providers", None) if config is not None else None
        if names:
            providers = _select(providers, names)
        if len(providers) > len(PROVIDER_STATES):
            raise ValueError(
                f"At most {len(PROVIDER_STATES)} providers are supported, got {len(providers)}"
            )
        self._providers = list(providers)
        self._slots = dict(zip(PROVIDER_STATES, self._providers))

    @property
    def provider_names(self) -> list[str]:
        return [p.name for p in self._providers]

    def run(self, audio_path: str) -> ChainOutcome:
        failures: list[tuple[str, str]] = []
        outcome: Optional[ChainOutcome] = None
        state = PROVIDER_STATES[0] if self._providers else ChainState.STATIC_FALLBACK

        while state is not ChainState.DONE:
            if state is ChainState.STATIC_FALLBACK:
                logger.warning(f"All providers failed for {audio_path}, using static fallback")
                transcript = static_fallback_transcript(os.path.basename(audio_path))
                outcome = ChainOutcome(transcript, STATIC_FALLBACK_NAME, state.value, failures)
                state = ChainState.DONE
                continue

            provider = self._slots[state]
            try:
                logger.info(f"Attempting {provider.name} transcription ({state.value})")
                transcript = provider.try_transcribe(audio_path)
                if not transcript:
                    raise ValueError("provider returned an empty transcript")
            except Exception as e:
                logger.warning(f"{provider.name} failed, trying next provider: {e}")
                failures.append((provider.name, str(e)))
                state = self._next(state)
                continue

            outcome = ChainOutcome(transcript, provider.name, state.value, failures)
            state = ChainState.DONE

        if outcome is None or not outcome.transcript:
            raise ChainExhaustedError(f"No transcript produced for {audio_path}")
        return outcome

    def _next(self, state: ChainState) -> ChainState:
        index = PROVIDER_STATES.index(state) + 1
        if index < len(self._providers):
            return PROVIDER_STATES[index]
        return ChainState.STATIC_FALLBACK
