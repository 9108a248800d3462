import os
import logging
from typing import Dict, Optional, Any
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

load_dotenv()

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3001
DEFAULT_TEMP_DIR = "/tmp/scribe-digest"
DEFAULT_PROCESS_TIMEOUT = 120.0
DEFAULT_MAX_UPLOAD_MB = 500
DEFAULT_PROVIDERS = "assemblyai,witai,audio-analysis"

# Every name currently resolves to the audio-analysis pipeline.
KNOWN_PROVIDERS = ("assemblyai", "witai", "audio-analysis")


def _split(raw: str) -> list[str]:
    return [item.strip().lower() for item in raw.split(",") if item.strip()]


class Config:
    """Process configuration read from the environment.

    Keyword arguments override the matching environment value, which keeps
    tests and embedding callers independent of os.environ.
    """

    def __init__(self, **overrides: Any):
        self.host = os.environ.get("HOST", DEFAULT_HOST)
        self.port = int(os.environ.get("PORT", DEFAULT_PORT))
        self.debug = os.environ.get("DEBUG", "0") == "1"
        self.temp_dir = os.environ.get("TEMP_DIR", DEFAULT_TEMP_DIR)
        self.process_timeout = float(os.environ.get("PROCESS_TIMEOUT", DEFAULT_PROCESS_TIMEOUT))
        self.max_upload_bytes = int(os.environ.get("MAX_UPLOAD_MB", DEFAULT_MAX_UPLOAD_MB)) * 1024 * 1024
        self.providers = _split(os.environ.get("PROVIDERS", DEFAULT_PROVIDERS))
        self.assemblyai_api_key = os.environ.get("ASSEMBLYAI_API_KEY") or None
        self.wit_ai_token = os.environ.get("WIT_AI_TOKEN") or None

        for key, value in overrides.items():
            if not hasattr(self, key):
                raise ValueError(f"Unknown config option: {key!r}")
            setattr(self, key, value)

        unknown = [p for p in self.providers if p not in KNOWN_PROVIDERS]
        if unknown:
            raise ValueError(f"Unknown PROVIDERS entry: {', '.join(unknown)}. Valid options: {', '.join(KNOWN_PROVIDERS)}")
        Path(self.temp_dir).mkdir(parents=True, exist_ok=True)

    def get_api_key(self, provider: str) -> Optional[str]:
        if provider == "assemblyai":
            return self.assemblyai_api_key
        if provider == "witai":
            return self.wit_ai_token
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "host": self.host,
            "port": self.port,
            "debug": self.debug,
            "temp_dir": self.temp_dir,
            "process_timeout": self.process_timeout,
            "max_upload_bytes": self.max_upload_bytes,
            "providers": list(self.providers),
            "has_assemblyai_api_key": self.assemblyai_api_key is not None,
            "has_wit_ai_token": self.wit_ai_token is not None,
        }


_config: Optional[Config] = None


def get_config() -> Config:
    global _config
    if _config is None:
        _config = Config()
    return _config


def create_audio_adapter(cfg: Config):
    """Create the audio processing adapter (always FFmpeg)."""
    from adapters.ffmpeg.audio import FFmpegAudioAdapter
    return FFmpegAudioAdapter(temp_dir=cfg.temp_dir, timeout=cfg.process_timeout)


def create_providers(cfg: Config, audio=None) -> list:
    """Create one provider per name in cfg.providers, in order."""
    from adapters.synthetic.transcription import AudioAnalysisProvider

    audio = audio or create_audio_adapter(cfg)
    providers = []
    for name in cfg.providers:
        if cfg.get_api_key(name):
            logger.info(f"{name}: API key configured, but no client is wired yet; using audio analysis")
        providers.append(AudioAnalysisProvider(audio, name=name))

    logger.info(f"Providers: {' -> '.join(p.name for p in providers)} -> static-fallback")
    return providers


def create_fallback_chain(cfg: Config, audio=None):
    from use_cases.fallback_chain import ProviderFallbackChain
    return ProviderFallbackChain(create_providers(cfg, audio), config=cfg)


def create_use_case(cfg: Config, audio=None, progress=None):
    from adapters.local.log_progress import LogProgressAdapter
    from use_cases.transcribe import TranscribeMediaUseCase

    return TranscribeMediaUseCase(
        chain=create_fallback_chain(cfg, audio),
        progress=progress or LogProgressAdapter(),
    )
