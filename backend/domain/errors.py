"""Error kinds raised inside the synthesis pipeline."""


class PipelineError(Exception):
    """Base class for pipeline stage failures."""


class ProbeError(PipelineError):
    """Media inspection failed outright (corrupt file, missing ffprobe, timeout)."""


class ConversionError(PipelineError):
    """Normalizing the input to mono 16kHz WAV failed."""


class ChainExhaustedError(PipelineError):
    """No fallback state produced a transcript. Indicates a logic defect."""
