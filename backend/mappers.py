"""Domain <-> DTO mappers.

Converts TranscriptionResult (domain) into the HTTP response DTO.
"""

from typing import Optional

from domain.models import TranscriptionResult
from models import TranscriptionResponse


def result_to_dto(
    result: TranscriptionResult,
    filename: Optional[str] = None,
    url: Optional[str] = None,
) -> TranscriptionResponse:
    """Attach request-specific fields (original filename or URL) to a result."""
    return TranscriptionResponse(
        summary=result.summary,
        transcript=result.transcript,
        filename=filename,
        url=url,
        provider=result.provider,
    )
