from typing import Optional
from pydantic import BaseModel


class TranscriptionResponse(BaseModel):
    """Response format for transcription"""
    summary: str
    transcript: str
    filename: Optional[str] = None
    url: Optional[str] = None
    provider: Optional[str] = None


class ErrorResponse(BaseModel):
    error: str
    message: Optional[str] = None


class HealthResponse(BaseModel):
    status: str = "OK"
    timestamp: str
