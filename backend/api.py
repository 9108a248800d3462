"""HTTP surface for Scribe Digest.

Only stores the upload, hands its path to the use case and deletes it
afterwards. All transcript logic lives behind TranscribeMediaUseCase.
"""

import os
import logging
import uuid
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI, File, UploadFile
from fastapi.responses import JSONResponse

from config import Config, create_use_case, get_config
from mappers import result_to_dto
from models import ErrorResponse, HealthResponse, TranscriptionResponse
from use_cases.transcribe import TranscribeMediaUseCase

logger = logging.getLogger(__name__)

ALLOWED_MEDIA_PREFIXES = ("audio/", "video/")
COPY_CHUNK_BYTES = 1024 * 1024


class UploadTooLarge(Exception):
    pass


def _error(status: int, error: str, message: Optional[str] = None) -> JSONResponse:
    body = ErrorResponse(error=error, message=message)
    return JSONResponse(status_code=status, content=body.model_dump(exclude_none=True))


def _store_upload(upload: UploadFile, temp_dir: str, max_bytes: int) -> str:
    """Copy the upload to a uniquely named temp file and return its path."""
    safe_name = os.path.basename(upload.filename or "upload")
    path = os.path.join(temp_dir, f"{uuid.uuid4()}-{safe_name}")
    written = 0
    try:
        with open(path, "wb") as out:
            while True:
                chunk = upload.file.read(COPY_CHUNK_BYTES)
                if not chunk:
                    break
                written += len(chunk)
                if written > max_bytes:
                    raise UploadTooLarge()
                out.write(chunk)
    except Exception:
        if os.path.exists(path):
            os.unlink(path)
        raise
    return path


def create_app(
    cfg: Optional[Config] = None,
    use_case: Optional[TranscribeMediaUseCase] = None,
) -> FastAPI:
    cfg = cfg or get_config()
    use_case = use_case or create_use_case(cfg)

    app = FastAPI(title="Scribe Digest")
    app.state.config = cfg
    app.state.use_case = use_case

    @app.get("/api/health", response_model=HealthResponse)
    def health() -> HealthResponse:
        return HealthResponse(timestamp=datetime.now(timezone.utc).isoformat())

    @app.post("/api/transcribe-file", response_model=TranscriptionResponse, response_model_exclude_none=True)
    def transcribe_file(audio: Optional[UploadFile] = File(None)):
        if audio is None or not audio.filename:
            return _error(400, "Audio file is required")

        content_type = audio.content_type or ""
        if not content_type.startswith(ALLOWED_MEDIA_PREFIXES):
            return _error(
                400,
                "Invalid file type",
                "Please upload an audio or video file (MP3, MP4, WAV, etc.)",
            )

        try:
            audio_path = _store_upload(audio, cfg.temp_dir, cfg.max_upload_bytes)
        except UploadTooLarge:
            limit_mb = cfg.max_upload_bytes // (1024 * 1024)
            return _error(400, "File too large", f"File size must be less than {limit_mb}MB")

        logger.info(f"Processing file: {audio.filename}, Size: {os.path.getsize(audio_path)} bytes")
        try:
            result = use_case.probe_and_synthesize(audio_path)
        finally:
            use_case.cleanup(audio_path)

        return result_to_dto(result, filename=audio.filename)

    return app
