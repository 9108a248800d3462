import os

import pytest
from fastapi.testclient import TestClient

from api import create_app
from config import Config
from domain.models import TranscriptionResult


class RecordingUseCase:
    def __init__(self):
        self.seen_paths = []
        self.cleaned = []

    def probe_and_synthesize(self, audio_path):
        self.seen_paths.append(audio_path)
        assert os.path.exists(audio_path)
        return TranscriptionResult(transcript="TRANSCRIPT - x", summary="short", provider="assemblyai")

    def cleanup(self, *paths):
        for path in paths:
            self.cleaned.append(path)
            os.unlink(path)


@pytest.fixture
def use_case():
    return RecordingUseCase()


@pytest.fixture
def client(tmp_path, use_case):
    cfg = Config(temp_dir=str(tmp_path), max_upload_bytes=64)
    return TestClient(create_app(cfg, use_case=use_case))


def test_health(client):
    resp = client.get("/api/health")
    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "OK"
    assert body["timestamp"]


def test_transcribe_file(client, use_case, tmp_path):
    resp = client.post(
        "/api/transcribe-file",
        files={"audio": ("meeting notes.mp3", b"ID3fake", "audio/mpeg")},
    )

    assert resp.status_code == 200
    assert resp.json() == {
        "summary": "short",
        "transcript": "TRANSCRIPT - x",
        "filename": "meeting notes.mp3",
        "provider": "assemblyai",
    }
    stored = use_case.seen_paths[0]
    assert os.path.dirname(stored) == str(tmp_path)
    assert stored.endswith("-meeting notes.mp3")
    assert use_case.cleaned == [stored]
    assert not os.path.exists(stored)


def test_missing_file(client):
    resp = client.post("/api/transcribe-file")
    assert resp.status_code == 400
    assert resp.json()["error"] == "Audio file is required"


def test_rejects_non_media(client, use_case):
    resp = client.post(
        "/api/transcribe-file",
        files={"audio": ("notes.txt", b"hello", "text/plain")},
    )
    assert resp.status_code == 400
    assert resp.json()["error"] == "Invalid file type"
    assert use_case.seen_paths == []


def test_rejects_oversized_upload(client, use_case, tmp_path):
    resp = client.post(
        "/api/transcribe-file",
        files={"audio": ("big.wav", b"x" * 65, "audio/wav")},
    )
    assert resp.status_code == 400
    assert resp.json()["error"] == "File too large"
    assert use_case.seen_paths == []
    assert list(tmp_path.iterdir()) == []
