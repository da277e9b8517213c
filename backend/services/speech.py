"""
Speech-to-text via the OpenAI transcription API.

An uploaded audio file is written to ``config.UPLOAD_DIR`` under a random
name, streamed to Whisper, and removed again whatever the outcome.
"""

import logging
import os
import uuid

from openai import OpenAI
from werkzeug.datastructures import FileStorage
from werkzeug.exceptions import InternalServerError
from werkzeug.utils import secure_filename

import config

__all__ = ["TRANSCRIPTION_MODEL", "get_client", "temp_path_for", "transcribe"]

logger = logging.getLogger(__name__)

TRANSCRIPTION_MODEL = "whisper-1"
DEFAULT_AUDIO_EXT = ".webm"


def get_client() -> OpenAI:
    if not config.OPENAI_API_KEY:
        raise RuntimeError("OPENAI_API_KEY not set in environment")
    return OpenAI(api_key=config.OPENAI_API_KEY)


def temp_path_for(filename: str) -> str:
    """Random path in the upload dir that keeps the upload's extension."""
    _, ext = os.path.splitext(secure_filename(filename or ""))
    os.makedirs(config.UPLOAD_DIR, exist_ok=True)
    return os.path.join(config.UPLOAD_DIR, f"{uuid.uuid4()}{ext or DEFAULT_AUDIO_EXT}")


def transcribe(file: FileStorage) -> str:
    """
    Transcribe an uploaded audio file.

    Raises ``InternalServerError("Transcription failed")`` on any API or
    configuration error. The temp file is deleted in all cases; a failed
    delete is only logged.
    """
    path = temp_path_for(file.filename)
    file.save(path)
    try:
        client = get_client()
        with open(path, "rb") as audio:
            response = client.audio.transcriptions.create(
                model=TRANSCRIPTION_MODEL,
                file=audio,
            )
        return getattr(response, "text", "") or ""
    except Exception as e:
        logger.error("Whisper error: %s", e)
        raise InternalServerError("Transcription failed")
    finally:
        try:
            os.remove(path)
        except OSError as e:
            logger.error("Failed to delete temp file %s: %s", path, e)
