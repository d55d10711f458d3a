# api_client.py

import logging
import mimetypes
import os
from typing import List, Sequence, Union

import requests

# --- Backend API Configuration ---
# Read from environment variable or use default for local development
BACKEND_BASE_URL = os.getenv("BACKEND_BASE_URL", "http://localhost:8000").rstrip('/')
API_PREFIX = "/api"
GENERATE_PODCAST_URL = f"{BACKEND_BASE_URL}{API_PREFIX}/generate-podcast"

# Dialogue generation can take minutes for long documents
REQUEST_TIMEOUT = int(os.getenv("REQUEST_TIMEOUT", "300"))

FILES_FIELD = "files"

GENERIC_ERROR_MESSAGE = "Error al generar el podcast"
MISSING_PAYLOAD_MESSAGE = "La respuesta no contenía el resultado esperado"
NETWORK_ERROR_MESSAGE = "No se pudo conectar con el servidor"
TIMEOUT_MESSAGE = "El servidor tardó demasiado en responder"

logger = logging.getLogger(__name__)


class PodcastApiError(Exception):
    """A failed submission, carrying the message to show to the user."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


def _error_message(response: requests.Response) -> str:
    """Returns the ``error`` field of a JSON error body, or the generic message."""
    try:
        body = response.json()
    except ValueError:
        return GENERIC_ERROR_MESSAGE
    if isinstance(body, dict) and isinstance(body.get("error"), str) and body["error"]:
        return body["error"]
    return GENERIC_ERROR_MESSAGE


def _content_type(name: str) -> str:
    content_type, _ = mimetypes.guess_type(name)
    return content_type or "application/octet-stream"


class PodcastApiClient:
    def __init__(self, url: str = GENERATE_PODCAST_URL, timeout: int = REQUEST_TIMEOUT, session=None):
        self.url = url
        self.timeout = timeout
        self.session = session or requests.Session()

    def generate_podcast(self, staged_files: Sequence) -> Union[str, List[dict]]:
        """
        Posts the staged files as multipart form data, one part per file.

        Returns the dialogue text, or the list of turns when the server is
        configured for structured output. Raises PodcastApiError otherwise.
        """
        files = [
            (FILES_FIELD, (staged.name, staged.content, _content_type(staged.name)))
            for staged in staged_files
        ]
        logger.info(f"Posting {len(files)} file(s) to {self.url}")

        try:
            response = self.session.post(self.url, files=files, timeout=self.timeout)
        except requests.exceptions.Timeout as e:
            logger.error(f"Timeout while generating podcast: {e}")
            raise PodcastApiError(TIMEOUT_MESSAGE) from e
        except requests.exceptions.RequestException as e:
            logger.error(f"Network error while generating podcast: {e}")
            raise PodcastApiError(NETWORK_ERROR_MESSAGE) from e

        if not response.ok:
            message = _error_message(response)
            logger.error(f"Server error ({response.status_code}): {message}")
            raise PodcastApiError(message)

        try:
            body = response.json()
        except ValueError as e:
            logger.error(f"Could not decode response body: {e}")
            raise PodcastApiError(MISSING_PAYLOAD_MESSAGE) from e

        if isinstance(body, list):
            return body
        if isinstance(body, dict) and isinstance(body.get("dialogue"), str):
            return body["dialogue"]

        logger.error(f"Unexpected response payload: {body!r}")
        raise PodcastApiError(MISSING_PAYLOAD_MESSAGE)
