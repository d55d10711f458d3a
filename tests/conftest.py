import os
import sys
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

# Application modules live in podcast-gen/ and import each other by top-level name
sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "podcast-gen"))

# Keep a developer's key out of the tests
os.environ.pop("OPENAI_API_KEY", None)

from core.config import Settings  # noqa: E402


def make_settings(**overrides) -> Settings:
    values = {"OPENAI_API_KEY": "sk-test"}
    values.update(overrides)
    return Settings(_env_file=None, **values)


def make_openai_service(output_text: str = "Ana: Hola.\nLuis: Hola, Ana.") -> MagicMock:
    """Provider double: file ids are derived from the document names."""
    service = MagicMock()
    service.upload_document = AsyncMock(side_effect=lambda document: f"file-{document.name}")
    service.delete_document = AsyncMock(return_value=None)
    service.generate_text = AsyncMock(return_value=output_text)
    return service


@pytest.fixture()
def openai_service() -> MagicMock:
    return make_openai_service()


@pytest.fixture()
def pdf_bytes() -> bytes:
    return b"%PDF-1.4\n1 0 obj\n<<>>\nendobj\ntrailer\n<<>>\n%%EOF\n"
