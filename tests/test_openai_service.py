import asyncio
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from conftest import make_settings
from core.exceptions import ConfigurationError
from models.podcast import UploadedDocument
from services.openai_service import OpenAIService


def _mock_client(output_text="Hola") -> MagicMock:
    client = MagicMock()
    client.files.create = AsyncMock(return_value=MagicMock(id="file-123"))
    client.files.delete = AsyncMock(return_value=MagicMock(deleted=True))
    client.responses.create = AsyncMock(return_value=MagicMock(output_text=output_text))
    return client


class TestOpenAIService:
    def test_requires_api_key(self) -> None:
        with pytest.raises(ConfigurationError):
            OpenAIService(make_settings(OPENAI_API_KEY=None))

    def test_client_built_from_settings(self) -> None:
        with patch("services.openai_service.AsyncOpenAI", return_value=_mock_client()) as factory:
            service = OpenAIService(make_settings(OPENAI_MODEL="gpt-test", OPENAI_TIMEOUT_SECONDS=45))
        factory.assert_called_once_with(api_key="sk-test", timeout=45)
        assert service.model == "gpt-test"

    def test_upload_document_returns_file_id(self) -> None:
        client = _mock_client()
        with patch("services.openai_service.AsyncOpenAI", return_value=client):
            service = OpenAIService(make_settings())
            file_id = asyncio.run(service.upload_document(
                UploadedDocument(name="informe.pdf", content_type="", content=b"%PDF")
            ))
        assert file_id == "file-123"
        client.files.create.assert_awaited_once_with(
            file=("informe.pdf", b"%PDF", "application/pdf"),
            purpose="user_data",
        )

    def test_generate_text_references_files_then_instructions(self) -> None:
        client = _mock_client(output_text="  dialogo  ")
        with patch("services.openai_service.AsyncOpenAI", return_value=client):
            service = OpenAIService(make_settings(OPENAI_MODEL="gpt-test"))
            text = asyncio.run(service.generate_text(["file-1", "file-2"], "Crea un diálogo"))

        assert text == "  dialogo  "
        kwargs = client.responses.create.await_args.kwargs
        assert kwargs["model"] == "gpt-test"
        assert kwargs["input"] == [{
            "role": "user",
            "content": [
                {"type": "input_file", "file_id": "file-1"},
                {"type": "input_file", "file_id": "file-2"},
                {"type": "input_text", "text": "Crea un diálogo"},
            ],
        }]

    def test_generate_text_returns_empty_string_for_missing_output(self) -> None:
        client = _mock_client(output_text=None)
        with patch("services.openai_service.AsyncOpenAI", return_value=client):
            service = OpenAIService(make_settings())
            assert asyncio.run(service.generate_text(["file-1"], "x")) == ""

    def test_delete_document(self) -> None:
        client = _mock_client()
        with patch("services.openai_service.AsyncOpenAI", return_value=client):
            service = OpenAIService(make_settings())
            asyncio.run(service.delete_document("file-123"))
        client.files.delete.assert_awaited_once_with("file-123")
