from openai import AsyncOpenAI
from core.config import Settings
from core.exceptions import ConfigurationError
from models.podcast import UploadedDocument, PDF_CONTENT_TYPE
from typing import List

class OpenAIService:
    def __init__(self, settings: Settings):
        if not settings.OPENAI_API_KEY:
            raise ConfigurationError()

        self.client = AsyncOpenAI(
            api_key=settings.OPENAI_API_KEY,
            timeout=settings.OPENAI_TIMEOUT_SECONDS,
        )

        self.model = settings.OPENAI_MODEL

    async def upload_document(self, document: UploadedDocument) -> str:
        """
        Stores a document with the provider and returns its file id
        """
        uploaded = await self.client.files.create(
            file=(document.name, document.content, document.content_type or PDF_CONTENT_TYPE),
            purpose="user_data"
        )
        return uploaded.id

    async def delete_document(self, file_id: str) -> None:
        await self.client.files.delete(file_id)

    async def generate_text(self, file_ids: List[str], instructions: str) -> str:
        """
        Asks the model for a text response over the given stored documents
        """
        content = [{"type": "input_file", "file_id": file_id} for file_id in file_ids]
        content.append({"type": "input_text", "text": instructions})

        response = await self.client.responses.create(
            model=self.model,
            input=[
                {"role": "user", "content": content}
            ]
        )

        return response.output_text or ""
