import asyncio
import json
import logging
from typing import List, Optional, Union
from core.config import Settings, settings as default_settings
from core.exceptions import EmptyResultError, InvalidFormatError, NoInputError, UnsupportedFormatError
from models.podcast import DialogueResponse, UploadedDocument
from prompts.podcast_prompts import DIALOGUE_PROMPT, build_structured_dialogue_prompt
from services.openai_service import OpenAIService

logger = logging.getLogger(__name__)
logger.setLevel(default_settings.LOG_LEVEL)

# Console handler (prints to terminal)
ch = logging.StreamHandler()
ch.setLevel(logging.DEBUG)

# Formatter
formatter = logging.Formatter(
    "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

ch.setFormatter(formatter)

# Add handler
logger.addHandler(ch)

class PodcastService:
    def __init__(self, settings: Settings, openai_service: Optional[OpenAIService] = None):
        self.settings = settings
        # Raises ConfigurationError when no API key is configured
        self.openai_service = openai_service or OpenAIService(settings)

    async def generate_podcast(self, documents: List[UploadedDocument]) -> Union[DialogueResponse, list]:
        """Upload the documents, ask the model for a dialogue and shape the answer"""
        if not documents:
            logger.warning("No files received")
            raise NoInputError()

        if self.settings.REQUIRE_PDF:
            rejected = [document.name for document in documents if not document.is_pdf()]
            if rejected:
                logger.warning(f"Rejected non-PDF files: {rejected}")
                raise UnsupportedFormatError()

        file_ids = await self.upload_documents(documents)
        try:
            output_text = await self.openai_service.generate_text(
                self.referenced_file_ids(file_ids),
                self.build_instructions()
            )
        finally:
            if self.settings.DELETE_UPLOADED_FILES:
                await self.delete_documents(file_ids)

        return self.shape_dialogue(output_text)

    async def upload_documents(self, documents: List[UploadedDocument]) -> List[str]:
        """
        Uploads every document concurrently. File ids keep the order of the documents.
        If any upload fails, the ones that succeeded are removed and the first error is raised.
        """
        logger.info(f"Uploading {len(documents)} document(s)")
        # Waits for every upload, even after a failure, so the ids that did succeed can be deleted
        results = await asyncio.gather(
            *(self.openai_service.upload_document(document) for document in documents),
            return_exceptions=True
        )

        file_ids = [result for result in results if isinstance(result, str)]
        failures = [result for result in results if isinstance(result, BaseException)]
        if failures:
            logger.error(f"{len(failures)} of {len(documents)} upload(s) failed")
            if self.settings.DELETE_UPLOADED_FILES:
                await self.delete_documents(file_ids)
            raise failures[0]

        logger.info(f"Uploaded documents: {file_ids}")
        return file_ids

    async def delete_documents(self, file_ids: List[str]) -> None:
        results = await asyncio.gather(
            *(self.openai_service.delete_document(file_id) for file_id in file_ids),
            return_exceptions=True
        )
        for file_id, result in zip(file_ids, results):
            if isinstance(result, BaseException):
                logger.warning(f"Could not delete uploaded file {file_id}: {result}")

    def referenced_file_ids(self, file_ids: List[str]) -> List[str]:
        if self.settings.DOCUMENT_SCOPE == "primary":
            return file_ids[:1]
        return file_ids

    def build_instructions(self) -> str:
        if self.settings.DIALOGUE_FORMAT == "structured":
            return build_structured_dialogue_prompt(
                self.settings.HOST_VOICE_ID,
                self.settings.GUEST_VOICE_ID
            )
        return DIALOGUE_PROMPT

    def shape_dialogue(self, output_text: str) -> Union[DialogueResponse, list]:
        dialogue = (output_text or "").strip()

        if self.settings.DIALOGUE_FORMAT == "structured":
            try:
                turns = json.loads(dialogue)
            except json.JSONDecodeError as e:
                logger.error(f"Model output is not valid JSON: {e}")
                raise InvalidFormatError() from e
            if not isinstance(turns, list):
                logger.error(f"Model output is a {type(turns).__name__}, expected a list")
                raise InvalidFormatError()
            return turns

        if not dialogue:
            logger.error("Model returned an empty dialogue")
            raise EmptyResultError()
        return DialogueResponse(dialogue=dialogue)
