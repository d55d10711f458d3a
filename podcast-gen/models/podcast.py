from dataclasses import dataclass
from typing import List
from pydantic import BaseModel, RootModel

PDF_CONTENT_TYPE = "application/pdf"

@dataclass
class UploadedDocument:
    """A file part read from the multipart request body."""
    name: str
    content_type: str
    content: bytes

    def is_pdf(self) -> bool:
        return self.content_type == PDF_CONTENT_TYPE or self.name.lower().endswith(".pdf")

class DialogueResponse(BaseModel):
    dialogue: str

class DialogueTurn(BaseModel):
    text: str
    voiceId: str

class DialogueScript(RootModel[List[DialogueTurn]]):
    """
    Top-level JSON array of dialogue turns, as requested from the model.
    Only used to describe the structured response in the OpenAPI schema.
    """

class ErrorResponse(BaseModel):
    error: str
