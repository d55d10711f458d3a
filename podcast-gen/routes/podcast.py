import logging
import sys
from typing import List, Union
from fastapi import APIRouter, Depends, Request
from starlette.datastructures import UploadFile
from starlette.exceptions import HTTPException
from starlette.formparsers import MultiPartException
from core.config import Settings, get_settings, settings as default_settings
from core.exceptions import ConfigurationError, InvalidRequestError, PodcastGenerationError, ProviderCommunicationError
from models.podcast import DialogueResponse, DialogueScript, ErrorResponse, UploadedDocument
from services.podcast_service import PodcastService

router = APIRouter()

FILES_FIELD = "files"

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

def get_podcast_service(settings: Settings = Depends(get_settings)) -> PodcastService:
    # Resolved before the request body is read
    if not settings.OPENAI_API_KEY:
        logger.error("OPENAI_API_KEY is not configured")
        raise ConfigurationError()
    return PodcastService(settings)

async def read_documents(request: Request) -> List[UploadedDocument]:
    # No cap on the number of parts
    try:
        form = await request.form(max_files=sys.maxsize, max_fields=sys.maxsize)
    except (HTTPException, MultiPartException) as e:
        logger.warning(f"Could not parse request body: {e}")
        raise InvalidRequestError() from e
    documents = []
    # Plain text values sent under the files field are ignored
    for part in form.getlist(FILES_FIELD):
        if not isinstance(part, UploadFile):
            continue
        documents.append(UploadedDocument(
            name=part.filename or "",
            content_type=part.content_type or "",
            content=await part.read()
        ))
    return documents

@router.post(
    "/generate-podcast",
    responses={
        200: {"model": Union[DialogueResponse, DialogueScript]},
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
    },
)
async def generate_podcast(
    request: Request,
    podcast_service: PodcastService = Depends(get_podcast_service)
):
    logger.info("Processing generate-podcast request")

    documents = await read_documents(request)
    logger.info(f"Received {len(documents)} file(s): {[document.name for document in documents]}")

    try:
        return await podcast_service.generate_podcast(documents)
    except PodcastGenerationError:
        raise
    except Exception as e:
        logger.error(f"Failed to generate podcast: {e}", exc_info=True)
        raise ProviderCommunicationError() from e
