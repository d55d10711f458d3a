"""
Errors raised while turning uploaded documents into a podcast dialogue.

Each error carries the HTTP status and the user-facing message returned to the
caller. Internal details stay in the server logs.
"""

class PodcastGenerationError(Exception):
    status_code: int = 500
    message: str = "Error al generar el podcast"

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class ConfigurationError(PodcastGenerationError):
    """The provider credential is not configured."""
    status_code = 500
    message = "OPENAI_API_KEY no está configurada"


class NoInputError(PodcastGenerationError):
    """The request carried no file parts."""
    status_code = 400
    message = "No se han recibido archivos"


class UnsupportedFormatError(PodcastGenerationError):
    """At least one file is not a PDF."""
    status_code = 400
    message = "Solo se admiten archivos PDF"


class ProviderCommunicationError(PodcastGenerationError):
    """Uploading or generating through the provider failed."""
    status_code = 500
    message = "Error al generar el podcast"


class EmptyResultError(PodcastGenerationError):
    """The provider returned no dialogue text."""
    status_code = 500
    message = "No se pudo generar el diálogo"


class InvalidFormatError(PodcastGenerationError):
    """The structured dialogue could not be parsed as a JSON array."""
    status_code = 502
    message = "El modelo devolvió un formato de diálogo no válido"


class InvalidRequestError(PodcastGenerationError):
    """The request body could not be parsed as multipart form data."""
    status_code = 400
    message = "La solicitud no es un formulario multipart válido"
