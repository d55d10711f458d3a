"""
This module contains the instructions sent to the model together with the
uploaded documents when generating a podcast dialogue.
"""

DIALOGUE_PROMPT = (
    "Analiza los documentos proporcionados y crea un diálogo entre dos personas "
    "que pueda utilizarse como podcast. El diálogo debe ser informativo y entretenido."
)

STRUCTURED_DIALOGUE_PROMPT = """
    Analiza los documentos proporcionados y crea un diálogo entre dos personas que pueda utilizarse como podcast.
    El diálogo debe ser informativo y entretenido.

    PARTICIPANTES:
    - Presentador: usa siempre el voiceId "{host_voice_id}"
    - Invitado: usa siempre el voiceId "{guest_voice_id}"

    ###Formato de salida###
    Responde ÚNICAMENTE con un array JSON válido, sin texto adicional ni bloques de código.
    Cada elemento del array es una intervención, en el orden en que se dice:

    [
        {{"text": "<lo que dice el participante>", "voiceId": "<voiceId del participante>"}}
    ]
"""

def build_structured_dialogue_prompt(host_voice_id: str, guest_voice_id: str) -> str:
    return STRUCTURED_DIALOGUE_PROMPT.format(
        host_voice_id=host_voice_id,
        guest_voice_id=guest_voice_id
    )
