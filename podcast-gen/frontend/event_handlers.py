# event_handlers.py

import logging
from typing import Iterator, List, Optional, Tuple

import gradio as gr

from frontend import intake
from frontend.api_client import PodcastApiClient
from frontend.intake import IntakeState, StagedFile

# --- Constants ---
ICON_SUCCESS = "✅"
ICON_ERROR = "❌"
ICON_PENDING = "⏳"
ICON_DOCUMENT = "📄"

EMPTY_LIST_MESSAGE = "Aún no has añadido archivos."

# --- Logging Setup ---
logger = logging.getLogger(__name__)
# Ensure logging is configured externally (e.g., in app.py)

api_client = PodcastApiClient()


# --- Rendering ---

def format_size(size_bytes: int) -> str:
    return f"{size_bytes / 1024:.1f} KB"


def render_file_list(state: IntakeState) -> str:
    if not state.files:
        return f"*{EMPTY_LIST_MESSAGE}*"
    return "\n".join(
        f"{index + 1}. {ICON_DOCUMENT} **{staged.name}** ({format_size(staged.size_bytes)})"
        for index, staged in enumerate(state.files)
    )


def file_choices(state: IntakeState) -> List[str]:
    return [f"{index + 1}. {staged.name}" for index, staged in enumerate(state.files)]


def render_status(state: IntakeState) -> str:
    if state.in_flight:
        return f"{ICON_PENDING} Generando el diálogo..."
    if state.error:
        return f"{ICON_ERROR} {state.error}"
    if state.result is not None:
        return f"{ICON_SUCCESS} Diálogo generado."
    return ""


def render_result(state: IntakeState) -> str:
    """Formats the dialogue; structured turns are shown one per line with their voice id."""
    if state.result is None:
        return ""
    if isinstance(state.result, str):
        return state.result
    lines = []
    for turn in state.result:
        if isinstance(turn, dict):
            lines.append(f"[{turn.get('voiceId', '?')}] {turn.get('text', '')}")
        else:
            lines.append(str(turn))
    return "\n\n".join(lines)


def _view(state: IntakeState) -> Tuple:
    """Outputs shared by every handler, in the order wired in ui_components."""
    return (
        state,
        render_file_list(state),
        gr.Dropdown(choices=file_choices(state), value=None),
        gr.Button(interactive=intake.can_submit(state)),
        render_status(state),
        render_result(state),
    )


# --- Event Handlers ---

def handle_file_upload(paths: Optional[List[str]], state: IntakeState) -> Tuple:
    """Stages the files dropped or picked in the upload area and clears it."""
    if not paths:
        return (None,) + _view(state)

    incoming = []
    for path in paths:
        try:
            incoming.append(StagedFile.from_path(path))
        except OSError as e:
            logger.error(f"{ICON_ERROR} Could not read selected file {path}: {e}")
            gr.Warning(f"No se pudo leer el archivo: {path}")

    new_state = intake.add_files(state, incoming)
    logger.info(f"Staged files: {len(state.files)} -> {len(new_state.files)}")
    return (None,) + _view(new_state)


def handle_remove_file(index: Optional[int], state: IntakeState) -> Tuple:
    if index is None:
        return _view(state)
    return _view(intake.remove_file(state, index))


def handle_generate(state: IntakeState) -> Iterator[Tuple]:
    """Shows the generating state first, then the result or error."""
    if not intake.can_submit(state):
        yield _view(state)
        return

    yield _view(intake.begin_submit(state))
    yield _view(intake.submit(state, api_client))
