"""
Staged-file state for the upload UI.

The state is immutable; every transition returns a new IntakeState so the
functions can be tested without a rendering environment. The lifecycle of a
submission is idle -> generating -> success or failure, and the staged files
survive a failure so the user can retry without selecting them again.
"""
import logging
import os
from dataclasses import dataclass, replace
from typing import Iterable, List, Optional, Tuple, Union

from frontend.api_client import PodcastApiError

logger = logging.getLogger(__name__)

DialogueResult = Union[str, List[dict]]


@dataclass(frozen=True)
class StagedFile:
    name: str
    last_modified: int  # epoch milliseconds
    size_bytes: int
    content: bytes

    @property
    def key(self) -> Tuple[str, int]:
        return (self.name, self.last_modified)

    @classmethod
    def from_path(cls, path: str, name: Optional[str] = None) -> "StagedFile":
        """Reads a file selected in the UI into memory."""
        stat = os.stat(path)
        with open(path, "rb") as f:
            content = f.read()
        return cls(
            name=name or os.path.basename(path),
            last_modified=int(stat.st_mtime * 1000),
            size_bytes=stat.st_size,
            content=content,
        )


@dataclass(frozen=True)
class IntakeState:
    files: Tuple[StagedFile, ...] = ()
    in_flight: bool = False
    result: Optional[DialogueResult] = None
    error: Optional[str] = None


def add_files(state: IntakeState, incoming: Iterable[StagedFile]) -> IntakeState:
    """Appends files whose (name, last_modified) key is not staged yet."""
    seen = {staged.key for staged in state.files}
    added = []
    for staged in incoming:
        if staged.key in seen:
            continue
        seen.add(staged.key)
        added.append(staged)
    if not added:
        return state
    return replace(state, files=state.files + tuple(added))


def remove_file(state: IntakeState, index: int) -> IntakeState:
    if not 0 <= index < len(state.files):
        return state
    return replace(state, files=state.files[:index] + state.files[index + 1:])


def can_submit(state: IntakeState) -> bool:
    return bool(state.files) and not state.in_flight


def begin_submit(state: IntakeState) -> IntakeState:
    if not can_submit(state):
        return state
    return replace(state, in_flight=True, result=None, error=None)


def resolve_success(state: IntakeState, result: DialogueResult) -> IntakeState:
    return replace(state, in_flight=False, result=result, error=None)


def resolve_failure(state: IntakeState, message: str) -> IntakeState:
    return replace(state, in_flight=False, result=None, error=message)


def submit(state: IntakeState, client) -> IntakeState:
    """
    Sends the staged files through ``client`` and resolves the state.

    A call with nothing staged, or while another submission is in flight, is
    dropped and issues no request.
    """
    if not can_submit(state):
        logger.info("Submission ignored: no files staged or a request is in flight")
        return state

    state = begin_submit(state)
    try:
        result = client.generate_podcast(state.files)
    except PodcastApiError as e:
        logger.error(f"Podcast generation failed: {e.message}")
        return resolve_failure(state, e.message)
    return resolve_success(state, result)
