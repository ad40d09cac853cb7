"""Helpers that translate NiceGUI event payloads for the controllers."""

from collections.abc import Iterable, Mapping
from typing import Any

from pdfchat.models.schemas import SelectedFile

_MODIFIER_KEYS = ("shiftKey", "ctrlKey", "altKey", "metaKey")


def is_submit_keystroke(args: Mapping[str, Any] | None) -> bool:
    """Return True for a bare Enter press.

    Enter with any modifier held (Shift in particular) inserts a line break
    and must not submit.
    """
    if not args or args.get("key") != "Enter":
        return False
    return not any(args.get(modifier) for modifier in _MODIFIER_KEYS)


async def read_selected_files(uploads: Iterable[Any]) -> list[SelectedFile]:
    """Read NiceGUI FileUpload objects into SelectedFile models, in order."""
    files: list[SelectedFile] = []
    for upload in uploads:
        files.append(
            SelectedFile(
                name=upload.name,
                content=await upload.read(),
                content_type=upload.content_type or "application/pdf",
            )
        )
    return files
