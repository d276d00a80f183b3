"""Clipboard capability used by the copy action."""

from __future__ import annotations

from typing import Optional, Protocol


class ClipboardWriter(Protocol):
    async def write_text(self, text: str) -> None:
        ...


class BufferedClipboard:
    """Keeps the copied text so the HTTP layer can hand it to the browser."""

    def __init__(self) -> None:
        self.text: Optional[str] = None

    async def write_text(self, text: str) -> None:
        self.text = text
