"""Ordered frame collection serialized to a zip archive on demand."""

from __future__ import annotations

from io import BytesIO
from zipfile import ZIP_DEFLATED, ZipFile


class FrameArchive:
    """Ordered mapping of archive member name to encoded image bytes."""

    def __init__(self) -> None:
        self._frames: dict[str, bytes] = {}

    def add(self, name: str, data: bytes) -> None:
        if name in self._frames:
            raise ValueError(f"Duplicate archive member: {name}")
        self._frames[name] = data

    def names(self) -> list[str]:
        return list(self._frames)

    def __getitem__(self, name: str) -> bytes:
        return self._frames[name]

    def __contains__(self, name: object) -> bool:
        return name in self._frames

    def __len__(self) -> int:
        return len(self._frames)

    def to_zip(self) -> bytes:
        buffer = BytesIO()
        with ZipFile(buffer, "w", compression=ZIP_DEFLATED) as archive:
            for name, data in self._frames.items():
                archive.writestr(name, data)
        return buffer.getvalue()


__all__ = ["FrameArchive"]
