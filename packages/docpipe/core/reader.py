"""Loading of PDF sources with the pipeline's encryption policy."""

from __future__ import annotations

from io import BytesIO

from pypdf import PdfReader
from pypdf.errors import PdfReadError

from .exceptions import UnreadableSourceError
from .model import SourceFile
from .utils import get_logger

LOGGER = get_logger("docpipe.core.reader")


def load_pdf(source: SourceFile) -> PdfReader:
    """Open ``source`` as a PDF, ignoring owner-only encryption.

    Encrypted documents are unlocked with an empty user password. Anything
    that still cannot be read is reported as :class:`UnreadableSourceError`;
    the caller never receives a half-opened reader.
    """

    if not source.data:
        raise UnreadableSourceError(source.name, f"'{source.name}' is empty.")

    try:
        reader = PdfReader(BytesIO(source.data))
    except Exception as exc:
        raise UnreadableSourceError(source.name) from exc

    if reader.is_encrypted:
        LOGGER.debug("Attempting to open encrypted PDF %s with an empty password", source.name)
        try:
            unlocked = reader.decrypt("")
        except Exception as exc:  # pragma: no cover - decrypt errors vary by cipher
            raise UnreadableSourceError(
                source.name, f"'{source.name}' is encrypted and could not be opened."
            ) from exc
        if not unlocked:
            raise UnreadableSourceError(
                source.name, f"'{source.name}' is encrypted and requires a password."
            )

    try:
        page_count = len(reader.pages)
    except (PdfReadError, KeyError, ValueError, TypeError) as exc:
        raise UnreadableSourceError(source.name) from exc

    LOGGER.debug("Loaded %s with %d page(s)", source.name, page_count)
    return reader


__all__ = ["load_pdf"]
