"""Text extraction for uploaded .txt, .pdf and .docx files."""

import io
import logging
from pathlib import Path

from .errors import UnsupportedFileTypeError

logger = logging.getLogger(__name__)

MIME_TXT = "text/plain"
MIME_PDF = "application/pdf"
MIME_DOCX = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

SUPPORTED_TYPES = {
    ".txt": MIME_TXT,
    ".pdf": MIME_PDF,
    ".docx": MIME_DOCX,
}


def detect_mime_type(filename: str, content_type: str | None = None) -> str:
    """Resolve the MIME type of an upload from its declared type or extension.

    Raises UnsupportedFileTypeError for anything but .txt, .pdf and .docx.
    """
    if content_type:
        mime = content_type.split(";", 1)[0].strip().lower()
        if mime in SUPPORTED_TYPES.values():
            return mime
    suffix = Path(filename or "").suffix.lower()
    if suffix in SUPPORTED_TYPES:
        return SUPPORTED_TYPES[suffix]
    raise UnsupportedFileTypeError(
        f"Unsupported file type for '{filename}'. Please upload a .txt, .pdf, or .docx file."
    )


# ---------------------------------------------------------------------------
# Per-format readers
# ---------------------------------------------------------------------------

def read_txt(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")


def read_pdf(data: bytes) -> str:
    """Selectable text of every page, pages joined by a space."""
    import pdfplumber

    pages = []
    with pdfplumber.open(io.BytesIO(data)) as pdf:
        for page in pdf.pages:
            pages.append(page.extract_text() or "")
    text = " ".join(pages)
    logger.debug("Extracted %d chars from %d PDF pages", len(text), len(pages))
    return text


def fetch_docx_paragraphs(source) -> list[str]:
    """Non-empty paragraphs of a .docx file (path or file-like)."""
    from docx import Document

    if isinstance(source, Path):
        source = str(source)
    doc = Document(source)
    paragraphs: list[str] = []
    for para in doc.paragraphs:
        text = para.text.strip()
        if text:
            paragraphs.append(text)
    return paragraphs


def read_docx(data: bytes) -> str:
    return "\n".join(fetch_docx_paragraphs(io.BytesIO(data)))


_READERS = {
    MIME_TXT: read_txt,
    MIME_PDF: read_pdf,
    MIME_DOCX: read_docx,
}


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------

def extract_text_from_bytes(data: bytes, filename: str, content_type: str | None = None) -> str:
    mime = detect_mime_type(filename, content_type)
    return _READERS[mime](data)


def extract_text(path: Path) -> str:
    """Read a local file and return its plain text."""
    path = Path(path)
    mime = detect_mime_type(path.name)
    return _READERS[mime](path.read_bytes())
