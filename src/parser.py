"""Text extraction and cleanup for FNOL documents."""

import logging
import mimetypes
import re
from pathlib import Path
from typing import Optional, Union

from PyPDF2 import PdfReader

logger = logging.getLogger(__name__)

SUPPORTED_MIME_TYPES = ("application/pdf", "text/plain")

DISCLAIMER_PATTERNS = (
    re.compile(r"this document is confidential.*?(?:\n|$)", re.IGNORECASE),
    re.compile(r"confidential and proprietary.*?(?:\n|$)", re.IGNORECASE),
    re.compile(r"all rights reserved.*?(?:\n|$)", re.IGNORECASE),
    re.compile(r"for internal use only.*?(?:\n|$)", re.IGNORECASE),
    re.compile(r"attorney[-\s]client privilege.*?(?:\n|$)", re.IGNORECASE),
    re.compile(r"privileged and confidential.*?(?:\n|$)", re.IGNORECASE),
)


def parse_document(
    file_path: Union[str, Path],
    mime_type: Optional[str] = None,
    max_file_size_mb: Optional[int] = None,
) -> str:
    """Read a PDF or TXT document and return its cleaned text.

    Args:
        file_path: Path to the document
        mime_type: MIME type of the document, guessed from the extension if omitted
        max_file_size_mb: Reject files larger than this many megabytes

    Returns:
        Cleaned document text

    Raises:
        ValueError: If the file type is unsupported, too large, or cannot be read
    """
    path = Path(file_path)
    if mime_type is None:
        mime_type, _ = mimetypes.guess_type(path.name)

    if mime_type not in SUPPORTED_MIME_TYPES:
        raise ValueError(f"Unsupported file type: {mime_type}")

    if max_file_size_mb is not None and path.exists():
        size = path.stat().st_size
        if size > max_file_size_mb * 1024 * 1024:
            raise ValueError(f"File {path.name} exceeds the {max_file_size_mb} MB limit")

    if mime_type == "application/pdf":
        raw_text = _parse_pdf(path)
    else:
        raw_text = _parse_txt(path)

    logger.debug("Read %d characters from %s", len(raw_text), path)
    return clean_text(raw_text)


def _parse_pdf(path: Path) -> str:
    try:
        reader = PdfReader(str(path))
        return "\n".join(page.extract_text() or "" for page in reader.pages)
    except Exception as e:
        raise ValueError(f"PDF parsing failed: {e}") from e


def _parse_txt(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ValueError(f"TXT file reading failed: {e}") from e


def clean_text(text: str) -> str:
    """Normalize whitespace and strip legal boilerplate."""
    cleaned = text.replace("\r\n", "\n")
    cleaned = re.sub(r"[ \t]+", " ", cleaned)
    cleaned = re.sub(r"\n{3,}", "\n\n", cleaned)
    cleaned = remove_legal_disclaimers(cleaned)
    return cleaned.strip()


def remove_legal_disclaimers(text: str) -> str:
    """Remove confidentiality notices and similar disclaimer lines."""
    for pattern in DISCLAIMER_PATTERNS:
        text = pattern.sub("", text)
    return text
