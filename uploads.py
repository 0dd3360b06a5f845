import os
import re
import time
import logging
from typing import Optional

from werkzeug.datastructures import FileStorage

logger = logging.getLogger(__name__)

PDF_MIMETYPE = 'application/pdf'
UPLOAD_URL_PREFIX = '/uploads'
WHITESPACE_RE = re.compile(r'\s+')


class UploadRejected(ValueError):
    """Raised when a submitted resume does not pass the PDF check"""


def is_pdf(filename: Optional[str], mimetype: Optional[str]) -> bool:
    """Accept a file declared as application/pdf OR named *.pdf.

    Either condition is enough, so a mislabelled .pdf or a correctly labelled
    file without the suffix both pass. This is a convenience check, not a
    content check.
    """
    if mimetype == PDF_MIMETYPE:
        return True
    return bool(filename) and filename.lower().endswith('.pdf')


def build_upload_name(filename: str, now_ms: Optional[int] = None) -> str:
    """Stored name: ``{unix-ms}-{original name, whitespace runs -> "_"}``"""
    if now_ms is None:
        now_ms = int(time.time() * 1000)
    # Drop any client-side directory part, including Windows separators
    base = os.path.basename((filename or '').replace('\\', '/'))
    if not base:
        base = 'resume.pdf'
    return f"{now_ms}-{WHITESPACE_RE.sub('_', base)}"


def has_file(file: Optional[FileStorage]) -> bool:
    """An empty file input arrives as a FileStorage without a filename"""
    return file is not None and bool(file.filename)


def save_resume(file: FileStorage, upload_folder: str) -> str:
    """Validate and write an uploaded resume, returning the stored filename."""
    if not is_pdf(file.filename, file.mimetype):
        logger.warning(f"Rejected upload {file.filename!r} ({file.mimetype})")
        raise UploadRejected("Only PDF files are allowed!")

    os.makedirs(upload_folder, exist_ok=True)
    stored_name = build_upload_name(file.filename)
    file.save(os.path.join(upload_folder, stored_name))
    logger.info(f"Saved resume {file.filename!r} as {stored_name}")
    return stored_name


def public_url(stored_name: str) -> str:
    return f"{UPLOAD_URL_PREFIX}/{stored_name}"
