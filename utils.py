import re
import logging
from typing import List, Dict, Optional, Iterable

from models import Candidate, REQUIRED_FIELDS
from uploads import is_pdf

logger = logging.getLogger(__name__)

# Shared with the dashboard script, so they must stay valid JavaScript regexes
EMAIL_PATTERN = r'^[^\s@]+@[^\s@]+\.[^\s@]+$'
PHONE_PATTERN = r'^[0-9]{10}$'

MISSING_FIELDS_MESSAGE = "Please fill all required fields."
INVALID_EMAIL_MESSAGE = "Enter a valid email address."
INVALID_PHONE_MESSAGE = "Enter a valid 10-digit phone number."
PDF_ONLY_MESSAGE = "Please upload PDF files only."


def validate_email(email: str) -> bool:
    """Validate email address format"""
    if not email:
        return False
    return re.fullmatch(EMAIL_PATTERN, email) is not None


def validate_phone(phone: str) -> bool:
    """Validate phone number: exactly 10 digits, nothing else"""
    if not phone:
        return False
    return re.fullmatch(PHONE_PATTERN, phone) is not None


def missing_fields(data: Dict) -> List[str]:
    """Required fields that are absent or empty (presence check only)"""
    return [name for name in REQUIRED_FIELDS if not data.get(name)]


def validate_referral(data: Dict, filename: Optional[str] = None,
                      mimetype: Optional[str] = None) -> Optional[str]:
    """Dashboard form rules; returns the first error message or None.

    Stricter than the API, which only checks that the fields are present.
    """
    if missing_fields(data):
        return MISSING_FIELDS_MESSAGE
    if not validate_email(data['email']):
        return INVALID_EMAIL_MESSAGE
    if not validate_phone(data['phone']):
        return INVALID_PHONE_MESSAGE
    if filename and not is_pdf(filename, mimetype):
        return PDF_ONLY_MESSAGE
    return None


def filter_candidates(candidates: Iterable[Candidate], search: Optional[str]) -> List[Candidate]:
    """Case-insensitive substring match on job title or status"""
    term = (search or '').strip().lower()
    if not term:
        return list(candidates)
    return [
        c for c in candidates
        if term in str(c.jobTitle or '').lower() or term in str(c.status or '').lower()
    ]
