"""
Flat-file candidate store.

The whole candidate list lives in one JSON array on disk. Every operation
reads the entire file and every mutation rewrites it, pretty-printed with a
2-space indent. There is no locking: two requests that read-modify-write at
the same time can lose one of the updates (last write wins).
"""

import json
import logging
import os
import tempfile
from typing import List, Optional

from models import Candidate

logger = logging.getLogger(__name__)


class CandidateStore:
    def __init__(self, path: str):
        self.path = path

    def ensure_exists(self) -> None:
        """Create the backing file holding an empty array if it is missing."""
        if os.path.exists(self.path):
            return
        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        self.save([])
        logger.info(f"Created empty candidate store at {self.path}")

    def load(self) -> List[Candidate]:
        """Read every candidate from disk.

        Raises OSError if the file cannot be read and ValueError if it does
        not hold a JSON array.
        """
        with open(self.path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        if not isinstance(data, list):
            raise ValueError(f"Candidate store {self.path} does not contain a JSON array")
        return [Candidate.from_dict(item) for item in data]

    def save(self, candidates: List[Candidate]) -> None:
        """Overwrite the backing file with the given candidates.

        The text is fully encoded before the file is touched and then swapped
        in with os.replace, so a failed write leaves the previous file intact.
        """
        records = [c.to_dict() for c in candidates]
        try:
            payload = json.dumps(records, indent=2, ensure_ascii=False).encode('utf-8')
        except UnicodeEncodeError:
            # Lone surrogates cannot be written as UTF-8; fall back to \u escapes
            logger.warning(f"Unencodable text in candidate store, writing {self.path} ASCII-escaped")
            payload = json.dumps(records, indent=2).encode('utf-8')

        directory = os.path.dirname(self.path) or '.'
        fd, tmp_path = tempfile.mkstemp(dir=directory, prefix='.db-', suffix='.tmp')
        try:
            with os.fdopen(fd, 'wb') as f:
                f.write(payload)
                f.write(b'\n')
            os.replace(tmp_path, self.path)
        except Exception:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise

    def append(self, candidate: Candidate) -> Candidate:
        candidates = self.load()
        candidates.append(candidate)
        self.save(candidates)
        return candidate

    def update_status(self, candidate_id: str, status) -> Optional[Candidate]:
        """Overwrite the status of one candidate; None if the id is unknown.

        The value is stored as given, no check against CandidateStatus.
        """
        candidates = self.load()
        for candidate in candidates:
            if candidate.id == candidate_id:
                candidate.set_status(status)
                self.save(candidates)
                return candidate
        return None
