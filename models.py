import enum
import time
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Optional, Any


class CandidateStatus(enum.Enum):
    PENDING = "Pending"
    REVIEWED = "Reviewed"
    HIRED = "Hired"


# Order of the fields as they appear in the JSON store
CANDIDATE_FIELDS = ('id', 'name', 'email', 'phone', 'jobTitle', 'resumeUrl', 'status')
REQUIRED_FIELDS = ('name', 'email', 'phone', 'jobTitle')


def generate_candidate_id(now_ms: Optional[int] = None) -> str:
    """Creation time in Unix milliseconds, as a string.

    Two candidates created within the same millisecond get the same id;
    nothing guards against that.
    """
    if now_ms is None:
        now_ms = int(time.time() * 1000)
    return str(now_ms)


@dataclass
class Candidate:
    """A referred candidate as stored in the JSON file.

    ``status`` is kept as a plain string: the server stores whatever value it
    is given, only the dashboard restricts it to ``CandidateStatus`` values.
    """
    id: str
    name: str
    email: str
    phone: str
    jobTitle: str
    resumeUrl: Optional[str] = None
    status: Optional[str] = CandidateStatus.PENDING.value
    # Keys found in the file that this model does not know about
    extra: Dict[str, Any] = field(default_factory=dict)
    # Model keys missing from the stored record; left out again on write
    absent: FrozenSet[str] = field(default=frozenset(), repr=False, compare=False)

    @classmethod
    def create(cls, name: str, email: str, phone: str, jobTitle: str,
               resume_url: Optional[str] = None) -> 'Candidate':
        return cls(
            id=generate_candidate_id(),
            name=name,
            email=email,
            phone=phone,
            jobTitle=jobTitle,
            resumeUrl=resume_url,
            status=CandidateStatus.PENDING.value
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Candidate':
        """Wrap a stored record without normalising it.

        Values are kept as found (a numeric id stays numeric) and model keys
        the record lacks are remembered, so ``to_dict`` gives back the record
        that was read.
        """
        extra = {k: v for k, v in data.items() if k not in CANDIDATE_FIELDS}
        return cls(
            id=data.get('id'),
            name=data.get('name'),
            email=data.get('email'),
            phone=data.get('phone'),
            jobTitle=data.get('jobTitle'),
            resumeUrl=data.get('resumeUrl'),
            status=data.get('status'),
            extra=extra,
            absent=frozenset(k for k in CANDIDATE_FIELDS if k not in data)
        )

    def set_status(self, status) -> None:
        self.status = status
        self.absent = self.absent - {'status'}

    def to_dict(self) -> Dict[str, Any]:
        data = {
            'id': self.id,
            'name': self.name,
            'email': self.email,
            'phone': self.phone,
            'jobTitle': self.jobTitle,
            'resumeUrl': self.resumeUrl,
            'status': self.status,
        }
        for key in self.absent:
            del data[key]
        data.update(self.extra)
        return data
