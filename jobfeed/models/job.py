from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

# upstream wire key -> field name
_WIRE_KEYS = {
    'id': 'id',
    'title': 'title',
    'company': 'company',
    'location': 'location',
    'logo': 'logo_url',
    'description': 'description',
    'requirements': 'requirements',
    'apply_link': 'apply_link',
}

@dataclass(frozen=True)
class JobPosting:
    """One job listing as delivered by the job-listing endpoint.

    Every field is optional because the upstream contract guarantees none of
    them, ``id`` included.
    """
    id: Optional[Any] = None
    title: Optional[str] = None
    company: Optional[str] = None
    location: Optional[str] = None
    logo_url: Optional[str] = None
    description: Optional[str] = None
    requirements: Optional[str] = None
    apply_link: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> 'JobPosting':
        """
        Build a posting from a decoded JSON object. Unknown keys are ignored.

        Raises:
            TypeError: If 'payload' is not a JSON object
        """
        if not isinstance(payload, dict):
            raise TypeError(f"Job payload must be an object, got {type(payload).__name__}")

        return cls(**{
            field: payload.get(wire_key)
            for wire_key, field in _WIRE_KEYS.items()
        })

    def to_payload(self) -> Dict[str, Any]:
        return {
            wire_key: getattr(self, field)
            for wire_key, field in _WIRE_KEYS.items()
        }


JobCollection = Tuple[JobPosting, ...]
