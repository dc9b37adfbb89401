"""Response metadata and connection models."""

import hashlib
import json
import re
from dataclasses import dataclass, field

from src.errors import InvalidArgumentError
from src.retrieval.stores.base import Metadata, MetadataValue

ORIGINAL_TEXT_LIMIT = 1000
RESERVED_KEYS = frozenset({"type", "name", "originalText"})
FORM_RESPONSE_TYPE = "form-response"


def sanitize_id_part(value: str) -> str:
    """Strip non-alphanumerics, turn whitespace runs into '-', lower-case.

    >>> sanitize_id_part("Jane Doe!")
    'jane-doe'
    """
    stripped = re.sub(r"[^a-zA-Z0-9\s-]", "", value)
    return re.sub(r"\s+", "-", stripped).lower()


def _check_value(key: str, value: MetadataValue) -> None:
    if isinstance(value, (str, bool, int, float)):
        return
    if isinstance(value, list) and all(isinstance(v, str) for v in value):
        return
    raise InvalidArgumentError(
        f"Metadata field {key!r} has unsupported type {type(value).__name__}; "
        "expected str, bool, number or list of str"
    )


@dataclass
class ResponseMetadata:
    """Required fields for every stored response plus free-form extras."""

    type: str
    name: str
    extra: Metadata = field(default_factory=dict)

    def __post_init__(self):
        for key in ("type", "name"):
            value = getattr(self, key)
            if not isinstance(value, str) or not value.strip():
                raise InvalidArgumentError(f"Metadata field {key!r} must be a non-empty string")
        for key, value in self.extra.items():
            if key in RESERVED_KEYS:
                raise InvalidArgumentError(f"Metadata field {key!r} is reserved")
            _check_value(key, value)

    @classmethod
    def from_mapping(cls, metadata: dict) -> "ResponseMetadata":
        """Split a flat mapping into required fields and extras."""
        extra = {k: v for k, v in metadata.items() if k not in ("type", "name")}
        return cls(type=metadata.get("type", ""), name=metadata.get("name", ""), extra=extra)

    @property
    def record_id(self) -> str:
        """Store id, e.g. ('respondent', 'Jane Doe!') -> 'respondent-jane-doe'."""
        suffix = sanitize_id_part(self.name)
        if not suffix:
            raise InvalidArgumentError(
                f"Metadata name {self.name!r} has no characters usable in a record id"
            )
        return f"{sanitize_id_part(self.type)}-{suffix}"

    def fields(self) -> Metadata:
        """Required fields as a flat mapping."""
        return {"type": self.type, "name": self.name}

    def to_store_metadata(self, text: str) -> Metadata:
        """Flatten for the vector store, adding the truncated original text."""
        return {
            **self.extra,
            **self.fields(),
            "originalText": text[:ORIGINAL_TEXT_LIMIT],
        }


@dataclass
class FormResponseMetadata(ResponseMetadata):
    """Metadata for one respondent's answer to a form."""

    form_id: str = ""
    response_id: str = ""
    respondent_name: str = ""

    def __post_init__(self):
        super().__post_init__()
        for key in ("form_id", "response_id", "respondent_name"):
            value = getattr(self, key)
            if not isinstance(value, str) or not value.strip():
                raise InvalidArgumentError(f"Metadata field {key!r} must be a non-empty string")
            if key in self.extra:
                raise InvalidArgumentError(f"Metadata field {key!r} is reserved")

    @property
    def record_id(self) -> str:
        """Unique per (form_id, response_id), even when the sanitized parts collide."""
        digest = hashlib.sha1(json.dumps([self.form_id, self.response_id]).encode()).hexdigest()[:8]
        parts = [sanitize_id_part(v).strip("-") for v in (self.type, self.form_id, self.response_id)]
        return "-".join([p for p in parts if p] + [digest])

    def fields(self) -> Metadata:
        return {
            **super().fields(),
            "form_id": self.form_id,
            "response_id": self.response_id,
            "respondent_name": self.respondent_name,
        }


@dataclass
class Connection:
    """Similarity between two responses to the same form. Never persisted."""

    response1_id: str
    response2_id: str
    response1_name: str
    response2_name: str
    similarity_score: float
