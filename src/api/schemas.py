"""Pydantic request/response models for the API."""

from typing import Any

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# GET /health
# ---------------------------------------------------------------------------

class HealthResponse(BaseModel):
    status: str
    vector_store: str | None
    index: str | None
    embedding_model: str | None


# ---------------------------------------------------------------------------
# /index
# ---------------------------------------------------------------------------

class InitIndexResponse(BaseModel):
    created: bool
    index: str


class ClearIndexResponse(BaseModel):
    index: str
    namespace: str | None


# ---------------------------------------------------------------------------
# POST /responses, POST /forms/{form_id}/responses
# ---------------------------------------------------------------------------

class StoreResponseRequest(BaseModel):
    text: str = Field(..., description="Response text; empty text is skipped")
    type: str = Field(..., min_length=1, description="Record type, e.g. 'respondent'")
    name: str = Field(..., min_length=1, description="Display name, part of the record id")
    namespace: str | None = None
    metadata: dict[str, Any] = Field(default_factory=dict, description="Extra metadata fields")


class FormResponseRequest(BaseModel):
    response_id: str = Field(..., min_length=1)
    respondent_name: str = Field(..., min_length=1)
    text: str


class StoredResponse(BaseModel):
    id: str | None = Field(None, description="Record id, null when the text was empty")


# ---------------------------------------------------------------------------
# POST /responses/search, GET /responses/similarity
# ---------------------------------------------------------------------------

class SearchRequest(BaseModel):
    query: str
    limit: int = Field(5, ge=1, le=100)
    filter: dict[str, Any] | None = Field(None, description="Metadata filter, forwarded as-is")
    namespace: str | None = None


class MatchItem(BaseModel):
    id: str
    score: float | None
    metadata: dict[str, Any] | None


class SearchResponse(BaseModel):
    matches: list[MatchItem]


class SimilarityResponse(BaseModel):
    id1: str
    id2: str
    score: float


# ---------------------------------------------------------------------------
# GET /forms/{form_id}/connections
# ---------------------------------------------------------------------------

class ConnectionItem(BaseModel):
    response1_id: str = Field(..., serialization_alias="response1Id")
    response2_id: str = Field(..., serialization_alias="response2Id")
    response1_name: str = Field(..., serialization_alias="response1Name")
    response2_name: str = Field(..., serialization_alias="response2Name")
    similarity_score: float = Field(..., serialization_alias="similarityScore")


class ConnectionsResponse(BaseModel):
    form_id: str
    connections: list[ConnectionItem]


# ---------------------------------------------------------------------------
# /notes
# ---------------------------------------------------------------------------

class MeetingNoteItem(BaseModel):
    id: int
    title: str
    date: str
    partner: str
    partner_initials: str
    content: str
    reflections: str
    tags: list[str]


class MeetingNoteCreate(BaseModel):
    title: str = Field(..., min_length=1)
    date: str
    partner: str
    content: str = ""
    reflections: str = ""
    tags: list[str] = Field(default_factory=list)


class MeetingNoteUpdate(BaseModel):
    title: str | None = Field(None, min_length=1)
    date: str | None = None
    partner: str | None = None
    content: str | None = None
    reflections: str | None = None
    tags: list[str] | None = None


class TagRequest(BaseModel):
    tag: str = Field(..., min_length=1)


class JournalEntryItem(BaseModel):
    id: int
    title: str
    date: str
    content: str
    mood: str


class JournalEntryCreate(BaseModel):
    title: str = Field(..., min_length=1)
    date: str
    content: str = ""
    mood: str = ""


class JournalEntryUpdate(BaseModel):
    title: str | None = Field(None, min_length=1)
    date: str | None = None
    content: str | None = None
    mood: str | None = None
