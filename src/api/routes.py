"""FastAPI route handlers for the response index."""

from dataclasses import asdict

from fastapi import APIRouter, Depends, Request

from src.bootstrap import ResponseServices
from src.responses import ResponseMetadata

from .dependencies import get_services
from .schemas import (
    ClearIndexResponse,
    ConnectionItem,
    ConnectionsResponse,
    FormResponseRequest,
    HealthResponse,
    InitIndexResponse,
    MatchItem,
    SearchRequest,
    SearchResponse,
    SimilarityResponse,
    StoredResponse,
    StoreResponseRequest,
)

router = APIRouter()


# ---------------------------------------------------------------------------
# GET /health
# ---------------------------------------------------------------------------

@router.get("/health", response_model=HealthResponse)
def health_check(request: Request):
    """Report whether the embedding provider and vector store were configured."""
    services: ResponseServices | None = getattr(request.app.state, "services", None)
    if services is None:
        return HealthResponse(status="degraded", vector_store=None, index=None, embedding_model=None)

    return HealthResponse(
        status="ok",
        vector_store=services.store.provider,
        index=services.store.index_name,
        embedding_model=services.embedder.model,
    )


# ---------------------------------------------------------------------------
# /index
# ---------------------------------------------------------------------------

@router.post("/index/init", response_model=InitIndexResponse)
def init_index(services: ResponseServices = Depends(get_services)):
    """Create the responses index if it does not exist."""
    created = services.indexer.ensure_index()
    return InitIndexResponse(created=created, index=services.store.index_name)


@router.delete("/index", response_model=ClearIndexResponse)
def clear_index(
    namespace: str | None = None,
    services: ResponseServices = Depends(get_services),
):
    """Delete every record in the index, or in one namespace."""
    services.indexer.clear_index(namespace=namespace)
    return ClearIndexResponse(index=services.store.index_name, namespace=namespace)


# ---------------------------------------------------------------------------
# POST /responses
# ---------------------------------------------------------------------------

@router.post("/responses", response_model=StoredResponse)
def store_response(
    request: StoreResponseRequest,
    services: ResponseServices = Depends(get_services),
):
    """Embed and store a response. Empty text is accepted and skipped."""
    metadata = ResponseMetadata(type=request.type, name=request.name, extra=request.metadata)
    record_id = services.indexer.store_embedding(request.text, metadata, namespace=request.namespace)
    return StoredResponse(id=record_id)


@router.post("/forms/{form_id}/responses", response_model=StoredResponse)
def store_form_response(
    form_id: str,
    request: FormResponseRequest,
    services: ResponseServices = Depends(get_services),
):
    """Store one form response for connection generation."""
    record_id = services.indexer.index_form_response(
        form_id=form_id,
        response_id=request.response_id,
        respondent_name=request.respondent_name,
        text=request.text,
    )
    return StoredResponse(id=record_id)


# ---------------------------------------------------------------------------
# POST /responses/search, GET /responses/similarity
# ---------------------------------------------------------------------------

@router.post("/responses/search", response_model=SearchResponse)
def search_responses(
    request: SearchRequest,
    services: ResponseServices = Depends(get_services),
):
    """Find stored responses similar to a query text."""
    matches = services.search.find_similar(
        request.query,
        limit=request.limit,
        filter=request.filter,
        namespace=request.namespace,
    )
    return SearchResponse(matches=[
        MatchItem(id=m.id, score=m.score, metadata=m.metadata) for m in matches
    ])


@router.get("/responses/similarity", response_model=SimilarityResponse)
def response_similarity(
    id1: str,
    id2: str,
    namespace: str | None = None,
    services: ResponseServices = Depends(get_services),
):
    """Cosine similarity between two stored responses."""
    score = services.search.get_similarity(id1, id2, namespace=namespace)
    return SimilarityResponse(id1=id1, id2=id2, score=score)


# ---------------------------------------------------------------------------
# GET /forms/{form_id}/connections
# ---------------------------------------------------------------------------

@router.get("/forms/{form_id}/connections", response_model=ConnectionsResponse)
def form_connections(
    form_id: str,
    services: ResponseServices = Depends(get_services),
):
    """All response pairs for a form, most similar first."""
    connections = services.connections.generate_connections(form_id)
    return ConnectionsResponse(
        form_id=form_id,
        connections=[ConnectionItem(**asdict(c)) for c in connections],
    )
