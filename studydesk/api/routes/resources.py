"""Study resource routes."""

from typing import Annotated

from fastapi import APIRouter, Query, status

from studydesk.api.deps import Resources
from studydesk.schemas.resources import (
    Resource,
    ResourceCreate,
    ResourceRating,
    ResourceStats,
    ResourceUpdate,
)
from studydesk.services.search import ALL

router = APIRouter(prefix="/resources", tags=["resources"])


@router.get("/", response_model=list[Resource])
async def list_resources(
    store: Resources,
    q: str = "",
    subject: str = ALL,
    resource_type: Annotated[str, Query(alias="type")] = ALL,
) -> list[Resource]:
    """
    List resources, newest first.

    Filters (combined with AND):
    - q: search in title, description and tags (case-insensitive)
    - subject: exact subject, or "All"
    - type: book, video, document, website, or "All"
    """
    return store.filter(q, subject=subject, type=resource_type)


@router.get("/stats", response_model=ResourceStats)
async def resource_stats(store: Resources) -> ResourceStats:
    return store.compute_stats()


@router.get("/subjects", response_model=list[str])
async def resource_subjects(store: Resources) -> list[str]:
    """Subject filter choices, starting with "All"."""
    return store.subject_options()


@router.post("/", response_model=Resource, status_code=status.HTTP_201_CREATED)
async def create_resource(data: ResourceCreate, store: Resources) -> Resource:
    """Add a new, unrated resource."""
    return store.create(data)


@router.get("/{resource_id}", response_model=Resource)
async def get_resource(resource_id: str, store: Resources) -> Resource:
    """Get a specific resource by ID."""
    return store.get(resource_id)


@router.patch("/{resource_id}", response_model=Resource)
async def update_resource(resource_id: str, data: ResourceUpdate, store: Resources) -> Resource:
    """Edit a resource."""
    return store.update(resource_id, data)


@router.put("/{resource_id}/rating", response_model=Resource)
async def rate_resource(resource_id: str, data: ResourceRating, store: Resources) -> Resource:
    """Set the star rating (1-5)."""
    return store.rate(resource_id, data.rating)


@router.delete("/{resource_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_resource(resource_id: str, store: Resources) -> None:
    """Delete a resource."""
    store.delete(resource_id)
