"""Posts Routes — HTTP surface of the post lifecycle.

Invariants:
    - Path ids are taken as plain strings; PostLifecycleManager parses them,
      so malformed ids yield 400 INVALID_IDENTIFIER and unknown ids 404
    - Bodies are validated by Pydantic before reaching the handler (400 on failure)
    - Response shapes: list → [Post], create → {insertedId} (201),
      update → {modifiedCount}, delete → {deletedCount}
"""

import logging

from fastapi import APIRouter, Depends, status

from purehouse.api.dependencies import get_post_lifecycle
from purehouse.core.post_identity import format_post_id
from purehouse.schemas.post import (
    DeletedResponse, InsertedResponse, ModifiedResponse,
    PostCreate, PostUpdate, serialize_post,
)
from purehouse.services.post_lifecycle import PostLifecycleManager

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/posts", tags=["posts"])


@router.get("")
async def list_posts(
    posts: PostLifecycleManager = Depends(get_post_lifecycle),
):
    """Every stored post."""
    return [serialize_post(record) for record in await posts.find_all()]


@router.post(
    "", response_model=InsertedResponse, status_code=status.HTTP_201_CREATED,
)
async def create_post(
    body: PostCreate,
    posts: PostLifecycleManager = Depends(get_post_lifecycle),
):
    post_id = await posts.create(body.model_dump())
    return InsertedResponse(insertedId=format_post_id(post_id))


@router.get("/{post_id}")
async def get_post(
    post_id: str,
    posts: PostLifecycleManager = Depends(get_post_lifecycle),
):
    return serialize_post(await posts.find_one(post_id))


@router.put("/{post_id}", response_model=ModifiedResponse)
async def update_post(
    post_id: str,
    body: PostUpdate,
    posts: PostLifecycleManager = Depends(get_post_lifecycle),
):
    """Partial update: fields not sent are left untouched."""
    modified = await posts.update(post_id, body.to_patch())
    return ModifiedResponse(modifiedCount=modified)


@router.delete("/{post_id}", response_model=DeletedResponse)
async def delete_post(
    post_id: str,
    posts: PostLifecycleManager = Depends(get_post_lifecycle),
):
    deleted = await posts.remove(post_id)
    return DeletedResponse(deletedCount=deleted)
