"""Tag endpoints for API v1."""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from personal_finance_api.app.api.deps import get_tags_service
from personal_finance_api.app.schemas.tag import TagCreate, TagRead
from personal_finance_api.app.services.interfaces import TagsServiceInterface


router = APIRouter()


@router.get("", response_model=List[TagRead])
async def list_tags(tags: TagsServiceInterface = Depends(get_tags_service)) -> List[TagRead]:
    """Return every tag, in store order."""
    return await tags.get_all()


@router.get("/{tag_id}", response_model=TagRead)
async def get_tag(tag_id: str, tags: TagsServiceInterface = Depends(get_tags_service)) -> TagRead:
    """Retrieve a single tag by its ID.

    Raises 404 if the tag is not found.
    """
    tag = await tags.get(tag_id)
    if tag is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Tag not found")
    return tag


@router.post("", response_model=TagRead, status_code=status.HTTP_201_CREATED)
async def create_tag(tag_in: TagCreate, tags: TagsServiceInterface = Depends(get_tags_service)) -> TagRead:
    """Create a tag.  Tag names are not required to be unique."""
    return await tags.create(tag_in)


@router.put("/{tag_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_tag(
    tag_id: str,
    tag_in: TagCreate,
    tags: TagsServiceInterface = Depends(get_tags_service),
) -> None:
    """Replace an existing tag with the request body."""
    if await tags.get(tag_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Tag not found")
    await tags.update(tag_id, tag_in)
    return None


@router.delete("/{tag_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_tag(tag_id: str, tags: TagsServiceInterface = Depends(get_tags_service)) -> None:
    """Delete a tag.

    Transactions and goals that list the tag keep its id.
    """
    if await tags.get(tag_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Tag not found")
    await tags.remove(tag_id)
    return None
