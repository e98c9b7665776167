"""
User endpoints.

CRUD over the user store.  Path functions are plain ``def`` so FastAPI
runs each request on a worker thread; the store's lock coordinates them.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from ...schemas.user import User, UserCreate, UserUpdate
from ...services.user_service import UserService
from ..deps import get_user_service, json_body

router = APIRouter()

USER_NOT_FOUND = "User not found"


@router.post("", response_model=User, status_code=status.HTTP_201_CREATED)
def create_user(
    user_in: UserCreate = Depends(json_body(UserCreate)),
    service: UserService = Depends(get_user_service),
) -> User:
    """Create a user, overwriting any existing user with the same id."""
    if not user_in.id or not user_in.name or not user_in.email:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="ID, Name, and Email are required",
        )
    return service.create_user(user_in)


@router.get("", response_model=List[User])
def list_users(service: UserService = Depends(get_user_service)) -> List[User]:
    """Return all users; an empty store yields an empty list."""
    return service.list_users()


@router.get("/{user_id}", response_model=User)
def get_user(user_id: str, service: UserService = Depends(get_user_service)) -> User:
    user = service.get_user(user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=USER_NOT_FOUND)
    return user


@router.put("/{user_id}", response_model=User)
def update_user(
    user_id: str,
    user_in: UserUpdate = Depends(json_body(UserUpdate)),
    service: UserService = Depends(get_user_service),
) -> User:
    """Replace every field of an existing user.

    The id in the URL wins over any id in the body.  Fields left out of
    the body are stored as empty strings.
    """
    user = service.update_user(user_id, user_in)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=USER_NOT_FOUND)
    return user


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(user_id: str, service: UserService = Depends(get_user_service)) -> None:
    if not service.delete_user(user_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=USER_NOT_FOUND)
    return None
