"""User routes"""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends
import logging

from api.dependencies import get_user_repository
from api.responses import degraded_list, document_list, insert_result, make_serializable
from app.exceptions import ChefKitError, OperationFailedError
from repositories import UserRepository
from services.user_service import USER_EXISTS_MESSAGE, UserService

router = APIRouter(prefix="/users", tags=["Users"])
logger = logging.getLogger("chefkit.api.users")


@router.get("", response_model=List[Dict[str, Any]])
def list_users(repo: UserRepository = Depends(get_user_repository)):
    """Return all users; an empty list when the database cannot be read."""
    try:
        return document_list(repo.list_all())
    except Exception:
        logger.exception("Error fetching users")
        return degraded_list()


@router.post("")
def create_user(user: Dict[str, Any], repo: UserRepository = Depends(get_user_repository)):
    """Insert the body verbatim unless its email is already registered."""
    try:
        result = UserService.register_user(repo, user)
    except ChefKitError:
        raise
    except Exception as e:
        logger.exception("Error in users endpoint")
        raise OperationFailedError("Error processing user request", details=str(e))

    if result is None:
        return {"message": USER_EXISTS_MESSAGE}
    return insert_result(result)


@router.get("/{email}")
def get_user(email: str, repo: UserRepository = Depends(get_user_repository)):
    """Return the user with this email, or null."""
    try:
        user = repo.find_by_email(email)
    except ChefKitError:
        raise
    except Exception as e:
        logger.exception(f"Error fetching user {email}")
        raise OperationFailedError("Error fetching user", details=str(e))
    return make_serializable(user)
