from typing import Any, Dict, Optional
import logging

from pymongo.errors import DuplicateKeyError
from pymongo.results import InsertOneResult

from repositories import UserRepository
from repositories.user_repository import EMAIL_INDEX_NAME

logger = logging.getLogger("chefkit.users")

USER_EXISTS_MESSAGE = "User already exists"


def _is_email_duplicate(exc: DuplicateKeyError) -> bool:
    """True when the duplicate key is on the email index, not _id or another key."""
    details = exc.details or {}
    if details.get("keyPattern") == {"email": 1}:
        return True
    return EMAIL_INDEX_NAME in str(details.get("errmsg") or exc)


class UserService:
    """User registration and lookup"""

    @staticmethod
    def register_user(repo: UserRepository, user: Dict[str, Any]) -> Optional[InsertOneResult]:
        """
        Insert ``user`` unless a user with the same email exists.

        Returns the InsertOneResult, or None when the email is already taken.
        The existence check races with concurrent inserts; the unique index on
        email catches the loser as a DuplicateKeyError.
        """
        email = user.get("email")
        if repo.find_by_email(email) is not None:
            logger.info(f"user_exists email={email}")
            return None

        try:
            result = repo.insert(user)
        except DuplicateKeyError as exc:
            if not _is_email_duplicate(exc):
                raise
            logger.info(f"user_exists_on_insert email={email}")
            return None

        logger.info(f"user_created email={email} id={result.inserted_id}")
        return result
