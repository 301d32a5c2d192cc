"""
Meal kit routes - listing, lookup, creation, update and deletion of meal kits.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Query
import logging

from api.dependencies import get_meal_kit_repository
from api.responses import (
    degraded_list,
    delete_result,
    document_list,
    make_serializable,
    update_result,
)
from app.exceptions import ChefKitError, NotFoundError, OperationFailedError
from repositories import MealKitRepository
from services import meal_kit_service

router = APIRouter(tags=["Meal Kits"])
logger = logging.getLogger("chefkit.api.meal_kits")


@router.get("/meal-kits", response_model=List[Dict[str, Any]])
def list_meal_kits(
    cuisine: Optional[str] = Query(default=None, description='Exact cuisine, "All" for any'),
    search: Optional[str] = Query(
        default=None, description="Case-insensitive text in title, chef or cuisine"
    ),
    sort: Optional[str] = Query(
        default=None, description="price-asc, price-desc or newest"
    ),
    repo: MealKitRepository = Depends(get_meal_kit_repository),
):
    """
    List meal kits.

    - **cuisine**: exact match; "All" disables the filter
    - **search**: matches title, chef or cuisine
    - **sort**: price-asc, price-desc, newest; anything else keeps database order
    """
    try:
        query = meal_kit_service.build_filter(cuisine=cuisine, search=search)
        results = repo.find(query, sort=meal_kit_service.sort_keys(sort))
        return document_list(results)
    except Exception:
        logger.exception("Error fetching meal kits")
        return degraded_list()


@router.get("/meal-kits/{meal_kit_id}", response_model=Dict[str, Any])
def get_meal_kit(meal_kit_id: str, repo: MealKitRepository = Depends(get_meal_kit_repository)):
    """Get a single meal kit by its application id."""
    try:
        meal_kit = repo.find_by_id(meal_kit_id)
    except ChefKitError:
        raise
    except Exception as e:
        logger.exception(f"Error fetching meal kit {meal_kit_id}")
        raise OperationFailedError("Error fetching meal kit", details=str(e))

    if not meal_kit:
        raise NotFoundError("Meal kit not found")
    return make_serializable(meal_kit)


@router.post("/meal-kits")
def create_meal_kit(body: Dict[str, Any], repo: MealKitRepository = Depends(get_meal_kit_repository)):
    """Store the body as a new meal kit, stamped with id and createdAt."""
    logger.debug(f"POST /meal-kits body={body}")
    try:
        meal_kit = meal_kit_service.stamp_new_meal_kit(body)
        result = repo.insert(meal_kit)
    except ChefKitError:
        raise
    except Exception as e:
        logger.exception("Error adding meal kit")
        raise OperationFailedError("Error adding meal kit", details=str(e))

    logger.info(f"meal_kit_created id={meal_kit['id']} _id={result.inserted_id}")
    return {"success": True, "insertedId": make_serializable(result.inserted_id)}


@router.put("/meal-kits/{meal_kit_id}")
def update_meal_kit(
    meal_kit_id: str,
    fields: Dict[str, Any],
    repo: MealKitRepository = Depends(get_meal_kit_repository),
):
    """Merge the body into the meal kit; an unknown id yields matchedCount 0."""
    try:
        result = repo.update_fields(meal_kit_id, fields)
    except ChefKitError:
        raise
    except Exception as e:
        logger.exception(f"Error updating meal kit {meal_kit_id}")
        raise OperationFailedError("Error updating meal kit", details=str(e))
    return update_result(result)


@router.delete("/meal-kits/{meal_kit_id}")
def delete_meal_kit(meal_kit_id: str, repo: MealKitRepository = Depends(get_meal_kit_repository)):
    """Delete the meal kit; an unknown id yields deletedCount 0."""
    try:
        result = repo.delete_by_id(meal_kit_id)
    except ChefKitError:
        raise
    except Exception as e:
        logger.exception(f"Error deleting meal kit {meal_kit_id}")
        raise OperationFailedError("Error deleting meal kit", details=str(e))
    return delete_result(result)


@router.get("/my-meal-kits/{email}", response_model=List[Dict[str, Any]])
def list_owner_meal_kits(email: str, repo: MealKitRepository = Depends(get_meal_kit_repository)):
    """Meal kits whose userEmail equals ``email``."""
    try:
        return document_list(repo.find_by_owner(email))
    except Exception:
        logger.exception(f"Error fetching meal kits for {email}")
        return degraded_list()
