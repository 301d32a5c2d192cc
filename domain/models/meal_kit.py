"""Pydantic model for meal kit documents."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from domain.enums import Difficulty


class MealKit(BaseModel):
    """
    Meal kit document as stored in the mealKits collection.

    The API accepts arbitrary bodies, so this model only describes the known
    fields; extra fields are kept.
    """

    id: str = Field(..., description="Epoch milliseconds at creation, as text")
    title: str
    shortDescription: str
    fullDescription: str
    price: float = Field(..., ge=0)
    prepTime: str
    servings: int = Field(..., ge=1)
    difficulty: Difficulty
    cuisine: str
    dietaryTags: List[str] = Field(default_factory=list)
    chef: str
    image: str
    ingredients: List[str] = Field(default_factory=list)
    userEmail: str
    createdAt: Optional[str] = Field(None, description="ISO-8601 creation time")

    model_config = ConfigDict(extra="allow", use_enum_values=True)
