from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

MAX_INGREDIENTS = 15


def blank_to_none(value: Any) -> Any:
    if isinstance(value, str):
        value = value.strip()
    return value or None


class CocktailIngredient(BaseModel):
    name: str
    measure: Optional[str] = None


class Category(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(alias="strCategory")


class CocktailSummary(BaseModel):
    """A row of the filter endpoint: id, name and thumbnail only."""

    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    id: str = Field(alias="idDrink")
    name: str = Field(alias="strDrink")
    thumbnail: Optional[str] = Field(default=None, alias="strDrinkThumb")

    @field_validator("thumbnail", mode="before")
    @classmethod
    def empty_thumbnail(cls, value: Any) -> Any:
        return blank_to_none(value)


class Cocktail(BaseModel):
    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    id: str = Field(alias="idDrink")
    name: str = Field(alias="strDrink")
    category: Optional[str] = Field(default=None, alias="strCategory")
    alcoholic: Optional[str] = Field(default=None, alias="strAlcoholic")
    glass: Optional[str] = Field(default=None, alias="strGlass")
    instructions: Optional[str] = Field(default=None, alias="strInstructions")
    thumbnail: Optional[str] = Field(default=None, alias="strDrinkThumb")
    ingredients: List[CocktailIngredient] = Field(default_factory=list)

    @field_validator("category", "alcoholic", "glass", "instructions", "thumbnail", mode="before")
    @classmethod
    def empty_optional(cls, value: Any) -> Any:
        return blank_to_none(value)

    @model_validator(mode="before")
    @classmethod
    def collect_ingredients(cls, data: Any) -> Any:
        # strIngredientN/strMeasureN are parallel columns; the first gap ends the list
        if not isinstance(data, dict) or "ingredients" in data:
            return data
        ingredients = []
        for i in range(1, MAX_INGREDIENTS + 1):
            name = data.get(f"strIngredient{i}")
            if not isinstance(name, str) or not name.strip():
                break
            measure = data.get(f"strMeasure{i}")
            ingredients.append({
                "name": name.strip(),
                "measure": blank_to_none(measure) if isinstance(measure, str) else None,
            })
        return {**data, "ingredients": ingredients}
