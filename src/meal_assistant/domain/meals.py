"""Models for meal analysis results."""

from pydantic import BaseModel, ConfigDict, Field


class FoodItem(BaseModel):
    """Single food identified in a meal with its estimated nutrition."""

    model_config = ConfigDict(extra="ignore", allow_inf_nan=False)

    name: str
    quantity: str
    calories: float = Field(ge=0.0, strict=True)
    carbohydrates: float = Field(ge=0.0, strict=True)
    proteins: float = Field(ge=0.0, strict=True)
    fats: float = Field(ge=0.0, strict=True)


class MealDetails(BaseModel):
    """Structured meal breakdown returned by the model."""

    model_config = ConfigDict(extra="ignore")

    name: str
    icon: str
    foods: list[FoodItem]

    @property
    def total_calories(self) -> float:
        """Sum of calories across all foods."""
        return sum(food.calories for food in self.foods)
