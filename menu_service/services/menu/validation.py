"""Menu item validation.

Candidates arriving from clients (and seed files) are checked against the
:class:`MenuItemCandidate` schema. Every failing field is reported once, in
schema order, with a human-readable message.
"""
from typing import Any, List, Literal, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictStr,
    ValidationError,
    field_validator,
)

from menu_service.services.menu.base import MenuCategory, Violation


FIELD_MESSAGES = {
    "name": "Name must be at least 3 characters",
    "description": "Description must be at least 10 characters",
    "price": "Price must be greater than 0",
    "category": "Invalid category",
    "ingredients": "Ingredients must include at least one item",
    "available": "Available must be true or false",
}

BODY_MESSAGE = "Request body must be a JSON object"


class MenuItemCandidate(BaseModel):
    """Menu item fields as supplied by a client. Unknown fields are dropped."""

    model_config = ConfigDict(extra="ignore")

    name: StrictStr = Field(min_length=3)
    description: StrictStr = Field(min_length=10)
    price: float = Field(gt=0, allow_inf_nan=False)
    category: MenuCategory
    ingredients: List[StrictStr] = Field(min_length=1)
    available: StrictBool = True

    @field_validator("price", mode="before")
    @classmethod
    def price_must_be_number(cls, value: Any) -> Any:
        # bool is an int subclass and numeric strings would be coerced
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError("price must be a number")
        return value


class ValidationSuccess(BaseModel):
    """Candidate passed every rule."""

    ok: Literal[True] = True
    candidate: MenuItemCandidate


class ValidationFailure(BaseModel):
    """Candidate failed one or more rules."""

    ok: Literal[False] = False
    violations: List[Violation]


ValidationResult = Union[ValidationSuccess, ValidationFailure]


def validate_menu_item(payload: Any) -> ValidationResult:
    """
    Validate a candidate menu item payload.

    Args:
        payload: Decoded JSON body (or seed entry)

    Returns:
        ValidationSuccess with the parsed candidate, or ValidationFailure
        listing one violation per invalid field
    """
    if not isinstance(payload, dict):
        return ValidationFailure(
            violations=[Violation(field="body", message=BODY_MESSAGE, value=payload)]
        )

    try:
        candidate = MenuItemCandidate.model_validate(payload)
    except ValidationError as e:
        failed = {str(error["loc"][0]) for error in e.errors() if error["loc"]}
        violations = [
            Violation(field=field, message=message, value=payload.get(field))
            for field, message in FIELD_MESSAGES.items()
            if field in failed
        ]
        return ValidationFailure(violations=violations)

    return ValidationSuccess(candidate=candidate)
