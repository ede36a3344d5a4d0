"""Pydantic models for form submissions."""

from pydantic import BaseModel

# Values stay raw so parsing happens only in the validator.
FormNumber = str | int | float | bool | None


class WeightForm(BaseModel):
    """Weight entry form payload."""

    date: str | None = None
    stones: FormNumber = None
    pounds: FormNumber = None


class GoalForm(BaseModel):
    """Goal weight form payload."""

    stones: FormNumber = None
    pounds: FormNumber = None
