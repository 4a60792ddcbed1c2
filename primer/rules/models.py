from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictBool, field_validator


def _reject_bool(value: Any) -> Any:
    # bool is an int subclass; lax validation would read `true` as 1.0
    if isinstance(value, bool):
        raise ValueError("expected a number, got a boolean")
    return value


class TextCaseRules(BaseModel):
    model_config = ConfigDict(extra="forbid")

    default_upper: StrictBool = True


class RatingsRules(BaseModel):
    model_config = ConfigDict(extra="forbid")

    min_rating: float = 4

    @field_validator("min_rating", mode="before")
    @classmethod
    def min_rating_not_bool(cls, value: Any) -> Any:
        return _reject_bool(value)


class SquareRules(BaseModel):
    model_config = ConfigDict(extra="forbid")

    delay_seconds: float = Field(default=1.0, ge=0)

    @field_validator("delay_seconds", mode="before")
    @classmethod
    def delay_not_bool(cls, value: Any) -> Any:
        return _reject_bool(value)


class Rules(BaseModel):
    model_config = ConfigDict(extra="forbid")

    text_case: TextCaseRules = Field(default_factory=TextCaseRules)
    ratings: RatingsRules = Field(default_factory=RatingsRules)
    square: SquareRules = Field(default_factory=SquareRules)
