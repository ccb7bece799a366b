from pydantic import BaseModel, ConfigDict


class ValueObject(BaseModel):
    """Immutable pydantic model; equality is by value."""

    model_config = ConfigDict(frozen=True)
