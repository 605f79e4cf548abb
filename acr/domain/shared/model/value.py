from pydantic import BaseModel, ConfigDict


class ValueObject(BaseModel):
    """Immutable model compared by value."""

    model_config = ConfigDict(frozen=True)
