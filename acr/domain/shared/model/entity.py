from pydantic import BaseModel, ConfigDict


class Entity(BaseModel):
    """Mutable domain object identified by a key rather than by its values."""

    model_config = ConfigDict(validate_assignment=True)
