"""Base model for all jpackwrap Pydantic models."""

from pydantic import BaseModel, ConfigDict


class JPackWrapBaseModel(BaseModel):
    """Base model class for all jpackwrap Pydantic models."""

    model_config = ConfigDict(
        # Strip whitespace from string fields
        str_strip_whitespace=True,
        # Use enum values in serialization
        use_enum_values=True,
        # Validate assignment after model creation
        validate_assignment=True,
    )
