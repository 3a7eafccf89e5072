from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

class CamelModel(BaseModel):
    """Base for API bodies: camelCase on the wire, snake_case in Python."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

class Message(BaseModel):
    message: str

def reject_null(value):
    """Partial updates may omit a field but not null out a required column."""
    if value is None:
        raise ValueError("Field cannot be null")
    return value
