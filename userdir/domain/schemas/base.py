from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic.alias_generators import to_camel


class BaseEntity(BaseModel):
    model_config = ConfigDict(from_attributes=True)


class WireModel(BaseModel):
    """Base of every payload crossing a wire: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )
