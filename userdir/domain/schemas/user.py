from userdir.domain.schemas.base import BaseEntity
from userdir.domain.schemas.base import WireModel


class UserCreate(BaseEntity):
    """Schema for creating a new user.

    Fields default to an empty string and carry no constraint: whether a value
    is acceptable is decided by the business rules, not by the schema.
    """

    name: str = ""
    email: str = ""


class UserUpdate(BaseEntity):
    """Schema for replacing the mutable fields (name and email) of a user."""

    name: str = ""
    email: str = ""


class UserPayload(WireModel):
    """The user record as both transports serialize it."""

    id: int
    name: str
    email: str
    created_at: str
    is_active: bool
