from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class User:
    id: int
    name: str
    email: str

    # Formatted as "YYYY-MM-DD HH:MM:SS", fixed at creation.
    created_at: str

    is_active: bool = True
