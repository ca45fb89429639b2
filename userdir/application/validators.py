from userdir.domain.exceptions import UserValidationError


def ensure_user_fields(name: str, email: str) -> None:
    """Rejects empty or whitespace-only required fields.

    This is the only place where user input is judged: every transport goes
    through it, so REST and RPC reject exactly the same inputs.

    Raises:
        UserValidationError: Listing every offending field.
    """
    missing = [field for field, value in (("name", name), ("email", email)) if not value or not value.strip()]
    if missing:
        raise UserValidationError(fields=missing)
