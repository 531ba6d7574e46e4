"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class InvalidInputError(DomainError):
    """Malformed or out-of-range input rejected at the service boundary."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class PersistenceError(RuntimeError):
    """Storage could not be read or written, or holds corrupted data."""


def goal_not_found(goal_id: int) -> str:
    """Return message for missing goal."""
    return f"Goal {goal_id} not found"


def unknown_category(category: str, kind: str, allowed: tuple[str, ...]) -> str:
    """Return message for a category outside the fixed list of its kind."""
    return (
        f"Unknown {kind} category '{category}'. "
        f"Choose one of: {', '.join(allowed)}"
    )


def unsupported_schema_version(found: int, supported: int) -> str:
    """Return message when stored data is newer than this release understands."""
    return (
        f"Stored data uses schema version {found}, "
        f"but this version of fintrack only supports up to {supported}"
    )
