"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


def transaction_not_found(transaction_id: int) -> str:
    """Return message for missing transaction."""
    return f"Transaction {transaction_id} not found"


def category_not_found(name: str, category_type: str) -> str:
    """Return message for missing category by name and type."""
    return f"{category_type.capitalize()} category '{name}' not found"


def duplicate_category(name: str, category_type: str) -> str:
    """Return message for a category name already used within its type."""
    return f"{category_type.capitalize()} category '{name}' already exists"


def savings_entry_not_found(entry_id: int) -> str:
    """Return message for missing savings contribution or withdrawal."""
    return f"Savings entry {entry_id} not found"


def scheduled_action_not_found(action_id: int) -> str:
    """Return message for missing scheduled action."""
    return f"Scheduled action {action_id} not found"


def invalid_amount(field: str, value: object) -> str:
    """Return message for an amount that is not a positive number."""
    return f"{field} must be a positive number, got {value!r}"


def insufficient_savings(requested: object, available: object) -> str:
    """Return message when a withdrawal exceeds accumulated savings."""
    return (
        f"Cannot withdraw {requested}: only {available} available in savings"
    )
