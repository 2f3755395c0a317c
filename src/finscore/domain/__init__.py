"""Domain layer for finscore."""

__all__ = [
    "CategoryService",
    "InsightsService",
    "SavingsService",
    "ScheduledActionService",
    "SummaryService",
    "TransactionService",
]

_SERVICES = {
    "CategoryService": "finscore.domain.category",
    "InsightsService": "finscore.domain.insights",
    "SavingsService": "finscore.domain.savings",
    "ScheduledActionService": "finscore.domain.scheduled",
    "SummaryService": "finscore.domain.summary",
    "TransactionService": "finscore.domain.transaction",
}


# Import services lazily so the database layer can import domain entities
# without pulling in the services that depend on it
def __getattr__(name):
    if name in _SERVICES:
        import importlib

        return getattr(importlib.import_module(_SERVICES[name]), name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
