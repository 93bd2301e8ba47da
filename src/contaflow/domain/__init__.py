"""Domain layer for contaflow application."""

_SERVICES = {
    "ClientService": "contaflow.domain.client",
    "StatementService": "contaflow.domain.statement",
    "PeriodReplacer": "contaflow.domain.period_replacer",
    "IngestionService": "contaflow.domain.ingestion",
}

__all__ = list(_SERVICES)


# Services are imported lazily; they depend on the database layer, which in
# turn imports domain.entities.
def __getattr__(name):
    if name in _SERVICES:
        import importlib

        return getattr(importlib.import_module(_SERVICES[name]), name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
