# api/interfaces/api/dependencies.py
from datetime import UTC, datetime


def get_agora() -> datetime:
    """Relogio do imperative shell. Testes sobrescrevem via dependency_overrides."""
    return datetime.now(tz=UTC)
