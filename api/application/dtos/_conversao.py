# api/application/dtos/_conversao.py
from __future__ import annotations

from datetime import UTC, datetime
from decimal import Decimal


def como_utc(instante: datetime) -> datetime:
    """Fronteira da API: datetime sem fuso e interpretado como UTC."""
    if instante.tzinfo is None:
        return instante.replace(tzinfo=UTC)
    return instante


def duas_casas(valor: Decimal) -> float:
    return round(float(valor), 2)
