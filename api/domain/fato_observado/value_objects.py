# api/domain/fato_observado/value_objects.py
from __future__ import annotations

import re
from dataclasses import dataclass

ASSUNTO_PADRAO = "Geral"

# "[Assunto] resto". DOTALL para que relatos com quebra de linha facam round-trip.
_PADRAO_ASSUNTO = re.compile(r"^\[(.*?)\]\s?(.*)$", re.DOTALL)


@dataclass(frozen=True)
class DescricaoComAssunto:
    """Relato do fato com a tag de assunto embutida no campo descricao."""

    assunto: str
    texto: str

    @classmethod
    def decodificar(cls, bruta: str) -> DescricaoComAssunto:
        """Sem tag no inicio -> assunto Geral e texto intacto."""
        match = _PADRAO_ASSUNTO.match(bruta)
        if match is None:
            return cls(assunto=ASSUNTO_PADRAO, texto=bruta)
        return cls(assunto=match.group(1), texto=match.group(2))

    @property
    def codificada(self) -> str:
        """Formato persistido: "[assunto] texto"."""
        return f"[{self.assunto}] {self.texto}"
