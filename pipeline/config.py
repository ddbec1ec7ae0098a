# pipeline/config.py
#
# Batch report configuration loaded from environment variables.
#
# Design decisions:
#   - Uses a frozen dataclass (not pydantic Settings) because the pipeline is a
#     standalone offline process and pydantic is reserved for the API layer.
#   - Input tables are read from a single data directory, one file per table
#     (alunos, fatos), in either Parquet or CSV. The format is global rather
#     than per-table because exports from the school system are homogeneous.
#   - Nothing here points to an output location: the batch computes scores and
#     reports in memory and hands them back to the caller.
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

_PIPELINE_DIR = Path(__file__).parent

FORMATOS_SUPORTADOS: tuple[str, ...] = ("parquet", "csv")


@dataclass(frozen=True)
class PipelineConfig:
    """Immutable batch configuration.

    Invariants:
      - formato is one of FORMATOS_SUPORTADOS (enforced by load_config).
      - top_categorias is a positive integer.
    """

    data_dir: Path
    formato: str = "parquet"
    top_categorias: int = 4

    @property
    def alunos_path(self) -> Path:
        return self.data_dir / f"alunos.{self.formato}"

    @property
    def fatos_path(self) -> Path:
        return self.data_dir / f"fatos.{self.formato}"


def load_config() -> PipelineConfig:
    """Build PipelineConfig from environment variables.

    Raises:
        ValueError: if PIPELINE_FORMATO is not a supported format or
            PIPELINE_TOP_CATEGORIAS is not a positive integer.
    """
    formato = os.environ.get("PIPELINE_FORMATO", "parquet").strip().lower()
    if formato not in FORMATOS_SUPORTADOS:
        raise ValueError(
            f"PIPELINE_FORMATO={formato!r} not supported. "
            f"Use one of: {', '.join(FORMATOS_SUPORTADOS)}."
        )

    top = int(os.environ.get("PIPELINE_TOP_CATEGORIAS", "4"))
    if top < 1:
        raise ValueError("PIPELINE_TOP_CATEGORIAS must be >= 1")

    data_dir = Path(os.environ.get("PIPELINE_DATA_DIR", str(_PIPELINE_DIR / "data")))
    return PipelineConfig(data_dir=data_dir, formato=formato, top_categorias=top)
