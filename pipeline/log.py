# pipeline/log.py
#
# Shared batch logger with elapsed time.
#
# Design decisions:
#   - Single log() function used by every pipeline module; no logging config
#     to set up because the batch is a short-lived process, not a service.
#   - Elapsed time since import is shown so the operator can see how long each
#     phase takes on large rosters.
#   - Plain stdout with flush for immediate visibility under cron or docker.
from __future__ import annotations

import sys
import time

_inicio = time.monotonic()


def log(message: str) -> None:
    """Write a line prefixed with the elapsed mm:ss to stdout."""
    minutos, segundos = divmod(int(time.monotonic() - _inicio), 60)
    sys.stdout.write(f"[relatorio {minutos:02d}:{segundos:02d}] {message}\n")
    sys.stdout.flush()
