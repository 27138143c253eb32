# crm/infrastructure/log.py
#
# Shared logger for the store boundary and the summarization gateway.
#
# Design decisions:
#   - One log() function, one prefix: "[crm mm:ss] NIVEL mensagem", where
#     mm:ss is the elapsed time since the process started serving.
#   - INFO goes to stdout; AVISO and ERRO go to stderr.
#   - Flush after every line; writes happen from the single event-loop thread.
from __future__ import annotations

import sys
import time
from typing import Literal

Nivel = Literal["INFO", "AVISO", "ERRO"]

_start = time.monotonic()


def log(message: str, nivel: Nivel = "INFO") -> None:
    elapsed = time.monotonic() - _start
    minutes, seconds = divmod(int(elapsed), 60)
    stream = sys.stdout if nivel == "INFO" else sys.stderr
    stream.write(f"[crm {minutes:02d}:{seconds:02d}] {nivel} {message}\n")
    stream.flush()
