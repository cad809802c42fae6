from __future__ import annotations

import logging
import sys
from typing import Protocol, TextIO


logger = logging.getLogger(__name__)

LOG_PREFIX = "[Transaction Log] "


class Listener(Protocol):
    def update(self, message: str) -> None:
        ...


class TransactionLogger:
    """
    Listener concret : écrit chaque message sur un flux texte et le garde en mémoire.
    Aucun mode d'échec.
    """

    def __init__(self, *, stream: TextIO | None = None) -> None:
        self._stream = stream
        self.messages: list[str] = []

    def update(self, message: str) -> None:
        self.messages.append(message)
        # sys.stdout résolu à l'appel (capsys / redirections)
        stream = self._stream if self._stream is not None else sys.stdout
        print(f"{LOG_PREFIX}{message}", file=stream)
        logger.info("transaction log: %s", message)
