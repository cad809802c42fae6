from __future__ import annotations

import logging
import sys
from typing import Sequence, TextIO

from bankdemo.services.session_service import PROMPTS, AmountSource, PresetAmounts, run_session
from bankdemo.settings import get_settings


class PromptedAmounts:
    """Invite puis lit une ligne, seulement quand la session en a besoin."""

    def __init__(self, *, stdin: TextIO, stdout: TextIO) -> None:
        self._stdin = stdin
        self._stdout = stdout

    def read(self, field: str, prompt: str) -> str:
        print(prompt, end="", file=self._stdout)
        self._stdout.flush()
        line = self._stdin.readline()
        if line == "":
            raise EOFError(f"No input for {field}")
        return line.strip()


def main(
    argv: Sequence[str] | None = None,
    *,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    stderr = sys.stderr if stderr is None else stderr
    args = list(sys.argv[1:] if argv is None else argv)

    try:
        settings = get_settings()
    except ValueError as e:
        print(f"Error: {e}", file=stderr)
        return 1

    logging.basicConfig(level=settings.log_level)

    source: AmountSource
    if len(args) == len(PROMPTS):
        source = PresetAmounts(dict(zip(PROMPTS, args)))
    elif args:
        print(f"Error: expected {len(PROMPTS)} amounts, got {len(args)}", file=stderr)
        return 1
    else:
        source = PromptedAmounts(stdin=stdin, stdout=stdout)

    outcome = run_session(source, settings=settings, out=stdout)
    if outcome.ok:
        return 0
    if outcome.error_kind is not None:
        print(f"Transaction Error: {outcome.message}", file=stderr)
    else:
        print(f"Error: {outcome.message}", file=stderr)
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
