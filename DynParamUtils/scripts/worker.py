"""Worker entry point for remote script execution.

Reads ``{"source": ..., "params": {...}}`` as JSON from stdin and writes
``{"result": ...}`` or ``{"error": ...}`` as JSON to stdout.
"""

from __future__ import annotations

import json
import os
import sys
from contextlib import redirect_stdout

from ..exceptions import ScriptExecutionError
from .executor import run_source


def _to_json(value):
    if isinstance(value, (set, frozenset)):
        return list(value)
    try:
        return list(iter(value))
    except TypeError:
        return str(value)


def main(stdin=None, stdout=None) -> int:
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    try:
        request = json.load(stdin)
        # stdout carries only the JSON response; script output goes to stderr
        with redirect_stdout(sys.stderr):
            result = run_source(request["source"], request.get("params") or {}, filename="<remote>")
        stdout.write(json.dumps({"result": result}, default=_to_json))
        return 0
    except ScriptExecutionError as exc:
        stdout.write(json.dumps({"error": str(exc)}))
        return 1
    except (ValueError, KeyError, TypeError) as exc:
        stdout.write(json.dumps({"error": f"Invalid worker request: {exc}"}))
        return 1


def run_as_process() -> int:
    """Run with descriptor 1 pointed at stderr so child processes cannot
    write into the JSON response."""
    response = os.fdopen(os.dup(1), "w")
    os.dup2(2, 1)
    try:
        return main(stdout=response)
    finally:
        response.flush()


if __name__ == "__main__":
    sys.exit(run_as_process())
