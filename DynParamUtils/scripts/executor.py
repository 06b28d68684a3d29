"""Local script executor.

Scripts are Python source executed with their named parameters bound as
globals. The script's value is its trailing expression statement if it has
one, otherwise the global ``result``, otherwise None::

    import subprocess
    out = subprocess.check_output(["git", "ls-remote", "--heads", repo], text=True)
    [line.rsplit("/", 1)[-1] for line in out.splitlines()]

Remote execution hands the script to a separate worker interpreter
(``python -m DynParamUtils.scripts.worker``) and exchanges JSON with it, so
remote results are whatever JSON decodes to.
"""

from __future__ import annotations

import ast
import json
import logging
import subprocess
import sys
from typing import Any, Dict, Mapping, Optional, Sequence

from ..exceptions import ScriptExecutionError
from .base import ScriptExecutor

logger = logging.getLogger(__name__)

WORKER_MODULE = "DynParamUtils.scripts.worker"


def run_source(source: str, params: Mapping[str, Any], filename: str = "<script>") -> Any:
    """Execute ``source`` in a fresh namespace and return its value."""
    try:
        tree = ast.parse(source, filename=filename, mode="exec")
    except SyntaxError as exc:
        raise ScriptExecutionError(f"Syntax error in {filename}: {exc}") from exc

    tail = None
    if tree.body and isinstance(tree.body[-1], ast.Expr):
        tail = ast.Expression(body=tree.body.pop().value)

    namespace: Dict[str, Any] = {"__name__": "__script__"}
    namespace.update(params)
    try:
        exec(compile(tree, filename, "exec"), namespace)
        if tail is not None:
            return eval(compile(tail, filename, "eval"), namespace)
    except (Exception, SystemExit) as exc:
        raise ScriptExecutionError(f"Script {filename} failed: {exc!r}") from exc
    return namespace.get("result")


class LocalScriptExecutor(ScriptExecutor):
    """Run scripts in-process, or in a worker interpreter when remote."""

    def __init__(self, python: Optional[str] = None, worker_args: Sequence[str] = ()):
        self.python = python or sys.executable
        self.worker_args = list(worker_args)

    def execute(self, source: str, params: Mapping[str, Any], remote: bool = False) -> Any:
        if remote:
            return self._execute_remote(source, params)
        logger.debug("Executing script in-process with params %s", sorted(params))
        return run_source(source, params)

    def _execute_remote(self, source: str, params: Mapping[str, Any]) -> Any:
        try:
            payload = json.dumps({"source": source, "params": dict(params)})
        except (TypeError, ValueError) as exc:
            raise ScriptExecutionError(f"Script parameters are not serializable: {exc}") from exc

        command = [self.python, *self.worker_args, "-m", WORKER_MODULE]
        logger.debug("Dispatching script to worker: %s", " ".join(command))
        try:
            proc = subprocess.run(command, input=payload, capture_output=True, text=True)
        except OSError as exc:
            raise ScriptExecutionError(f"Failed to start worker {self.python}: {exc}") from exc

        try:
            response = json.loads(proc.stdout)
        except ValueError:
            detail = proc.stderr.strip() or proc.stdout.strip() or f"exit code {proc.returncode}"
            raise ScriptExecutionError(f"Worker returned no result: {detail}") from None

        if not isinstance(response, dict):
            raise ScriptExecutionError(f"Unexpected worker response: {response!r}")
        if "error" in response:
            raise ScriptExecutionError(response["error"])
        return response.get("result")
