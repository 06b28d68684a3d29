"""
Pytest fixtures shared by the dynamic parameter tests.
"""

import pytest

from DynParamUtils.parameters import ScriptParameter, default_registry
from DynParamUtils.scripts import InMemoryScriptRegistry, Script, ScriptExecutor, ScriptResultProvider


class FakeExecutor(ScriptExecutor):
    """Returns canned results keyed by script source and records every call."""

    def __init__(self, results=None):
        self.results = dict(results or {})
        self.calls = []

    def execute(self, source, params, remote=False):
        self.calls.append((source, dict(params), remote))
        result = self.results.get(source)
        if isinstance(result, Exception):
            raise result
        if callable(result):
            return result(params)
        return result


@pytest.fixture
def executor():
    return FakeExecutor()


@pytest.fixture
def script_registry():
    return InMemoryScriptRegistry()


@pytest.fixture
def provider(script_registry, executor):
    return ScriptResultProvider(script_registry, executor)


@pytest.fixture
def add_script(script_registry, executor):
    """Register a script whose execution returns ``result``."""

    def _add(script_id, result, **kwargs):
        source = f"# {script_id}"
        script_registry.add(Script(id=script_id, name=kwargs.pop("name", script_id), source=source, **kwargs))
        executor.results[source] = result
        return source

    return _add


@pytest.fixture
def make_definition(provider):
    """Build a definition through the default descriptor registry."""
    registry = default_registry()

    def _make(type_name="choice", name="PARAM", script_id="script.py", parameters=(), **kwargs):
        fields = dict(
            name=name,
            description=kwargs.pop("description", ""),
            uuid=kwargs.pop("uuid", None),
            script_id=script_id,
            parameters=[ScriptParameter(k, v) for k, v in parameters],
            remote=kwargs.pop("remote", False),
            provider=provider,
        )
        fields.update(kwargs)
        return registry.create(type_name, **fields)

    return _make


@pytest.fixture
def scripts_dir(tmp_path):
    """A script directory with a couple of real scripts and a catalog."""
    directory = tmp_path / "scripts"
    directory.mkdir()
    (directory / "letters.py").write_text('["a", "b", "c"]\n')
    (directory / "numbers.py").write_text("result = list(range(1, count + 1))\n")
    (directory / "nothing.py").write_text("x = 1\n")
    (directory / "flag.py").write_text("enabled\n")
    (directory / "catalog.yaml").write_text(
        "numbers.py:\n"
        "  name: Numbers\n"
        "  comment: Counts up to 'count'\n"
        "  parameters:\n"
        "    count: 3\n"
    )
    return directory
