import pytest

from DynParamUtils.exceptions import ConfigError
from DynParamUtils.scripts import DirectoryScriptRegistry, LocalScriptExecutor, ScriptResultProvider


def test_resolve_reads_source_and_catalog(scripts_dir):
    script = DirectoryScriptRegistry(scripts_dir).resolve("numbers.py")

    assert script.id == "numbers.py"
    assert script.name == "Numbers"
    assert script.comment == "Counts up to 'count'"
    assert script.default_params() == {"count": 3}
    assert "range" in script.source


def test_scripts_without_catalog_entry_use_file_stem(scripts_dir):
    script = DirectoryScriptRegistry(scripts_dir).resolve("letters.py")
    assert script.name == "letters"
    assert script.default_params() == {}


@pytest.mark.parametrize("script_id", ["missing.py", "catalog.yaml", "../letters.py", ""])
def test_unknown_ids_resolve_to_none(scripts_dir, script_id):
    assert DirectoryScriptRegistry(scripts_dir).resolve(script_id) is None


def test_list_all(scripts_dir):
    ids = {s.id for s in DirectoryScriptRegistry(scripts_dir).list_all()}
    assert ids == {"letters.py", "numbers.py", "nothing.py", "flag.py"}


def test_list_all_on_missing_directory(tmp_path):
    assert DirectoryScriptRegistry(tmp_path / "absent").list_all() == set()


def test_invalid_catalog_raises(scripts_dir):
    (scripts_dir / "catalog.yaml").write_text("- just\n- a list\n")
    with pytest.raises(ConfigError):
        DirectoryScriptRegistry(scripts_dir).resolve("letters.py")


def test_provider_over_directory(scripts_dir):
    provider = ScriptResultProvider(DirectoryScriptRegistry(scripts_dir), LocalScriptExecutor())
    assert provider.get_result_as_list("letters.py") == ["a", "b", "c"]
    assert provider.get_result_as_list("numbers.py") == [1, 2, 3]
    assert provider.get_result_as_list("nothing.py") == []
