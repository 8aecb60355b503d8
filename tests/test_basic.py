from pathlib import Path

import pytest

from enjambre.commands import basic
from enjambre.commands.basic import SystemComponent


def test_show_config(capsys):
    basic.show_config()
    out = capsys.readouterr().out
    assert "Current configuration:" in out
    assert "MAX_CONCURRENT_TASKS: 4" in out


def test_set_and_get_config(capsys):
    basic.set_config("theme", "dark")
    basic.get_config("theme")
    out = capsys.readouterr().out
    assert "Set theme = dark" in out
    assert "Config value for 'theme': [VALUE]" in out


def test_reset_and_validate(capsys):
    basic.reset_config(True)
    basic.validate_config()
    out = capsys.readouterr().out
    assert "Configuration reset to defaults" in out
    assert "Configuration is valid" in out


def test_memory_stats(capsys):
    basic.memory_stats()
    out = capsys.readouterr().out
    assert "Memory system operational" in out
    assert "Last sync: Never" in out


def test_memory_store_and_query(capsys):
    basic.memory_store("k1", "v1", "proj")
    basic.memory_query("k1")
    out = capsys.readouterr().out
    assert "Stored 'k1' in namespace 'proj'" in out
    assert "Searching for 'k1' in namespace 'default'" in out
    assert "No results found" in out


def test_memory_export_import_paths(capsys, tmp_path):
    target = tmp_path / "dump.json"
    basic.memory_export(target, "ns")
    basic.memory_import(str(target), "ns")
    out = capsys.readouterr().out
    assert f"Exported namespace 'ns' to {target}" in out
    assert f"Imported {target} to namespace 'ns'" in out


def test_memory_backup_default_and_explicit(capsys, tmp_path):
    basic.memory_backup()
    basic.memory_backup(tmp_path / "b.json")
    basic.memory_restore(Path("b.json"))
    out = capsys.readouterr().out
    assert "Created backup: enjambre_backup.json" in out
    assert f"Created backup: {tmp_path / 'b.json'}" in out
    assert "Restored from backup: b.json" in out


def test_performance_messages(capsys):
    basic.performance_report("json", None)
    basic.performance_bottleneck(True)
    basic.performance_tokens()
    basic.performance_benchmark("full")
    out = capsys.readouterr().out
    assert "Performance report generated" in out
    assert "Bottleneck analysis completed" in out
    assert "1,234 tokens" in out
    assert "87.3% performance score" in out


@pytest.mark.parametrize(
    "component, message",
    [
        (SystemComponent.MEMORY, "Memory system test passed"),
        (SystemComponent.NEURAL, "Neural models test passed"),
        ("gemini", "Gemini CLI integration test passed"),
        ("tools", "Tools system test passed"),
    ],
)
def test_run_system_test(capsys, component, message):
    basic.run_system_test(component)
    assert message in capsys.readouterr().out


def test_run_system_test_default_is_all(capsys):
    basic.run_system_test()
    assert "All system tests passed" in capsys.readouterr().out


def test_run_system_test_unknown_component():
    with pytest.raises(ValueError):
        basic.run_system_test("network")


def test_workflows(capsys, tmp_path):
    basic.workflow_create("build", True, None)
    basic.workflow_execute("build", "{}")
    basic.workflow_list()
    basic.workflow_export("build", tmp_path / "wf.json")
    out = capsys.readouterr().out
    assert "Workflow 'build' created" in out
    assert "Workflow 'build' executed" in out
    assert "No workflows found" in out
    assert f"Workflow 'build' exported to {tmp_path / 'wf.json'}" in out


def test_wizard(capsys):
    basic.run_interactive_wizard()
    out = capsys.readouterr().out
    assert "ENJAMBRE INTERACTIVE WIZARD" in out
    assert "Interactive API key setup" in out
    assert "enjambre init --force" in out