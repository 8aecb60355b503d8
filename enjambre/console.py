"""Terminal styling and the standard banner, help and status lines."""

from __future__ import annotations

_RESET = "\x1b[0m"
_BOLD = "1"

_BASE_COLORS = {
    "black": 30,
    "red": 31,
    "green": 32,
    "yellow": 33,
    "blue": 34,
    "magenta": 35,
    "cyan": 36,
    "white": 37,
}

_COLOR_CODES = {
    **{name: str(code) for name, code in _BASE_COLORS.items()},
    **{f"bright_{name}": str(code + 60) for name, code in _BASE_COLORS.items()},
}

_BANNER_LINES = (
    "╔══════════════════════════════════════════════════════════════════╗",
    "║           🌊 ENJAMBRE v2.0.0 Alpha - Gemini CLI Orchestration    ║",
    "║        🐝 Hive-Mind • 🧠 Neural • 🔧 87+ Tools • ⚡ SAFLA       ║",
    "╚══════════════════════════════════════════════════════════════════╝",
)

_QUICK_COMMANDS = (
    ("enjambre init --force", "Initialize with enhanced setup"),
    ("enjambre hive-mind wizard", "Launch interactive wizard"),
    ('enjambre swarm "task" --gemini', "Execute task with Gemini"),
    ("enjambre memory stats", "Check memory usage"),
    ("enjambre neural list", "List neural models"),
    ("enjambre tools list", "Show available tools"),
)


def style(text: str, color: str | None = None, bold: bool = False) -> str:
    """Wrap text in ANSI escape codes for the given colour and weight."""
    codes = []
    if bold:
        codes.append(_BOLD)
    if color is not None:
        try:
            codes.append(_COLOR_CODES[color])
        except KeyError:
            raise ValueError(f"unknown colour: {color}") from None
    if not codes:
        return text
    return f"\x1b[{';'.join(codes)}m{text}{_RESET}"


def print_success(message: str) -> None:
    print(f"{style('✅', 'bright_green')} {message}")


def print_info(message: str) -> None:
    print(f"{style('ℹ️ ', 'bright_blue')} {message}")


def print_error(message: str) -> None:
    print(f"{style('❌', 'bright_red')} {style(message, 'red')}")


def print_banner() -> None:
    """Print the welcome banner."""
    for line in _BANNER_LINES:
        print(style(line, "cyan"))
    print()


def print_quick_help() -> None:
    """Print the short list of commands to get started."""
    print(style("🚀 Quick Start Commands:", "bright_green", bold=True))
    for command, description in _QUICK_COMMANDS:
        print(f"  {style(command, 'bright_blue')} {description}")
    print()
    print(style("For detailed help: enjambre --help", "bright_yellow"))