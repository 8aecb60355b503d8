import subprocess
from unittest import mock

import pytest

from enjambre.process_manager import (
    GeminiProcessManager,
    ProcessManagerError,
    build_command,
    is_confirmation_prompt,
    is_prompt_ready,
)


def _fake_process(stdout=b"", stderr=b"", returncode=0, side_effect=None):
    process = mock.Mock()
    process.returncode = returncode
    if side_effect is not None:
        process.communicate.side_effect = side_effect
    else:
        process.communicate.return_value = (stdout, stderr)
    process.poll.return_value = None
    return process


def test_prompt_detection():
    assert is_prompt_ready("> Enter your prompt")
    assert is_prompt_ready("? What would you like to do")
    assert not is_prompt_ready("Processing your request...")


def test_confirmation_detection():
    assert is_confirmation_prompt("Do you want to continue? [y/N]")
    assert is_confirmation_prompt("Continue? [y/N]")
    assert not is_confirmation_prompt("Normal output")


def test_build_command_unix():
    assert build_command("linux") == ["npx", "@google/gemini-cli", "--yolo"]


def test_build_command_windows_goes_through_cmd():
    assert build_command("win32") == ["cmd", "/C", "npx", "@google/gemini-cli", "--yolo"]


def test_wait_for_ready_returns_immediately():
    manager = GeminiProcessManager()
    manager.wait_for_ready(0.5)
    assert manager.timeout == 120.0


def test_execute_command_returns_trimmed_stdout():
    process = _fake_process(stdout=b"  fn main() {}\n\n")
    with mock.patch("enjambre.process_manager.subprocess.Popen", return_value=process) as popen:
        result = GeminiProcessManager().execute_command("write main")
    assert result == "fn main() {}"
    process.communicate.assert_called_once_with(b"write main", timeout=120.0)
    assert popen.call_args.args[0][-2:] == ["@google/gemini-cli", "--yolo"]


def test_execute_command_records_output():
    process = _fake_process(stdout=b"line one\ngemini> \n")
    with mock.patch("enjambre.process_manager.subprocess.Popen", return_value=process):
        manager = GeminiProcessManager()
        manager.execute_command("hola")
    assert manager.output == "line one\ngemini> \n"


def test_execute_command_failure_reports_stderr():
    process = _fake_process(stderr=b"bad auth", returncode=1)
    with mock.patch("enjambre.process_manager.subprocess.Popen", return_value=process):
        with pytest.raises(ProcessManagerError, match="Gemini CLI falló: bad auth"):
            GeminiProcessManager().execute_command("x")


def test_execute_command_missing_executable():
    with mock.patch(
        "enjambre.process_manager.subprocess.Popen", side_effect=FileNotFoundError("npx")
    ):
        with pytest.raises(ProcessManagerError, match="Node.js"):
            GeminiProcessManager().execute_command("x")


def test_execute_command_timeout_kills_process():
    process = _fake_process(
        side_effect=[subprocess.TimeoutExpired("npx", 1), (b"", b"")]
    )
    with mock.patch("enjambre.process_manager.subprocess.Popen", return_value=process):
        with pytest.raises(ProcessManagerError, match="Timeout ejecutando comando"):
            GeminiProcessManager(timeout=1).execute_command("x")
    process.kill.assert_called_once()


def test_context_manager_returns_manager_and_kill_is_safe():
    with GeminiProcessManager(timeout=5) as manager:
        assert manager.timeout == 5
    manager.kill()
    assert manager.output == ""