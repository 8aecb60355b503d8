"""Runs the Gemini command-line client as a child process."""

from __future__ import annotations

import logging
import re
import subprocess
import sys
import threading
import time

logger = logging.getLogger(__name__)

_READY_PATTERNS = ("> ", "? ", "Enter ", "Continue", "gemini>")
_CONFIRMATION = re.compile(r"\[y/N\]|Do you want to continue\?|Continue\?")
_DEFAULT_TIMEOUT = 120.0


class ProcessManagerError(Exception):
    """The Gemini client could not be run or reported a failure."""


def is_prompt_ready(output: str) -> bool:
    """Tell whether a line of output shows the client waiting for input."""
    return any(pattern in output for pattern in _READY_PATTERNS)


def is_confirmation_prompt(output: str) -> bool:
    """Tell whether a line of output asks for a yes/no confirmation."""
    return _CONFIRMATION.search(output) is not None


def build_command(platform: str | None = None) -> list[str]:
    """Return the argument list that starts the client on the given platform."""
    platform = sys.platform if platform is None else platform
    base = ["npx", "@google/gemini-cli", "--yolo"]
    if platform.startswith("win"):
        return ["cmd", "/C", *base]
    return base


class GeminiProcessManager:
    """Sends prompts to the Gemini client, one process per command."""

    def __init__(self, timeout: float = _DEFAULT_TIMEOUT) -> None:
        self.timeout = timeout
        self._lock = threading.Lock()
        self._process: subprocess.Popen | None = None
        self._ready = threading.Event()
        self._output: list[str] = []
        # Each command starts its own process, so the manager is always ready.
        self._ready.set()
        logger.info("Gemini CLI configurado en modo no interactivo")

    @property
    def output(self) -> str:
        """All output seen so far, one line per entry."""
        return "".join(f"{line}\n" for line in self._output)

    def wait_for_ready(self, timeout: float) -> None:
        """Block until the client is ready, raising on timeout."""
        deadline = time.monotonic() + timeout
        while time.monotonic() < deadline:
            if self._ready.is_set():
                return
            time.sleep(0.1)
        if not self._ready.is_set():
            raise ProcessManagerError("Timeout esperando a que Gemini CLI esté listo")

    def _record_output(self, text: str) -> None:
        for line in text.splitlines():
            logger.debug("[GEMINI_OUTPUT]: %s", line)
            self._output.append(line)
            if is_prompt_ready(line):
                self._ready.set()
            if is_confirmation_prompt(line):
                logger.info("Detectada confirmación en la salida de Gemini CLI")

    def execute_command(self, command: str) -> str:
        """Feed a prompt to the client on stdin and return its trimmed stdout."""
        logger.info("Ejecutando comando en Gemini CLI: %s...", command[:50])
        try:
            process = subprocess.Popen(
                build_command(),
                stdin=subprocess.PIPE,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
            )
        except OSError as exc:
            raise ProcessManagerError(
                f"Error ejecutando Gemini CLI: {exc}. Asegúrate de tener Node.js instalado."
            ) from exc

        with self._lock:
            self._process = process
        try:
            stdout, stderr = process.communicate(command.encode("utf-8"), timeout=self.timeout)
        except subprocess.TimeoutExpired as exc:
            process.kill()
            process.communicate()
            logger.error("Timeout ejecutando comando")
            raise ProcessManagerError("Timeout ejecutando comando en Gemini CLI") from exc
        except OSError as exc:
            process.kill()
            raise ProcessManagerError(
                f"Fallo al escribir a stdin de Gemini CLI: {exc}"
            ) from exc
        finally:
            with self._lock:
                self._process = None

        text = stdout.decode("utf-8", errors="replace")
        if process.returncode != 0:
            message = f"Gemini CLI falló: {stderr.decode('utf-8', errors='replace')}"
            logger.error(message)
            raise ProcessManagerError(message)

        self._record_output(text)
        result = text.strip()
        logger.debug("Respuesta de Gemini CLI (%d chars): %s...", len(result), result[:100])
        return result

    def kill(self) -> None:
        """Terminate the running client process, if any."""
        with self._lock:
            process, self._process = self._process, None
        if process is not None and process.poll() is None:
            process.kill()
            process.wait()
        logger.info("Proceso Gemini CLI terminado")

    def __enter__(self) -> GeminiProcessManager:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.kill()