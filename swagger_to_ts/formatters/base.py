"""
Formatters pipe generated TypeScript through an external command.

A formatter is optional: when its executable is missing or exits with an
error, the unformatted code is returned and a warning is logged.
"""

from __future__ import annotations

import logging
import subprocess
from abc import ABC, abstractmethod

from ..config import FormatterConfig

logger = logging.getLogger(__name__)


class Formatter(ABC):
    """Runs `build_command(config)` with the code on stdin and reads stdout."""

    executable: str = ""
    timeout: float = 30

    def __init__(self, executable: str | None = None):
        if executable is not None:
            self.executable = executable
        self._available: bool | None = None

    @abstractmethod
    def build_command(self, config: FormatterConfig) -> list[str]:
        """Command line reading code from stdin and printing it to stdout."""

    def is_available(self) -> bool:
        # `<executable> --version` is run once per instance
        if self._available is None:
            try:
                result = subprocess.run([self.executable, "--version"], capture_output=True, text=True, timeout=10)
                self._available = result.returncode == 0
            except (subprocess.SubprocessError, OSError):
                self._available = False
            if not self._available:
                logger.debug("%s not found, output left unformatted", self.executable)
        return self._available

    def format(self, code: str, config: FormatterConfig) -> str:
        if not self.is_available():
            return code

        try:
            result = subprocess.run(
                self.build_command(config),
                input=code,
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except (subprocess.SubprocessError, OSError) as e:
            logger.warning("%s failed: %s", self.executable, e)
            return code

        if result.returncode != 0:
            logger.warning("%s exited with %d: %s", self.executable, result.returncode, result.stderr.strip())
            return code
        return result.stdout
