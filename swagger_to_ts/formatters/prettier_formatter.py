"""
Prettier formatter for TypeScript code.
"""

from __future__ import annotations

from ..config import FormatterConfig
from .base import Formatter


class PrettierFormatter(Formatter):
    """Formatter using prettier for TypeScript code."""

    executable = "prettier"

    def build_command(self, config: FormatterConfig) -> list[str]:
        # The virtual file name selects prettier's TypeScript parser
        cmd = [
            self.executable,
            "--stdin-filepath",
            "code.ts",
            "--print-width",
            str(config.print_width),
            "--tab-width",
            str(config.tab_width),
        ]
        if config.single_quote:
            cmd.append("--single-quote")
        return cmd


def format_with_prettier(code: str, print_width: int = 100) -> str:
    """
    Convenience function to format TypeScript code with prettier.

    Args:
        code: TypeScript source code
        print_width: Maximum line width

    Returns:
        Formatted code (or original if prettier is not available)
    """
    return PrettierFormatter().format(code, FormatterConfig(enabled=True, print_width=print_width))
