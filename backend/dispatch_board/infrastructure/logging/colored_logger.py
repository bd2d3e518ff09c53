"""Colored step logger for one-shot operator scripts.

Color scheme:
    Cyan    - reading local input
    Yellow  - calling the database
    Green   - done
    Red     - errors
    Gray    - advice / details
"""

import logging
from typing import Any


class _Colors:
    """ANSI escape codes for terminal colors."""

    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    CYAN = "\033[96m"
    GRAY = "\033[90m"


class Stage:
    """Predefined script stages: (label, color)."""

    READ = ("READ", _Colors.CYAN)
    EXECUTE = ("EXECUTE", _Colors.YELLOW)
    COMPLETE = ("COMPLETE", _Colors.GREEN)
    ERROR = ("ERROR", _Colors.RED)


class StepLogger:
    """Color-coded logger for script steps.

    Usage:
        log = StepLogger("SeedScript")
        log.step(Stage.READ, "Reading mock data file...", path="mock_data.sql")
        log.error(Stage.EXECUTE, "RPC failed", error=exc)
        log.advice("Run the SQL manually.")
    """

    def __init__(self, component_name: str):
        self._logger = logging.getLogger(component_name)

    @staticmethod
    def _details(kwargs: dict[str, Any]) -> str:
        if not kwargs:
            return ""
        details = " | ".join(f"{k}={v}" for k, v in kwargs.items())
        return f" {_Colors.GRAY}({details}){_Colors.RESET}"

    def step(self, stage: tuple[str, str], message: str, **kwargs: Any) -> None:
        label, color = stage
        self._logger.info(
            f"{color}{_Colors.BOLD}[{label}]{_Colors.RESET} {color}{message}{_Colors.RESET}"
            + self._details(kwargs)
        )

    def error(self, stage: tuple[str, str], message: str, error: Exception | None = None) -> None:
        label, _ = stage
        formatted = (
            f"{_Colors.RED}{_Colors.BOLD}[{label}]{_Colors.RESET} "
            f"{_Colors.RED}{message}{_Colors.RESET}"
        )
        if error:
            formatted += f" {_Colors.DIM}-> {type(error).__name__}: {error}{_Colors.RESET}"
        self._logger.error(formatted)

    def advice(self, message: str) -> None:
        self._logger.info(f"   {_Colors.GRAY}{message}{_Colors.RESET}")
