from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Callable, Optional, Tuple

from validators import validate_mandatory, validate_yes_no, validate_index
from logger import log

Validator = Callable[[str], Tuple[bool, str]]
Ask = Callable[[str], str]


class OperatorAbort(Exception):
    """The operator cancelled a prompt."""


class RetryLimitExceeded(Exception):
    def __init__(self, prompt: str, attempts: int):
        super().__init__(f"No valid answer to '{prompt}' after {attempts} attempts")
        self.prompt = prompt
        self.attempts = attempts


class Operator(ABC):
    """The person at the console: answers prompts and reads messages."""

    @abstractmethod
    def ask(self, prompt: str) -> str:
        """Return the operator's answer. Raises OperatorAbort on cancel."""

    @abstractmethod
    def notify(self, level: str, message: str) -> None:
        """Show a message. level is one of info/success/warning/error."""

    def info(self, message: str) -> None:
        log.info(message)
        self.notify("info", message)

    def success(self, message: str) -> None:
        log.info(message)
        self.notify("success", message)

    def warn(self, message: str) -> None:
        log.warning(message)
        self.notify("warning", message)

    def error(self, message: str) -> None:
        log.error(message)
        self.notify("error", message)

    def reject(self, message: str) -> None:
        """An answer failed validation; the same prompt is about to repeat."""
        self.warn(message)


def prompt_until_valid(
    ask: Ask,
    prompt: str,
    validate: Validator,
    *,
    max_attempts: Optional[int] = None,
    on_invalid: Optional[Callable[[str], None]] = None,
) -> str:
    """
    Ask until validate() accepts the answer, which is returned unchanged.
    max_attempts=None re-prompts forever; otherwise RetryLimitExceeded is
    raised once that many answers were rejected.
    """
    attempts = 0
    while True:
        value = ask(prompt)
        attempts += 1
        ok, msg = validate(value)
        if ok:
            return value
        log.debug("Rejected answer to %r: %s", prompt, msg)
        if on_invalid:
            on_invalid(msg)
        if max_attempts is not None and attempts >= max_attempts:
            raise RetryLimitExceeded(prompt, attempts)


def read_mandatory(ask: Ask, prompt: str, max_attempts: Optional[int] = None) -> str:
    return prompt_until_valid(ask, prompt, validate_mandatory, max_attempts=max_attempts)


def confirm(
    ask: Ask,
    prompt: str,
    *,
    max_attempts: Optional[int] = None,
    on_invalid: Optional[Callable[[str], None]] = None,
) -> bool:
    answer = prompt_until_valid(
        ask, prompt, validate_yes_no,
        max_attempts=max_attempts, on_invalid=on_invalid,
    )
    return answer.strip().lower() in ("y", "yes")


def choose_index(
    ask: Ask,
    prompt: str,
    count: int,
    *,
    max_attempts: Optional[int] = None,
    on_invalid: Optional[Callable[[str], None]] = None,
) -> int:
    """Read a 1-based selection and return it as a 0-based position."""
    answer = prompt_until_valid(
        ask, prompt, validate_index(count),
        max_attempts=max_attempts, on_invalid=on_invalid,
    )
    return int(answer.strip()) - 1
