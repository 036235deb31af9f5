from __future__ import annotations
from dataclasses import dataclass
from enum import Enum


class StepStatus(Enum):
    OK = "ok"
    SKIPPED = "skipped"
    FAILED = "failed"   # reported, run continues
    FATAL = "fatal"     # run stops


@dataclass
class StepResult:
    status: StepStatus
    message: str = ""
    step: str = ""

    @classmethod
    def ok(cls, message: str = "") -> "StepResult":
        return cls(StepStatus.OK, message)

    @classmethod
    def skipped(cls, message: str = "") -> "StepResult":
        return cls(StepStatus.SKIPPED, message)

    @classmethod
    def failed(cls, message: str) -> "StepResult":
        return cls(StepStatus.FAILED, message)

    @classmethod
    def fatal(cls, message: str) -> "StepResult":
        return cls(StepStatus.FATAL, message)

    @property
    def is_fatal(self) -> bool:
        return self.status is StepStatus.FATAL

    @property
    def status_icon(self) -> str:
        return {
            StepStatus.OK: "✓",
            StepStatus.SKIPPED: "⏭",
            StepStatus.FAILED: "⚠",
            StepStatus.FATAL: "✗",
        }[self.status]
