"""Execution step records reported by the exploration engine."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


class StepContractError(ValueError):
    """Raised when a step's fields do not match its category."""


class StepCategory(str, Enum):
    CALL = "call"
    RETURN = "return"
    BRANCH = "branch"
    OTHER = "other"

    @classmethod
    def parse(cls, value: str) -> "StepCategory":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError as exc:
            raise StepContractError(f"Unknown step category: {value!r}") from exc


@dataclass(frozen=True)
class ExecutionStep:
    """One observed instruction occurrence.

    ``target`` is the full name of the invoked method and is only meaningful
    for call steps. ``return_to`` names the method enclosing the instruction
    that follows a return, when there is one.
    """

    category: StepCategory
    mnemonic: str
    position: str = ""
    target: Optional[str] = None
    return_to: Optional[str] = None

    def __post_init__(self) -> None:
        # frozen; accept plain strings such as "branch"
        object.__setattr__(self, "category", StepCategory.parse(self.category))

    @classmethod
    def call(cls, mnemonic: str, target: str, position: str = "") -> "ExecutionStep":
        return cls(StepCategory.CALL, mnemonic, position, target=target)

    @classmethod
    def ret(cls, mnemonic: str, position: str, return_to: Optional[str] = None) -> "ExecutionStep":
        return cls(StepCategory.RETURN, mnemonic, position, return_to=return_to)

    @classmethod
    def branch(cls, mnemonic: str, position: str) -> "ExecutionStep":
        return cls(StepCategory.BRANCH, mnemonic, position)

    @classmethod
    def other(cls, mnemonic: str, position: str) -> "ExecutionStep":
        return cls(StepCategory.OTHER, mnemonic, position)

    @classmethod
    def from_json(cls, payload: Dict[str, Any]) -> "ExecutionStep":
        if "category" not in payload:
            raise StepContractError("Step record is missing 'category'")
        if "mnemonic" not in payload:
            raise StepContractError("Step record is missing 'mnemonic'")
        return cls(
            category=StepCategory.parse(payload["category"]),
            mnemonic=str(payload["mnemonic"]),
            position=str(payload.get("position") or ""),
            target=payload.get("target"),
            return_to=payload.get("return_to"),
        )
