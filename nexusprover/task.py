"""Prover tasks handed out by the orchestrator."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Task:
    """A unit of proving work: which program to run and its public inputs."""

    task_id: str
    program_id: str
    public_inputs: bytes = field(default=b"")

    def __post_init__(self) -> None:
        object.__setattr__(self, "public_inputs", bytes(self.public_inputs))

    def __str__(self) -> str:
        inputs = "[" + ", ".join(str(b) for b in self.public_inputs) + "]"
        return (
            f"Task ID: {self.task_id}, Program ID: {self.program_id}, "
            f"Public Inputs: {inputs}"
        )