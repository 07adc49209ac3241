"""Intermediate representation of a validated workflow."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from taskflow.model import Task, Workflow

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IRTask:
    """An immutable task ready for scheduling."""

    name: str
    command: str
    depends_on: tuple[str, ...] = ()

    @classmethod
    def from_task(cls, task: Task) -> IRTask:
        """Build an IR task as an independent copy of a parsed task."""
        return cls(task.name, task.command, tuple(task.depends_on))


@dataclass
class IRWorkflow:
    """A named sequence of IR tasks."""

    name: str
    tasks: list[IRTask] = field(default_factory=list)

    def describe(self) -> str:
        """Return a human-readable listing of the IR."""
        lines = [f"IR Workflow: {self.name}"]
        for task in self.tasks:
            lines.append(f"  Task: {task.name}")
            lines.append(f"    Command: {task.command}")
            if task.depends_on:
                lines.append(
                    "    Depends On: " + "".join(f"{dep} " for dep in task.depends_on)
                )
        return "\n".join(lines) + "\n"


def generate_ir(workflow: Workflow) -> IRWorkflow:
    """Convert a workflow into its intermediate representation."""
    logger.debug("Generating IR for workflow: %s", workflow.name)
    tasks = []
    for task in workflow.tasks:
        logger.debug("Processing task: %s", task.name)
        tasks.append(IRTask.from_task(task))
    return IRWorkflow(workflow.name, tasks)