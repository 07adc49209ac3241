"""Workflow and task definitions as read from a workflow description."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


@dataclass
class Task:
    """A named command together with the names of the tasks it depends on."""

    name: str
    command: str
    depends_on: list[str] = field(default_factory=list)


@dataclass
class Workflow:
    """A named, ordered collection of tasks."""

    name: str
    tasks: list[Task] = field(default_factory=list)

    def add_task(self, task: Task) -> None:
        """Append a task to the end of the workflow."""
        logger.debug("Adding task: %s to workflow %s", task.name, self.name)
        self.tasks.append(task)
        logger.debug(
            "Task list after adding %s: %s",
            task.name,
            " -> ".join([t.name for t in self.tasks] + ["NULL"]),
        )

    def describe(self) -> str:
        """Return a human-readable listing of the workflow and its tasks."""
        lines = [f"Workflow: {self.name}"]
        if not self.tasks:
            lines.append("No tasks in workflow!")
        for task in self.tasks:
            lines.append(f" Task: {task.name}")
            lines.append(f"  Command: {task.command}")
            if task.depends_on:
                lines.append("  Depends on: " + ", ".join(task.depends_on))
        return "\n".join(lines) + "\n"