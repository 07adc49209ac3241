"""Dependency-ordered (simulated) execution of an IR workflow."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import TextIO

from taskflow.ir import IRTask, IRWorkflow

_DONE = -1


@dataclass(frozen=True)
class ExecutionResult:
    """Tasks run, in order, and whether scheduling stalled on a cycle."""

    executed: tuple[IRTask, ...]
    cycle_detected: bool

    @property
    def names(self) -> list[str]:
        return [task.name for task in self.executed]

    @property
    def complete(self) -> bool:
        return not self.cycle_detected


def find_task(ir: IRWorkflow, name: str) -> IRTask | None:
    """Return the first task called ``name``, or None."""
    return next((task for task in ir.tasks if task.name == name), None)


def execution_order(ir: IRWorkflow) -> ExecutionResult:
    """Schedule tasks so that each runs after the tasks it depends on.

    Dependencies naming unknown tasks are ignored. Tasks are scanned in
    workflow order repeatedly; a task becomes ready once every known
    dependency has run. If a full pass makes no progress, scheduling stops.
    """
    tasks = ir.tasks
    pending = [
        sum(1 for dep in task.depends_on if find_task(ir, dep) is not None)
        for task in tasks
    ]
    executed: list[IRTask] = []

    while len(executed) < len(tasks):
        progress = False
        for index, task in enumerate(tasks):
            if pending[index] != 0:
                continue
            executed.append(task)
            pending[index] = _DONE
            progress = True
            for other_index, other in enumerate(tasks):
                pending[other_index] -= sum(
                    1 for dep in other.depends_on if dep == task.name
                )
        if not progress:
            return ExecutionResult(tuple(executed), True)

    return ExecutionResult(tuple(executed), False)


def execute_workflow(ir: IRWorkflow, out: TextIO | None = None) -> ExecutionResult:
    """Simulate running the workflow, reporting each task to ``out``."""
    out = sys.stdout if out is None else out
    result = execution_order(ir)
    for task in result.executed:
        out.write(f"Executing Task: {task.name}\n")
        out.write(f"  Command: {task.command}\n")
    if result.cycle_detected:
        sys.stderr.write("Cycle detected! Cannot execute workflow.\n")
    return result