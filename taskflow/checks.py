"""Semantic validation of a workflow and the full processing pipeline."""

from __future__ import annotations

import enum
import logging
import sys
from typing import TextIO

from taskflow.executor import ExecutionResult, execute_workflow
from taskflow.ir import generate_ir
from taskflow.model import Task, Workflow

logger = logging.getLogger(__name__)


class SemanticError(Exception):
    """Raised when a workflow is syntactically valid but semantically wrong."""


class _Color(enum.Enum):
    WHITE = 0
    GRAY = 1
    BLACK = 2


def find_task_by_name(workflow: Workflow, name: str) -> Task | None:
    """Return the first task called ``name``, or None."""
    return next((task for task in workflow.tasks if task.name == name), None)


def check_dependencies(workflow: Workflow) -> None:
    """Raise SemanticError if any task depends on an undefined task."""
    defined = {task.name for task in workflow.tasks}
    for task in workflow.tasks:
        for dep in task.depends_on:
            if dep not in defined:
                raise SemanticError(
                    f"Task '{task.name}' depends on undefined task '{dep}'"
                )


def _reaches_cycle(start: Task, workflow: Workflow, colors: dict[str, _Color]) -> bool:
    state = colors.get(start.name, _Color.WHITE)
    if state is _Color.GRAY:
        return True
    if state is _Color.BLACK:
        return False

    colors[start.name] = _Color.GRAY
    stack = [(start.name, iter(start.depends_on))]
    while stack:
        name, deps = stack[-1]
        for dep_name in deps:
            dep = find_task_by_name(workflow, dep_name)
            if dep is None:
                continue
            logger.debug("Visiting task %s (color %s)", dep.name, colors.get(dep.name))
            dep_state = colors.get(dep.name, _Color.WHITE)
            if dep_state is _Color.GRAY:
                return True
            if dep_state is _Color.WHITE:
                colors[dep.name] = _Color.GRAY
                stack.append((dep.name, iter(dep.depends_on)))
                break
        else:
            colors[name] = _Color.BLACK
            stack.pop()
    return False


def check_cycles(workflow: Workflow) -> None:
    """Raise SemanticError if the dependency graph contains a cycle."""
    colors: dict[str, _Color] = {}
    for task in workflow.tasks:
        root = find_task_by_name(workflow, task.name)
        if root is not None and _reaches_cycle(root, workflow, colors):
            raise SemanticError(f"Cycle detected involving task '{task.name}'")


def check_duplicate_tasks(workflow: Workflow) -> None:
    """Raise SemanticError if two tasks share a name."""
    for position, task in enumerate(workflow.tasks):
        if any(other.name == task.name for other in workflow.tasks[position + 1:]):
            raise SemanticError(f"Duplicate task name '{task.name}'")


def run_checks(workflow: Workflow) -> None:
    """Run dependency, cycle and duplicate checks, in that order."""
    check_dependencies(workflow)
    check_cycles(workflow)
    check_duplicate_tasks(workflow)


def process_workflow(workflow: Workflow, out: TextIO | None = None) -> ExecutionResult:
    """Validate, lower to IR and simulate execution, reporting to ``out``.

    Raises SemanticError if validation fails.
    """
    out = sys.stdout if out is None else out
    out.write("Before semantic checks:\n")
    out.write(workflow.describe())

    run_checks(workflow)

    out.write(workflow.describe())
    out.write(f"Generating IR for workflow: {workflow.name}\n")
    for task in workflow.tasks:
        out.write(f"Processing task: {task.name}\n")
    ir = generate_ir(workflow)

    out.write("\n--- IR ---\n")
    out.write(ir.describe())
    out.write("\n--- Execution ---\n")
    return execute_workflow(ir, out)