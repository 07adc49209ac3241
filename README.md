# taskflow

`taskflow` models a workflow as a named list of tasks. Each task has a command and may depend on other tasks by name. The package checks a workflow for semantic mistakes and lowers it to an intermediate representation (IR). It then simulates a run, reporting each task in an order that respects its dependencies. No command is actually run.

## Modules

### `taskflow.model`

- `Task(name, command, depends_on=[])`: a dataclass holding a named command and the names of the tasks it depends on.
- `Workflow(name, tasks=[])`: a dataclass holding an ordered list of tasks.
  - `Workflow.add_task(task)` appends a task. It logs at debug level through the `logging` module.
  - `Workflow.describe()` returns a readable listing. It contains `Workflow: <name>` and, for each task, its name, its command and a comma-separated `Depends on:` line. If there are no tasks, it contains `No tasks in workflow!`.

### `taskflow.checks`

- `SemanticError`: raised when a workflow is well formed but semantically wrong.
- `find_task_by_name(workflow, name)`: the first task with that name, or `None`.
- `check_dependencies(workflow)`: every dependency must name a task in the workflow.
- `check_cycles(workflow)`: the dependency graph must contain no cycle.
- `check_duplicate_tasks(workflow)`: task names must be unique.
- `run_checks(workflow)`: runs the three checks above in that order. It raises `SemanticError` on the first failure.
- `process_workflow(workflow, out=None)`: the full pipeline. It writes a report to `out`, or to standard output if `out` is `None`. It then:
  1. describes the workflow,
  2. runs the checks, raising `SemanticError` if they fail,
  3. describes the workflow again,
  4. generates and prints the IR,
  5. simulates execution.

  It returns the `ExecutionResult`.

### `taskflow.ir`

- `IRTask(name, command, depends_on=())`: a frozen dataclass. `IRTask.from_task(task)` builds an independent copy of a `Task`.
- `IRWorkflow(name, tasks=[])`: its `describe()` method returns an `IR Workflow: <name>` listing.
- `generate_ir(workflow)`: converts a `Workflow` into an `IRWorkflow`.

### `taskflow.executor`

- `find_task(ir, name)`: the first IR task with that name, or `None`.
- `execution_order(ir)`: schedules the tasks.
  - Tasks are scanned in declaration order, pass after pass. A task runs once every dependency that names a known task has run.
  - Dependencies on unknown tasks are ignored.
  - If a whole pass makes no progress, scheduling stops.
- `ExecutionResult`: the result of scheduling.
  - `executed`: a tuple of the `IRTask`s that ran, in order.
  - `cycle_detected`: true if scheduling stalled.
  - `names`: the names of the executed tasks.
  - `complete`: true if scheduling did not stall.
- `execute_workflow(ir, out=None)`: writes `Executing Task: <name>` and `  Command: <command>` for each task that runs. If scheduling stalls, it writes `Cycle detected! Cannot execute workflow.` to standard error. It returns the `ExecutionResult`.

## Example

```python
import sys

from taskflow.checks import SemanticError, process_workflow, run_checks
from taskflow.executor import execution_order
from taskflow.ir import generate_ir
from taskflow.model import Task, Workflow

wf = Workflow("build")
wf.add_task(Task("fetch", "git pull"))
wf.add_task(Task("compile", "make", depends_on=["fetch"]))
wf.add_task(Task("test", "make test", depends_on=["compile"]))

try:
    run_checks(wf)
except SemanticError as err:
    print(f"invalid workflow: {err}")
else:
    ir = generate_ir(wf)
    print(execution_order(ir).names)
    # ['fetch', 'compile', 'test']

    process_workflow(wf, sys.stdout)
```

## Errors

Semantic problems raise `taskflow.checks.SemanticError`, with a message that names the task involved:

- `Task 'compile' depends on undefined task 'fetch'`
- `Cycle detected involving task 'a'`
- `Duplicate task name 'build'`

## What it does not do

- There is no reader for workflow description files. Workflows are built in Python from `Task` and `Workflow` objects.
- There is no command-line program.
- Execution is only simulated: commands are reported, never run.