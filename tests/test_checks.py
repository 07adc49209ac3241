import io

import pytest

from taskflow.checks import (
    SemanticError,
    check_cycles,
    check_dependencies,
    check_duplicate_tasks,
    find_task_by_name,
    process_workflow,
    run_checks,
)
from taskflow.model import Task, Workflow


def _workflow(*tasks):
    wf = Workflow("wf")
    for task in tasks:
        wf.add_task(task)
    return wf


def test_find_task_by_name():
    target = Task("b", "2")
    wf = _workflow(Task("a", "1"), target)
    assert find_task_by_name(wf, "b") is target
    assert find_task_by_name(wf, "zzz") is None


def test_check_dependencies_accepts_defined():
    wf = _workflow(Task("a", "1"), Task("b", "2", ["a"]))
    check_dependencies(wf)
    assert [t.name for t in wf.tasks] == ["a", "b"]


def test_check_dependencies_rejects_undefined():
    wf = _workflow(Task("a", "1", ["ghost"]))
    with pytest.raises(SemanticError, match="Task 'a' depends on undefined task 'ghost'"):
        check_dependencies(wf)


def test_check_cycles_detects_two_task_cycle():
    wf = _workflow(Task("a", "1", ["b"]), Task("b", "2", ["a"]))
    with pytest.raises(SemanticError, match="Cycle detected involving task 'a'"):
        check_cycles(wf)


def test_check_cycles_detects_self_loop():
    wf = _workflow(Task("ok", "0"), Task("loop", "1", ["loop"]))
    with pytest.raises(SemanticError, match="'loop'"):
        check_cycles(wf)


def test_check_cycles_accepts_dag():
    wf = _workflow(
        Task("d", "4", ["b", "c"]),
        Task("b", "2", ["a"]),
        Task("c", "3", ["a"]),
        Task("a", "1"),
    )
    check_cycles(wf)
    assert len(wf.tasks) == 4


def test_check_cycles_handles_long_chain():
    tasks = [Task(f"t{i}", "run", [f"t{i + 1}"]) for i in range(3000)]
    tasks.append(Task("t3000", "run"))
    wf = _workflow(*tasks)
    check_cycles(wf)
    tasks[-1].depends_on.append("t0")
    with pytest.raises(SemanticError):
        check_cycles(wf)


def test_check_duplicate_tasks():
    wf = _workflow(Task("a", "1"), Task("b", "2"), Task("a", "3"))
    with pytest.raises(SemanticError, match="Duplicate task name 'a'"):
        check_duplicate_tasks(wf)


def test_run_checks_reports_dependency_error_before_cycle():
    wf = _workflow(Task("a", "1", ["a", "ghost"]))
    with pytest.raises(SemanticError, match="undefined task 'ghost'"):
        run_checks(wf)


def test_run_checks_reports_cycle_before_duplicate():
    wf = _workflow(Task("a", "1", ["a"]), Task("a", "2"))
    with pytest.raises(SemanticError, match="Cycle detected"):
        run_checks(wf)


def test_process_workflow_output_sections():
    wf = _workflow(Task("build", "make", ["fetch"]), Task("fetch", "git pull"))
    out = io.StringIO()
    result = process_workflow(wf, out)
    text = out.getvalue()
    assert result.names == ["fetch", "build"]
    assert text.startswith("Before semantic checks:\n")
    assert text.count(wf.describe()) == 2
    assert text.index("\n--- IR ---\n") < text.index("\n--- Execution ---\n")
    assert text.endswith("Executing Task: build\n  Command: make\n")


def test_process_workflow_raises_on_invalid():
    wf = _workflow(Task("a", "1", ["missing"]))
    out = io.StringIO()
    with pytest.raises(SemanticError):
        process_workflow(wf, out)
    assert "--- IR ---" not in out.getvalue()