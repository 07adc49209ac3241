from taskflow.model import Task, Workflow


def test_add_task_preserves_order():
    wf = Workflow("pipeline")
    wf.add_task(Task("a", "echo a"))
    wf.add_task(Task("b", "echo b"))
    wf.add_task(Task("c", "echo c"))
    assert [t.name for t in wf.tasks] == ["a", "b", "c"]


def test_task_defaults_to_no_dependencies():
    task = Task("build", "make")
    assert task.depends_on == []


def test_dependency_lists_are_independent():
    first = Task("x", "true")
    second = Task("y", "true")
    first.depends_on.append("z")
    assert second.depends_on == []


def test_describe_empty_workflow():
    wf = Workflow("empty")
    assert wf.describe() == "Workflow: empty\nNo tasks in workflow!\n"


def test_describe_with_tasks_and_dependencies():
    wf = Workflow("ci")
    wf.add_task(Task("build", "make"))
    wf.add_task(Task("test", "make test", ["build", "lint"]))
    text = wf.describe()
    lines = text.splitlines()
    assert lines[0] == "Workflow: ci"
    assert " Task: build" in lines
    assert "  Command: make test" in lines
    assert "  Depends on: build, lint" in lines
    assert "No tasks in workflow!" not in text


def test_describe_omits_dependency_line_without_dependencies():
    wf = Workflow("solo")
    wf.add_task(Task("only", "run"))
    assert "Depends on" not in wf.describe()