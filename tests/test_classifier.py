import pytest

from symtree import ExecutionStep, StepCategory, StepContractError, classify
from symtree.steps import ExecutionStep as Step


def _attrs(step, pc=None, bindings=None):
    return dict(classify(step, pc, bindings))


def test_branch_step_attributes(ifeq_step):
    attrs = classify(ifeq_step, ["x>0"])
    assert attrs == [
        ("label", "IFEQ\\n(Foo.java:42)\\nx>0\r"),
        ("color", "blue"),
        ("shape", "diamond"),
    ]


def test_call_step_attributes(invoke_step):
    attrs = classify(invoke_step, ["x>0"], [("x", 1)])
    assert attrs == [
        ("label", "INVOKEVIRTUAL\\nCalling:\\nBar.baz()V"),
        ("color", "red"),
        ("shape", "box"),
    ]


def test_call_label_excludes_path_condition_and_position():
    step = ExecutionStep.call("INVOKESTATIC", "Util.check(I)Z", position="Foo.java:7")
    label = _attrs(step, ["secret_clause>0"], {"n": "N"})["label"]
    assert "secret_clause" not in label
    assert "Foo.java:7" not in label
    assert "n=N" not in label


def test_return_step_with_successor():
    step = ExecutionStep.ret("IRETURN", "Foo.java:50", return_to="Main.run()V")
    attrs = _attrs(step, ["r==1"])
    assert attrs["label"] == "IRETURN\\n(Foo.java:50)\\nr==1\rReturning to:\\nMain.run()V"
    assert attrs["color"] == "red"
    assert attrs["shape"] == "box"


def test_return_step_without_successor():
    step = ExecutionStep.ret("RETURN", "Main.java:3")
    assert _attrs(step)["label"] == "RETURN\\n(Main.java:3)\\n\r"


def test_other_step_has_no_shape():
    step = ExecutionStep.other("ILOAD", "Foo.java:12")
    attrs = classify(step, None, [("i", "I0")])
    assert attrs == [("label", "ILOAD\\n(Foo.java:12)\\ni=I0&&\\n\r"), ("color", "black")]


@pytest.mark.parametrize("category", list(StepCategory))
def test_every_category_yields_label_and_color(category):
    step = Step(category, "OP", "A.java:1", target="A.b()V")
    attrs = classify(step, ["p"])
    keys = [key for key, _ in attrs]
    assert keys.count("label") == 1
    assert keys.count("color") == 1
    assert keys.count("shape") == (0 if category is StepCategory.OTHER else 1)


def test_call_without_target_fails_fast():
    step = Step(StepCategory.CALL, "INVOKEVIRTUAL", "A.java:1")
    with pytest.raises(StepContractError):
        classify(step)


def test_unknown_category_fails_fast():
    with pytest.raises(StepContractError):
        Step("jump", "GOTO", "A.java:1")


def test_plain_string_category_is_normalized():
    step = Step("branch", "IFEQ", "Foo.java:42")
    assert step.category is StepCategory.BRANCH
    assert step == ExecutionStep.branch("IFEQ", "Foo.java:42")
    assert dict(classify(step, ["x>0"]))["shape"] == "diamond"


def test_step_from_json_rejects_unknown_category():
    with pytest.raises(StepContractError):
        ExecutionStep.from_json({"category": "jump", "mnemonic": "GOTO"})


def test_step_from_json_parses_category_case_insensitively():
    step = ExecutionStep.from_json({"category": "BRANCH", "mnemonic": "IFNE", "position": "A.java:9"})
    assert step == ExecutionStep.branch("IFNE", "A.java:9")


def test_step_from_json_requires_category():
    with pytest.raises(StepContractError, match="category"):
        ExecutionStep.from_json({"id": "a", "mnemonic": "INVOKEVIRTUAL", "target": "A.b()V"})
