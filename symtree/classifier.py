"""Node attributes for execution steps, keyed on the step category."""
from __future__ import annotations

from typing import List, Tuple

from .pathcond import LINE_BREAK, LocalBindings, PathCondition, render_path_condition
from .steps import ExecutionStep, StepCategory, StepContractError

Attribute = Tuple[str, str]

LABEL = "label"
COLOR = "color"
SHAPE = "shape"

# (color, shape) per category; shape None keeps the renderer's default
STYLES = {
    StepCategory.CALL: ("red", "box"),
    StepCategory.RETURN: ("red", "box"),
    StepCategory.BRANCH: ("blue", "diamond"),
    StepCategory.OTHER: ("black", None),
}


def _located_label(step: ExecutionStep, path_condition: PathCondition, local_bindings: LocalBindings) -> str:
    return (
        f"{step.mnemonic}{LINE_BREAK}"
        f"({step.position}){LINE_BREAK}"
        f"{render_path_condition(local_bindings, path_condition)}"
    )


def build_label(
    step: ExecutionStep,
    path_condition: PathCondition = None,
    local_bindings: LocalBindings = None,
) -> str:
    category = step.category
    if category is StepCategory.CALL:
        # calls show what is about to run, not what holds now
        if not step.target:
            raise StepContractError(f"Call step {step.mnemonic!r} has no invoked target")
        return f"{step.mnemonic}{LINE_BREAK}Calling:{LINE_BREAK}{step.target}"
    if category is StepCategory.RETURN:
        label = _located_label(step, path_condition, local_bindings)
        if step.return_to:
            label += f"Returning to:{LINE_BREAK}{step.return_to}"
        return label
    if category is StepCategory.BRANCH or category is StepCategory.OTHER:
        return _located_label(step, path_condition, local_bindings)
    raise StepContractError(f"Step {step.mnemonic!r} has unknown category {category!r}")


def classify(
    step: ExecutionStep,
    path_condition: PathCondition = None,
    local_bindings: LocalBindings = None,
) -> List[Attribute]:
    """Return the ordered ``(name, value)`` display attributes for ``step``.

    The list always holds a label and a color; call, return and branch steps
    add a shape. Raises :class:`StepContractError` when the step data does not
    fit its category.
    """
    label = build_label(step, path_condition, local_bindings)
    color, shape = STYLES[step.category]
    attrs: List[Attribute] = [(LABEL, label), (COLOR, color)]
    if shape is not None:
        attrs.append((SHAPE, shape))
    return attrs
