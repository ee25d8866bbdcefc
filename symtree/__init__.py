"""symtree package materializing symbolic execution trees as graphs."""

from .classifier import classify
from .materializer import GraphConsistencyError, TreeMaterializer
from .pathcond import render_path_condition
from .steps import ExecutionStep, StepCategory, StepContractError

__all__ = [
    "ExecutionStep",
    "StepCategory",
    "StepContractError",
    "TreeMaterializer",
    "GraphConsistencyError",
    "classify",
    "render_path_condition",
]

__version__ = "0.1.0"
