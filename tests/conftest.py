import sys
from pathlib import Path

import pytest

# Ensure the project package is importable when tests run via pytest
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from symtree import ExecutionStep, TreeMaterializer  # noqa: E402


@pytest.fixture
def materializer() -> TreeMaterializer:
    return TreeMaterializer()


@pytest.fixture
def ifeq_step() -> ExecutionStep:
    return ExecutionStep.branch("IFEQ", "Foo.java:42")


@pytest.fixture
def invoke_step() -> ExecutionStep:
    return ExecutionStep.call("INVOKEVIRTUAL", "Bar.baz()V")
