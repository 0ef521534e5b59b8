"""Action execution engine."""

from element_actions.engine.batch import (
    ActionRunner,
    build_actions,
    run_all,
    run_all_sync,
    run_descriptor,
)
from element_actions.engine.collector import FaultCollector
from element_actions.engine.executor import execute
from element_actions.engine.factory import (
    Activate,
    ElementAction,
    Focus,
    ReadText,
    SetValue,
    build_action,
)
from element_actions.engine.primitives import apply, perform, resolve
from element_actions.engine.retry import run_with_policy

__all__ = [
    # Primitive layer
    "resolve",
    "apply",
    "perform",
    # Factory
    "build_action",
    "ElementAction",
    "Activate",
    "SetValue",
    "Focus",
    "ReadText",
    # Execution
    "execute",
    "run_with_policy",
    "run_descriptor",
    "run_all",
    "run_all_sync",
    "build_actions",
    "ActionRunner",
    "FaultCollector",
]
