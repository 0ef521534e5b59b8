"""element-actions - Declarative element actions with retry, timing and recording.

This package provides both a library interface and CLI for:
- Describing element actions as small serializable records
- Executing batches of them concurrently with per-action delay and retries
- Recording user interactions into the same record format

Library Usage:
    >>> from element_actions import ActionDescriptor, MemoryHost, OperationKind, run_all
    >>>
    >>> descriptors = [
    ...     ActionDescriptor("#login", OperationKind.ACTIVATE, max_retries=2),
    ...     ActionDescriptor("#user", OperationKind.SET_VALUE, value="alice"),
    ... ]
    >>> results = await run_all(host, descriptors)
    >>> print(results)
    [True, True]

CLI Usage:
    $ element-actions run actions.json --fixture page.json
    $ element-actions run actions.json --url https://example.com/login
    $ element-actions validate actions.json
"""

__version__ = "0.1.0"

# Core
from element_actions.core.config import Config
from element_actions.core.exceptions import (
    DescriptorError,
    ElementActionsError,
    ElementDetachedError,
    ElementFault,
    StateTransitionError,
    UnsupportedOperationError,
)

# Models
from element_actions.models.descriptor import (
    ActionDescriptor,
    OperationKind,
    load_descriptors,
    parse_descriptors,
)
from element_actions.models.results import ActionResult, Fault

# Hosts
from element_actions.browser import (
    Host,
    InteractionEvent,
    MemoryElement,
    MemoryHost,
    PlaywrightHost,
)

# Engine
from element_actions.engine import (
    ActionRunner,
    FaultCollector,
    build_action,
    execute,
    run_all,
    run_all_sync,
    run_descriptor,
    run_with_policy,
)

# Recorder
from element_actions.recorder import (
    DescriptorRecorder,
    RecorderState,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "Config",
    "ElementActionsError",
    "UnsupportedOperationError",
    "DescriptorError",
    "ElementFault",
    "ElementDetachedError",
    "StateTransitionError",
    # Models
    "ActionDescriptor",
    "OperationKind",
    "load_descriptors",
    "parse_descriptors",
    "ActionResult",
    "Fault",
    # Hosts
    "Host",
    "InteractionEvent",
    "MemoryHost",
    "MemoryElement",
    "PlaywrightHost",
    # Engine
    "build_action",
    "execute",
    "run_with_policy",
    "run_descriptor",
    "run_all",
    "run_all_sync",
    "ActionRunner",
    "FaultCollector",
    # Recorder
    "DescriptorRecorder",
    "RecorderState",
]
