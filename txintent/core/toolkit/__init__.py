from .context import ActionContext
from .registry import (
    ActionDefinition,
    ActionParameter,
    ActionParameterType,
    ActionRegistry,
    RegisteredAction,
)

__all__ = [
    "ActionContext",
    "ActionDefinition",
    "ActionParameter",
    "ActionParameterType",
    "ActionRegistry",
    "RegisteredAction",
]
