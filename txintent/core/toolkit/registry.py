"""
Action Registry and Dispatcher.

Actions are named handlers with a declared payload schema. The registry
validates an incoming payload against that schema (required fields, enum
constraints, defaults for absent optional fields) before calling the
handler, and guarantees the caller always gets a ResultEnvelope back.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Coroutine, Dict, List, Optional

import structlog
from pydantic import BaseModel, Field

from ...types.envelope import ResultEnvelope
from .context import ActionContext

ActionHandler = Callable[[ActionContext, Dict[str, Any]], Coroutine[Any, Any, ResultEnvelope]]


class ActionParameterType(str, Enum):
    """Supported payload field types"""
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"


class ActionParameter(BaseModel):
    """Definition of a single payload field"""
    name: str
    type: ActionParameterType
    description: str
    required: bool = True
    enum: Optional[List[str]] = None
    default: Optional[Any] = None


class ActionDefinition(BaseModel):
    """Definition of an action exposed by the toolkit"""
    name: str
    description: str
    parameters: List[ActionParameter] = Field(default_factory=list)

    def payload_description(self) -> Dict[str, Dict[str, Any]]:
        """Schema in the registry's ``payloadDescription`` format"""
        described: Dict[str, Dict[str, Any]] = {}
        for param in self.parameters:
            field_spec: Dict[str, Any] = {
                "type": param.type.value,
                "description": param.description,
                "required": param.required,
            }
            if param.enum:
                field_spec["enums"] = param.enum
            if param.default is not None:
                field_spec["default"] = param.default
            described[param.name] = field_spec
        return described

    def to_registry_format(self) -> Dict[str, Any]:
        return {
            "action": self.name,
            "actionDescription": self.description,
            "payloadDescription": self.payload_description(),
        }


@dataclass
class RegisteredAction:
    """An action registered with its definition and handler."""
    definition: ActionDefinition
    handler: ActionHandler


class ActionRegistry:
    """
    Registry of toolkit actions.

    Usage:
        registry = ActionRegistry()

        @registry.action(ActionDefinition(name="swap", description="...", parameters=[...]))
        async def swap(ctx, payload):
            ...

        envelope = await registry.dispatch("swap", ActionContext(), {"chain": "base", ...})
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self._actions: Dict[str, RegisteredAction] = {}
        self.logger = logger or logging.getLogger(__name__)

    def register(self, definition: ActionDefinition, handler: ActionHandler) -> None:
        """Register an action with its definition and handler."""
        self._actions[definition.name] = RegisteredAction(definition=definition, handler=handler)

    def action(self, definition: ActionDefinition) -> Callable[[ActionHandler], ActionHandler]:
        """Decorator form of ``register``."""

        def decorator(handler: ActionHandler) -> ActionHandler:
            self.register(definition, handler)
            return handler

        return decorator

    def get_definitions(self) -> List[ActionDefinition]:
        return [action.definition for action in self._actions.values()]

    def get_action(self, name: str) -> Optional[RegisteredAction]:
        return self._actions.get(name)

    def prepare_payload(self, definition: ActionDefinition, payload: Dict[str, Any]) -> Dict[str, Any]:
        """
        Copy ``payload`` with defaults applied.

        Raises:
            ValueError: a required field is missing or an enum field holds an
                unlisted value.
        """
        prepared = dict(payload or {})
        for param in definition.parameters:
            value = prepared.get(param.name)
            if value is None:
                if param.required:
                    raise ValueError(f"Missing required field: {param.name}")
                if param.default is not None:
                    prepared[param.name] = param.default
                continue
            if param.enum and value not in param.enum:
                allowed = ", ".join(param.enum)
                raise ValueError(f"Invalid value for {param.name}: {value!r} (expected one of {allowed})")
        return prepared

    async def dispatch(
        self,
        name: str,
        ctx: ActionContext,
        payload: Optional[Dict[str, Any]] = None,
    ) -> ResultEnvelope:
        """Run an action and return its envelope; nothing raises past this point."""
        action = self.get_action(name)
        if not action:
            return ResultEnvelope.fail(f"Unknown action: {name}")

        with structlog.contextvars.bound_contextvars(action=name, action_id=ctx.action_id):
            try:
                prepared = self.prepare_payload(action.definition, payload or {})
            except ValueError as e:
                self.logger.warning("Rejected %s payload: %s", name, e)
                return ResultEnvelope.fail(str(e))

            try:
                result = await action.handler(ctx, prepared)
            except Exception as e:
                self.logger.exception("Action %s raised", name)
                return ResultEnvelope.fail(f"Failed to create transaction: {e}")

            if result.is_error:
                self.logger.info("Action %s failed: %s", name, result.error)
            return result
