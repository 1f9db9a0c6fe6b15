from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Header
from pydantic import BaseModel, ConfigDict, Field

from ..actions import get_action_registry
from ..core.toolkit import ActionContext, ActionRegistry

router = APIRouter(prefix="/actions")


class ActionInvocation(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    payload: Dict[str, Any] = Field(default_factory=dict, description="Action payload")
    agent_id: Optional[str] = Field(default=None, alias="agentId", description="Calling agent id")
    action_id: Optional[str] = Field(default=None, alias="actionId", description="Invocation id")


@router.get("")
async def list_actions(registry: ActionRegistry = Depends(get_action_registry)) -> List[Dict[str, Any]]:
    """Action schemas in registry format"""
    return [definition.to_registry_format() for definition in registry.get_definitions()]


@router.post("/{name}")
async def invoke_action(
    name: str,
    body: ActionInvocation,
    x_action_id: Optional[str] = Header(default=None),
    registry: ActionRegistry = Depends(get_action_registry),
) -> Dict[str, Any]:
    """Run an action. Always answers with ``{data}`` or ``{error}``.

    ``actionId`` in the body wins over the ``x-action-id`` header.
    """
    ctx = ActionContext(agent_id=body.agent_id, action_id=body.action_id or x_action_id)
    envelope = await registry.dispatch(name, ctx, body.payload)
    return envelope.to_dict()
