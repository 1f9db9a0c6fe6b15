from typing import Optional

from pydantic import BaseModel, Field


class ActionContext(BaseModel):
    """Identifies the agent and the individual invocation an action serves."""

    agent_id: Optional[str] = Field(default=None, description="Calling agent id")
    action_id: Optional[str] = Field(default=None, description="Invocation id assigned by the registry")
