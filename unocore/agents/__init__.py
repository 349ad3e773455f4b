"""Built-in agents."""

from unocore.agents.human_agent import HumanAgent
from unocore.agents.scripted_agent import ScriptedAgent

__all__ = ["HumanAgent", "ScriptedAgent"]
