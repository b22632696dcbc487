from abc import ABC, abstractmethod
from typing import Dict, Any


class BaseAgent(ABC):
    """
    Base interface for all agents in the description writer.

    Agents must be stateless between runs: everything a run needs arrives in its input,
    so one instance can serve concurrent requests.
    """

    name: str

    @abstractmethod
    def run(self, input: Dict[str, Any]) -> Dict[str, Any]:
        """
        Execute the agent.

        Args:
            input: Structured input dictionary defined by the agent schema.

        Returns:
            JSON-safe output dictionary defined by the agent schema.
        """
        raise NotImplementedError
