"""Base Scheduler — abstract interface for placement policies."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from balancer.models.node import Node
from balancer.models.task import Task


@dataclass(frozen=True)
class Assignment:
    """Immutable placement decision: put a task on a node."""
    task_id: int
    node_id: int


class BaseScheduler(ABC):
    """Abstract base class for placement policies. Subclasses implement schedule().

    A policy only decides; it never mutates the nodes it is given. The engine
    applies the returned assignments in order.
    """

    @abstractmethod
    def schedule(
        self,
        pending: list[Task],
        nodes: list[Node],
    ) -> list[Assignment]:
        """Return one assignment per pending task, in placement order."""
        ...

    @property
    def name(self) -> str:
        """Human-readable policy name for reports."""
        return self.__class__.__name__
