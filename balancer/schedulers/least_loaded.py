"""Least-Loaded Scheduler — greedy per-task load balancing."""

from balancer.models.node import Node
from balancer.models.task import Task
from balancer.schedulers.base import BaseScheduler, Assignment


class LeastLoadedScheduler(BaseScheduler):
    """Places tasks in ascending id order, each on the currently lightest node.

    Ties on load go to the numerically largest node id.
    """

    def schedule(
        self,
        pending: list[Task],
        nodes: list[Node],
    ) -> list[Assignment]:
        assignments: list[Assignment] = []
        if not nodes:
            return assignments

        # Track load within this pass so later picks see earlier placements
        round_load: dict[int, int] = {n.id: n.load for n in nodes}

        for task in sorted(pending, key=lambda t: t.id):
            node_id = self._select_node(round_load)
            assignments.append(Assignment(task_id=task.id, node_id=node_id))
            round_load[node_id] += task.consumption

        return assignments

    def _select_node(self, round_load: dict[int, int]) -> int:
        """Minimum load, then maximum id."""
        return min(round_load, key=lambda node_id: (round_load[node_id], -node_id))
