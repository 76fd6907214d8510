"""Scenario generator — creates reproducible node/task sets for the scheduler."""

import random


class ScenarioGenerator:
    """Generates deterministic node ids and task costs using a seeded RNG."""

    def __init__(self, seed: int = 42):
        self.rng = random.Random(seed)
        self._task_counter = 0
        self._node_counter = 0

    def generate_nodes(self, num_nodes: int = 5) -> list[int]:
        """Consecutive positive node ids, continuing across calls."""
        node_ids = list(range(self._node_counter + 1, self._node_counter + num_nodes + 1))
        self._node_counter += num_nodes
        return node_ids

    def generate_tasks(
        self,
        num_tasks: int = 50,
        min_consumption: int = 1,
        max_consumption: int = 50,
    ) -> list[tuple[int, int]]:
        """(task_id, consumption) pairs in shuffled id order, like real arrivals."""
        if min_consumption > max_consumption:
            raise ValueError(
                f"min_consumption ({min_consumption}) exceeds max_consumption ({max_consumption})"
            )

        tasks: list[tuple[int, int]] = []
        for _ in range(num_tasks):
            self._task_counter += 1
            consumption = self.rng.randint(min_consumption, max_consumption)
            tasks.append((self._task_counter, consumption))

        self.rng.shuffle(tasks)
        return tasks
