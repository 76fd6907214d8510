"""Node model — a registered target that holds assigned tasks."""

from pydantic import BaseModel, Field


class Node(BaseModel):
    """A compute node. Tasks are kept in assignment order."""

    id: int = Field(gt=0, description="Unique node identifier")
    tasks: list[int] = Field(default_factory=list, description="Assigned task IDs, oldest first")
    load: int = Field(default=0, description="Sum of consumption over assigned tasks")

    @property
    def is_idle(self) -> bool:
        return not self.tasks

    def assign_task(self, task_id: int, consumption: int) -> None:
        """Append a task and add its cost to the load."""
        self.tasks.append(task_id)
        self.load += consumption

    def release_task(self, task_id: int, consumption: int) -> bool:
        """Remove a task if present. Returns False when the node never held it."""
        if task_id not in self.tasks:
            return False
        self.tasks.remove(task_id)
        self.load -= consumption
        return True

    def __repr__(self) -> str:
        return f"Node(id={self.id}, load={self.load}, tasks={len(self.tasks)})"
