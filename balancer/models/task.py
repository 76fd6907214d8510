"""Task model — an opaque unit of work with a fixed resource cost."""

from pydantic import BaseModel, ConfigDict, Field

UNASSIGNED = -1


class Task(BaseModel):
    """A task waiting for, or placed on, a Node. Consumption never changes."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(gt=0, description="Unique task identifier")
    consumption: int = Field(description="Resource units this task adds to its node's load")

    def __repr__(self) -> str:
        return f"Task(id={self.id}, consumption={self.consumption})"


class TaskInfo(BaseModel):
    """Status record for one task: where it is placed, or UNASSIGNED."""

    model_config = ConfigDict(frozen=True)

    task_id: int = Field(gt=0, description="Task identifier")
    node_id: int = Field(default=UNASSIGNED, description="Owning node, -1 while pending")

    @property
    def is_pending(self) -> bool:
        return self.node_id == UNASSIGNED

    def __repr__(self) -> str:
        return f"TaskInfo(task_id={self.task_id}, node_id={self.node_id})"
