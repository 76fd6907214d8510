"""Operation log entries recorded by the TaskScheduler."""

from enum import Enum
from dataclasses import dataclass
from typing import Optional

from balancer.models.codes import ReturnCode


class OperationType(str, Enum):
    """Public operations of the TaskScheduler."""
    INIT = "init"
    REGISTER_NODE = "register_node"
    UNREGISTER_NODE = "unregister_node"
    ADD_TASK = "add_task"
    DELETE_TASK = "delete_task"
    SCHEDULE = "schedule"
    QUERY = "query"


@dataclass(frozen=True)
class OperationEvent:
    """One completed call, successful or not, ordered by sequence."""
    sequence: int
    op: OperationType
    code: ReturnCode
    node_id: Optional[int] = None
    task_id: Optional[int] = None

    def __repr__(self) -> str:
        parts = [f"OperationEvent(#{self.sequence}, op={self.op.value}, code={self.code.value}"]
        if self.node_id is not None:
            parts.append(f", node={self.node_id}")
        if self.task_id is not None:
            parts.append(f", task={self.task_id}")
        parts.append(")")
        return "".join(parts)
