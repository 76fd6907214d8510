from balancer.models.codes import ReturnCode
from balancer.models.node import Node
from balancer.models.task import Task, TaskInfo, UNASSIGNED

__all__ = ["ReturnCode", "Node", "Task", "TaskInfo", "UNASSIGNED"]
