from balancer.engine import TaskScheduler
from balancer.errors import SchedulerError
from balancer.models import ReturnCode, Node, Task, TaskInfo, UNASSIGNED

__all__ = ["TaskScheduler", "SchedulerError", "ReturnCode", "Node", "Task", "TaskInfo", "UNASSIGNED"]
