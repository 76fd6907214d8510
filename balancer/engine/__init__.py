from balancer.engine.events import OperationEvent, OperationType
from balancer.engine.scheduler import TaskScheduler

__all__ = ["OperationEvent", "OperationType", "TaskScheduler"]
