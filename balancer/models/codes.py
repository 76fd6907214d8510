"""Result codes returned by every TaskScheduler operation."""

from enum import Enum


class ReturnCode(str, Enum):
    """Fixed set of operation outcomes. Values are stable wire codes."""
    INITIALIZED = "E001"
    INVALID_THRESHOLD = "E002"
    NODE_REGISTERED = "E003"
    INVALID_NODE_ID = "E004"
    NODE_ALREADY_REGISTERED = "E005"
    NODE_UNREGISTERED = "E006"
    NODE_NOT_FOUND = "E007"
    TASK_ADDED = "E008"
    INVALID_TASK_ID = "E009"
    TASK_ALREADY_EXISTS = "E010"
    TASK_DELETED = "E011"
    TASK_NOT_FOUND = "E012"
    SCHEDULED = "E013"
    NO_NODES_AVAILABLE = "E014"
    STATUS_QUERIED = "E015"
    NULL_OUTPUT = "E016"
    NOTHING_TO_SCHEDULE = "E017"

    @property
    def is_success(self) -> bool:
        return self in _SUCCESS_CODES

    def raise_for_error(self) -> "ReturnCode":
        """Raise SchedulerError for an error code, return self otherwise."""
        if not self.is_success:
            from balancer.errors import SchedulerError
            raise SchedulerError(self)
        return self


_SUCCESS_CODES = frozenset({
    ReturnCode.INITIALIZED,
    ReturnCode.NODE_REGISTERED,
    ReturnCode.NODE_UNREGISTERED,
    ReturnCode.TASK_ADDED,
    ReturnCode.TASK_DELETED,
    ReturnCode.SCHEDULED,
    ReturnCode.NOTHING_TO_SCHEDULE,
    ReturnCode.STATUS_QUERIED,
})
