"""Exception raised when a caller opts into exceptions instead of result codes."""

from balancer.models.codes import ReturnCode


_MESSAGES: dict[ReturnCode, str] = {
    ReturnCode.INVALID_THRESHOLD: "threshold must be a positive integer",
    ReturnCode.INVALID_NODE_ID: "node id must be a positive integer",
    ReturnCode.NODE_ALREADY_REGISTERED: "node is already registered",
    ReturnCode.NODE_NOT_FOUND: "node is not registered",
    ReturnCode.INVALID_TASK_ID: "task id must be a positive integer",
    ReturnCode.TASK_ALREADY_EXISTS: "task already exists",
    ReturnCode.TASK_NOT_FOUND: "task does not exist",
    ReturnCode.NO_NODES_AVAILABLE: "no nodes are registered",
    ReturnCode.NULL_OUTPUT: "output collection is None",
}


class SchedulerError(Exception):
    """An error ReturnCode surfaced as an exception."""

    def __init__(self, code: ReturnCode):
        self.code = code
        super().__init__(f"{code.value}: {_MESSAGES.get(code, code.name.lower())}")
