"""Task Scheduler — in-memory node/task registry and load-balancing engine."""

import threading
from collections import deque
from typing import Optional

from balancer.config import Config
from balancer.engine.events import OperationEvent, OperationType
from balancer.metrics.collector import LoadReport, MetricsCollector
from balancer.models.codes import ReturnCode
from balancer.models.node import Node
from balancer.models.task import Task, TaskInfo, UNASSIGNED
from balancer.schedulers import Assignment, BaseScheduler, get_scheduler
from balancer.utils.logging import get_logger

log = get_logger("engine")


class TaskScheduler:
    """Owns the node registry, the task cost table and the pending queue.

    Every public method takes the instance lock for its whole duration, so a
    scheduling pass is never interleaved with another caller's mutation.
    Caller errors are reported through ReturnCode, never raised.
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        policy: Optional[BaseScheduler] = None,
    ):
        self.config = config or Config()
        self.policy = policy or get_scheduler(self.config.scheduler.policy)

        self._lock = threading.Lock()
        self._nodes: dict[int, Node] = {}
        self._tasks: dict[int, Task] = {}
        self._pending: set[int] = set()
        self._event_counter: int = 0
        self.event_log: deque[OperationEvent] = deque(maxlen=self.config.scheduler.history_size)

    # ── Registry ──────────────────────────────────────────────────────

    def init(self) -> ReturnCode:
        """Drop all nodes, tasks and history."""
        with self._lock:
            self._nodes.clear()
            self._tasks.clear()
            self._pending.clear()
            self.event_log.clear()
            self._event_counter = 0
            log.debug("Scheduler state reset")
            return self._record(OperationType.INIT, ReturnCode.INITIALIZED)

    def register_node(self, node_id: int) -> ReturnCode:
        with self._lock:
            if node_id <= 0:
                code = ReturnCode.INVALID_NODE_ID
            elif node_id in self._nodes:
                code = ReturnCode.NODE_ALREADY_REGISTERED
            else:
                self._nodes[node_id] = Node(id=node_id)
                code = ReturnCode.NODE_REGISTERED
            return self._record(OperationType.REGISTER_NODE, code, node_id=node_id)

    def unregister_node(self, node_id: int) -> ReturnCode:
        """Remove a node; its tasks go back to the pending queue."""
        with self._lock:
            if node_id <= 0:
                code = ReturnCode.INVALID_NODE_ID
            elif node_id not in self._nodes:
                code = ReturnCode.NODE_NOT_FOUND
            else:
                node = self._nodes.pop(node_id)
                self._pending.update(node.tasks)
                if node.tasks:
                    log.info(f"Node {node_id} removed, {len(node.tasks)} task(s) returned to pending")
                code = ReturnCode.NODE_UNREGISTERED
            return self._record(OperationType.UNREGISTER_NODE, code, node_id=node_id)

    def add_task(self, task_id: int, consumption: int) -> ReturnCode:
        with self._lock:
            if task_id <= 0:
                code = ReturnCode.INVALID_TASK_ID
            elif task_id in self._tasks:
                code = ReturnCode.TASK_ALREADY_EXISTS
            else:
                self._tasks[task_id] = Task(id=task_id, consumption=consumption)
                self._pending.add(task_id)
                code = ReturnCode.TASK_ADDED
            return self._record(OperationType.ADD_TASK, code, task_id=task_id)

    def delete_task(self, task_id: int) -> ReturnCode:
        """Remove a task from the pending queue or from whichever node holds it."""
        with self._lock:
            if task_id <= 0:
                code = ReturnCode.INVALID_TASK_ID
            elif self._remove_task(task_id):
                del self._tasks[task_id]
                code = ReturnCode.TASK_DELETED
            else:
                code = ReturnCode.TASK_NOT_FOUND
            return self._record(OperationType.DELETE_TASK, code, task_id=task_id)

    def _remove_task(self, task_id: int) -> bool:
        """Pending queue first, then every node. Caller holds the lock."""
        if task_id in self._pending:
            self._pending.remove(task_id)
            return True
        task = self._tasks.get(task_id)
        if task is None:
            return False
        for node in self._nodes.values():
            if node.release_task(task_id, task.consumption):
                return True
        return False

    # ── Scheduling ────────────────────────────────────────────────────

    def schedule_task(self, threshold: int) -> ReturnCode:
        """Drain the pending queue onto the registered nodes in one pass.

        The threshold must be positive but does not affect placement. Raises
        ValueError, with nothing applied, if the policy does not place every
        pending task exactly once on a registered node.
        """
        with self._lock:
            if threshold <= 0:
                code = ReturnCode.INVALID_THRESHOLD
            elif not self._nodes:
                code = ReturnCode.NO_NODES_AVAILABLE
            elif not self._pending:
                code = ReturnCode.NOTHING_TO_SCHEDULE
            else:
                self._run_pass()
                code = ReturnCode.SCHEDULED
            return self._record(OperationType.SCHEDULE, code)

    def _run_pass(self) -> None:
        pending = [self._tasks[task_id] for task_id in self._pending]
        assignments = self.policy.schedule(pending, list(self._nodes.values()))
        self._check_assignments(assignments)

        for assignment in assignments:
            task = self._tasks[assignment.task_id]
            self._nodes[assignment.node_id].assign_task(task.id, task.consumption)
            self._pending.discard(task.id)

        log.info(
            f"Scheduling pass placed {len(assignments)} task(s) on "
            f"{len(self._nodes)} node(s) using {self.policy.name}"
        )

    def _check_assignments(self, assignments: list[Assignment]) -> None:
        """Reject a pass unless it places every pending task exactly once on a known node.

        Runs before anything is applied, so a bad policy leaves state untouched.
        """
        placed = [a.task_id for a in assignments]
        unknown_nodes = sorted({a.node_id for a in assignments if a.node_id not in self._nodes})
        if unknown_nodes:
            raise ValueError(f"{self.policy.name} assigned tasks to unregistered node(s) {unknown_nodes}")
        if len(placed) != len(set(placed)) or set(placed) != self._pending:
            missing = sorted(self._pending - set(placed))
            extra = sorted(set(placed) - self._pending)
            raise ValueError(
                f"{self.policy.name} must place every pending task exactly once "
                f"(missing={missing}, unexpected={extra}, assignments={len(placed)})"
            )

    # ── Reporting ─────────────────────────────────────────────────────

    def query_task_status(self, tasks: Optional[list[TaskInfo]]) -> ReturnCode:
        """Replace the contents of `tasks` with every task's placement, sorted by id."""
        with self._lock:
            if tasks is None:
                code = ReturnCode.NULL_OUTPUT
            else:
                tasks[:] = self._status()
                code = ReturnCode.STATUS_QUERIED
            return self._record(OperationType.QUERY, code)

    def snapshot(self) -> list[TaskInfo]:
        """Sorted status records, returned instead of written into a list."""
        with self._lock:
            return self._status()

    def node_tasks(self, node_id: int) -> Optional[list[int]]:
        """Task ids on a node in assignment order, or None for an unknown node."""
        with self._lock:
            node = self._nodes.get(node_id)
            return list(node.tasks) if node is not None else None

    def load_report(self) -> LoadReport:
        """Per-node load summary for the current placement."""
        with self._lock:
            return MetricsCollector().calculate(
                nodes=list(self._nodes.values()),
                pending=len(self._pending),
                scheduler_name=self.policy.name,
            )

    def _status(self) -> list[TaskInfo]:
        records = [TaskInfo(task_id=task_id, node_id=UNASSIGNED) for task_id in self._pending]
        for node in self._nodes.values():
            records.extend(TaskInfo(task_id=task_id, node_id=node.id) for task_id in node.tasks)
        records.sort(key=lambda r: r.task_id)
        return records

    # ── Utilities ─────────────────────────────────────────────────────

    def _record(
        self,
        op: OperationType,
        code: ReturnCode,
        node_id: Optional[int] = None,
        task_id: Optional[int] = None,
    ) -> ReturnCode:
        """Append to the operation log and return the code. Caller holds the lock."""
        self._event_counter += 1
        self.event_log.append(OperationEvent(
            sequence=self._event_counter,
            op=op,
            code=code,
            node_id=node_id,
            task_id=task_id,
        ))
        if code.is_success:
            log.debug(f"{op.value} node={node_id} task={task_id} -> {code.name}")
        else:
            log.debug(f"{op.value} node={node_id} task={task_id} rejected: {code.name}")
        return code
