"""
Tests for the Task, TaskInfo, Node and ReturnCode models.

These tests verify:
    1. Task creation and immutability of consumption
    2. Pydantic validation rejects non-positive ids
    3. Node load bookkeeping on assign/release
    4. Success/error classification of result codes
"""

import pytest
from pydantic import ValidationError

from balancer.errors import SchedulerError
from balancer.models.codes import ReturnCode
from balancer.models.node import Node
from balancer.models.task import Task, TaskInfo, UNASSIGNED


# ══════════════════════════════════════════════════════════════════════
# TASK MODEL TESTS
# ══════════════════════════════════════════════════════════════════════

class TestTask:
    """Tests for the Task and TaskInfo models."""

    def test_create_valid_task(self):
        task = Task(id=10, consumption=5)
        assert task.id == 10
        assert task.consumption == 5

    def test_zero_and_negative_consumption_allowed(self):
        """Consumption is an opaque additive weight."""
        assert Task(id=1, consumption=0).consumption == 0
        assert Task(id=2, consumption=-3).consumption == -3

    def test_invalid_task_id(self):
        """Task ids must be strictly positive."""
        with pytest.raises(ValidationError):
            Task(id=0, consumption=5)
        with pytest.raises(ValidationError):
            Task(id=-7, consumption=5)

    def test_consumption_is_immutable(self):
        task = Task(id=1, consumption=5)
        with pytest.raises(ValidationError):
            task.consumption = 10

    def test_task_info_defaults_to_pending(self):
        info = TaskInfo(task_id=3)
        assert info.node_id == UNASSIGNED
        assert info.is_pending is True

    def test_task_info_assigned(self):
        info = TaskInfo(task_id=3, node_id=2)
        assert info.is_pending is False

    def test_task_info_equality(self):
        """Records compare by value so status lists can be asserted directly."""
        assert TaskInfo(task_id=1, node_id=2) == TaskInfo(task_id=1, node_id=2)
        assert TaskInfo(task_id=1, node_id=2) != TaskInfo(task_id=1, node_id=3)


# ══════════════════════════════════════════════════════════════════════
# NODE MODEL TESTS
# ══════════════════════════════════════════════════════════════════════

class TestNode:
    """Tests for the Node model."""

    def test_create_node(self):
        node = Node(id=1)
        assert node.tasks == []
        assert node.load == 0
        assert node.is_idle is True

    def test_invalid_node_id(self):
        with pytest.raises(ValidationError):
            Node(id=0)

    def test_assign_keeps_order_and_load(self):
        node = Node(id=1)
        node.assign_task(20, 4)
        node.assign_task(10, 6)
        assert node.tasks == [20, 10]
        assert node.load == 10
        assert node.is_idle is False

    def test_release_task(self):
        node = Node(id=1)
        node.assign_task(20, 4)
        node.assign_task(10, 6)
        assert node.release_task(20, 4) is True
        assert node.tasks == [10]
        assert node.load == 6

    def test_release_unknown_task(self):
        node = Node(id=1)
        node.assign_task(20, 4)
        assert node.release_task(99, 4) is False
        assert node.load == 4

    def test_negative_consumption_not_clamped(self):
        node = Node(id=1)
        node.assign_task(1, -5)
        assert node.load == -5


# ══════════════════════════════════════════════════════════════════════
# RETURN CODE TESTS
# ══════════════════════════════════════════════════════════════════════

class TestReturnCode:
    """Tests for result code classification."""

    def test_codes_are_unique(self):
        values = [c.value for c in ReturnCode]
        assert len(values) == len(set(values)) == 17

    def test_success_codes(self):
        for code in (
            ReturnCode.INITIALIZED, ReturnCode.NODE_REGISTERED,
            ReturnCode.NODE_UNREGISTERED, ReturnCode.TASK_ADDED,
            ReturnCode.TASK_DELETED, ReturnCode.SCHEDULED,
            ReturnCode.NOTHING_TO_SCHEDULE, ReturnCode.STATUS_QUERIED,
        ):
            assert code.is_success, code

    def test_error_codes(self):
        for code in (
            ReturnCode.INVALID_NODE_ID, ReturnCode.INVALID_TASK_ID,
            ReturnCode.INVALID_THRESHOLD, ReturnCode.NODE_ALREADY_REGISTERED,
            ReturnCode.NODE_NOT_FOUND, ReturnCode.TASK_ALREADY_EXISTS,
            ReturnCode.TASK_NOT_FOUND, ReturnCode.NO_NODES_AVAILABLE,
            ReturnCode.NULL_OUTPUT,
        ):
            assert not code.is_success, code

    def test_raise_for_error(self):
        with pytest.raises(SchedulerError) as exc_info:
            ReturnCode.TASK_NOT_FOUND.raise_for_error()
        assert exc_info.value.code == ReturnCode.TASK_NOT_FOUND
        assert "E012" in str(exc_info.value)

    def test_raise_for_error_passes_success_through(self):
        assert ReturnCode.TASK_ADDED.raise_for_error() is ReturnCode.TASK_ADDED
