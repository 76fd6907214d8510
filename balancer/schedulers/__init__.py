from balancer.schedulers.base import BaseScheduler, Assignment
from balancer.schedulers.least_loaded import LeastLoadedScheduler

POLICIES: dict[str, type[BaseScheduler]] = {
    "least_loaded": LeastLoadedScheduler,
}


def get_scheduler(name: str) -> BaseScheduler:
    """Factory function to get a placement policy by name."""
    if name.lower() not in POLICIES:
        available = ", ".join(POLICIES.keys())
        raise ValueError(f"Unknown scheduler: {name}. Available: {available}")
    return POLICIES[name.lower()]()


__all__ = ["BaseScheduler", "Assignment", "LeastLoadedScheduler", "POLICIES", "get_scheduler"]
