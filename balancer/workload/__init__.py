from balancer.workload.generator import ScenarioGenerator

__all__ = ["ScenarioGenerator"]
