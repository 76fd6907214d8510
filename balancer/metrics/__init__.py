from balancer.metrics.collector import LoadReport, MetricsCollector

__all__ = ["LoadReport", "MetricsCollector"]
