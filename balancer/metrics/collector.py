"""Metrics Collector — summarizes how evenly load is spread across nodes."""

from dataclasses import dataclass, field
from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from balancer.models.node import Node


@dataclass
class LoadReport:
    """Container for all computed load metrics."""
    scheduler_name: str = ""
    total_tasks: int = 0
    tasks_assigned: int = 0
    tasks_pending: int = 0
    node_count: int = 0
    max_load: int = 0
    min_load: int = 0
    per_node_load: dict[int, int] = field(default_factory=dict)
    per_node_tasks: dict[int, int] = field(default_factory=dict)

    @property
    def load_spread(self) -> int:
        """Gap between the heaviest and lightest node."""
        return self.max_load - self.min_load


class MetricsCollector:
    """Computes and prints load-balance metrics."""

    def __init__(self):
        self.report: Optional[LoadReport] = None

    def calculate(
        self,
        nodes: list[Node],
        pending: int,
        scheduler_name: str = "",
    ) -> LoadReport:
        """Compute metrics from the current node states and pending count."""
        report = LoadReport(
            scheduler_name=scheduler_name,
            tasks_pending=pending,
            node_count=len(nodes),
        )

        for node in nodes:
            report.per_node_load[node.id] = node.load
            report.per_node_tasks[node.id] = len(node.tasks)

        report.tasks_assigned = sum(report.per_node_tasks.values())
        report.total_tasks = report.tasks_assigned + pending

        if report.per_node_load:
            report.max_load = max(report.per_node_load.values())
            report.min_load = min(report.per_node_load.values())

        self.report = report
        return report

    def print_report(self, console: Optional[Console] = None) -> None:
        """Print the last calculated report as rich tables."""
        console = console or Console()
        if self.report is None:
            console.print("No metrics calculated yet. Run calculate() first.")
            return

        r = self.report
        console.print(Panel(
            f"[bold cyan]Balancer — Load Report[/bold cyan]\n"
            f"Scheduler: [bold yellow]{r.scheduler_name}[/bold yellow]",
            border_style="cyan",
        ))

        task_table = Table(title="Task Summary", border_style="blue")
        task_table.add_column("Metric", style="bold")
        task_table.add_column("Value", justify="right")
        task_table.add_row("Total Tasks", str(r.total_tasks))
        task_table.add_row("Assigned", f"[green]{r.tasks_assigned}[/green]")
        task_table.add_row("Pending", f"[yellow]{r.tasks_pending}[/yellow]")
        task_table.add_row("Nodes", str(r.node_count))
        task_table.add_row("Max Load", str(r.max_load))
        task_table.add_row("Min Load", str(r.min_load))
        task_table.add_row("Load Spread", str(r.load_spread))
        console.print(task_table)

        if r.per_node_load:
            node_table = Table(title="Node Load", border_style="magenta")
            node_table.add_column("Node", style="bold")
            node_table.add_column("Tasks", justify="right")
            node_table.add_column("Load", justify="right")
            peak = max(r.max_load, 1)
            for node_id, load in sorted(r.per_node_load.items()):
                bar_len = max(0, int(load / peak * 20))
                bar = "█" * bar_len + "░" * (20 - bar_len)
                node_table.add_row(str(node_id), str(r.per_node_tasks[node_id]), f"{bar} {load}")
            console.print(node_table)
