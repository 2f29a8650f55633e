"""
Progress Display Helpers
"""

from rich.console import Console
from rich.progress import Progress, BarColumn, SpinnerColumn, TextColumn, TimeElapsedColumn, TaskProgressColumn


class ProgressDisplay:
    """Helper for displaying progress bars"""

    @staticmethod
    def create_simple_progress(console: Console) -> Progress:
        """Create progress bar for collection fetching"""
        return Progress(
            SpinnerColumn(),
            TextColumn("[bold blue]{task.description}"),
            BarColumn(bar_width=40),
            TaskProgressColumn(),
            TimeElapsedColumn(),
            console=console,
            transient=True
        )
