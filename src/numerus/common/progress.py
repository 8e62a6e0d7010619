"""Progress reporting for long-running numeral conversions.

Batch jobs can convert tens of thousands of table cells; this printer keeps
the user informed without flooding the console.
"""


class ProgressPrinter:
    """Progress printer for console output.

    Updates a single console line in place using carriage returns. Redraws
    are throttled to every `step` items so very large batches do not spend
    their time printing.

    Attributes:
        task_name: Description of the task being performed
        total: Total number of items to process
        step: Only every step-th item (and the last one) is drawn

    Example:
        >>> progress = ProgressPrinter("Converting numerals", 1000, step=100)
        >>> for i in range(1000):
        ...     progress.update(i + 1)
        >>> progress.done()
        Converting numerals...Done!
    """

    def __init__(self, task_name: str, total: int, step: int = 1):
        self.task_name = task_name
        self.total = total
        self.step = max(1, step)

    def update(self, current: int) -> None:
        """Redraw the progress line as "Task...X/Y".

        Args:
            current: Current item number (1-based, not 0-based)
        """
        if current % self.step and current != self.total:
            return
        print(f"{self.task_name}...{current}/{self.total}", end='\r', flush=True)

    def done(self) -> None:
        """Print the final "Done!" line."""
        print(f"{self.task_name}...Done!    ")  # Extra spaces clear any remaining digits
