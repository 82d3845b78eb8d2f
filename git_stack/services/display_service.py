"""Display service for sync and submit results"""
from rich.console import Console
from rich.table import Table

from git_stack.formatters import format_state
from git_stack.logging_config import get_logger
from git_stack.models.review import ReviewRecord
from git_stack.models.sync import SyncResult

console = Console()
logger = get_logger(__name__)


class DisplayService:
    def __init__(self, verbose: bool = False, debug: bool = False):
        self.verbose = verbose
        self.debug_mode = debug

    def display_sync_result(self, result: SyncResult) -> None:
        """Print a summary of a sync pass."""
        if self.verbose and result.kept:
            table = Table()
            table.add_column("Branch")
            table.add_column("PR")
            table.add_column("Notes")
            for branch, state in result.kept.items():
                notes = result.failed.get(branch, "")
                table.add_row(branch, format_state(state), notes)
            console.print(table)

        verb = "Would remove" if result.dry_run else "Removed"
        if result.removed:
            console.print(f"[green]{verb} {len(result.removed)} branch(es): {', '.join(result.removed)}[/green]")
        else:
            console.print("No branches with closed PRs")

        if result.relocated:
            switched = "Would switch" if result.dry_run else "Switched"
            console.print(f"{switched} to {result.trunk}")

        for branch, error in result.failed.items():
            console.print(f"[yellow]Skipped {branch}: {error}[/yellow]")

        if not result.dry_run and not result.trunk_updated:
            console.print(f"[yellow]Could not update {result.trunk}; run 'git pull' manually[/yellow]")

        console.print("Sync complete")

    def display_review(self, branch: str, record: ReviewRecord, created: bool) -> None:
        action = "Created" if created else "Updated"
        label = f"#{record.number}" if record.number is not None else "pull request"
        console.print(f"[green]{action} {label} for {branch}[/green]")
        if record.url:
            console.print(record.url)
