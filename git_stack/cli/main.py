"""Command-line entry point for git-stack"""

import os
import sys

from rich.console import Console

from git_stack.cli.args import parse_args
from git_stack.config import Config
from git_stack.constants import EXIT_ERROR, EXIT_OK, EXIT_USAGE
from git_stack.exceptions import GitStackError, UsageError
from git_stack.logging_config import setup_logging
from git_stack.services.prerequisites import check_git_installed

err_console = Console(stderr=True)


def run(parsed_args) -> int:
    """Build the configuration and run the selected command."""
    # Must precede any import of GitPython
    check_git_installed()
    from git_stack.core import StackKeeper

    config = Config.from_env(
        branch_prefix=parsed_args.branch_prefix,
        max_branch_length=parsed_args.max_branch_length,
        remote_name=parsed_args.remote_name,
        verbose=parsed_args.verbose,
        debug=parsed_args.debug,
    )

    if parsed_args.debug:
        err_console.print("[yellow]Configuration:[/yellow]")
        for key, value in config.to_dict().items():
            err_console.print(f"  {key}: {value}")

    keeper = StackKeeper(os.getcwd(), config)
    keeper.check_prerequisites(parsed_args.command)

    if parsed_args.command == "create":
        keeper.create(parsed_args.message)
    elif parsed_args.command == "submit":
        keeper.submit(web=parsed_args.web)
    elif parsed_args.command == "sync":
        keeper.sync(dry_run=parsed_args.dry_run)

    return EXIT_OK


def main(argv=None) -> int:
    """Main entry point for the application."""
    parsed_args = parse_args(argv)
    setup_logging(verbose=parsed_args.verbose, debug=parsed_args.debug)

    try:
        return run(parsed_args)
    except KeyboardInterrupt:
        err_console.print("\n[yellow]Operation cancelled by user[/yellow]")
        return EXIT_ERROR
    except UsageError as e:
        err_console.print(f"[red]Error: {e}[/red]")
        return EXIT_USAGE
    except GitStackError as e:
        err_console.print(f"[red]Error: {e}[/red]")
        if parsed_args.debug:
            err_console.print_exception()
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
