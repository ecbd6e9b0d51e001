"""
Command-line interface for ghclone.

Runs the interactive workflow: pick a GitHub account, choose some of its
repositories and clone them into a local directory.
"""

import sys
from pathlib import Path
from typing import Optional

import click
from dotenv import load_dotenv

from ghclone import __version__
from ghclone.core import exitcodes
from ghclone.core.config import Config
from ghclone.core.exceptions import (
    ConfigurationError,
    FetchError,
    PromptAbortedError,
    WorkflowError,
)
from ghclone.core.workflow import CloneWorkflow
from ghclone.git.cloner import CloneReport
from ghclone.prompts import Prompter
from ghclone.utils.logging_config import get_logger, setup_logging

logger = get_logger(__name__)


def report_clones(report: CloneReport) -> None:
    """Print a summary of the clone stage."""
    if not report.attempted:
        return

    for name in report.cloned:
        click.echo(f"[ok] {name}")
    for name, reason in report.failed.items():
        click.echo(f"[fail] {name}: {reason}", err=True)

    click.echo(
        f"Done. {len(report.cloned)}/{report.attempted} succeeded "
        f"in {report.destination}."
    )


@click.command()
@click.version_option(version=__version__)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    help="Enable verbose output"
)
@click.option(
    "--log-file",
    type=click.Path(),
    help="Path to log file"
)
@click.option(
    "--config", "config_path",
    type=click.Path(),
    help="JSON configuration file"
)
@click.option(
    "--wait/--no-wait",
    default=None,
    help="Wait for each clone to finish (default) or launch and move on"
)
def cli(verbose: bool, log_file: Optional[str], config_path: Optional[str],
        wait: Optional[bool]):
    """
    Clone repositories of a GitHub account, picked interactively.

    Asks for a username, lists the account's public repositories, lets you
    choose which to clone and where, then runs `git clone` for each.

    Examples:

        ghclone

        ghclone --no-wait -v
    """
    load_dotenv()

    try:
        config = Config.load_from_env()
        if config_path:
            config = Config.load_from_file(config_path)
    except ConfigurationError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(exitcodes.CONFIG)

    if verbose:
        config.verbose = True
    if wait is not None:
        config.clone.wait = wait

    log_level = "DEBUG" if config.verbose else "WARNING"
    setup_logging(level=log_level, log_file=Path(log_file) if log_file else None)

    prompter = Prompter(config.theme)
    workflow = CloneWorkflow(config, prompter=prompter)

    try:
        report = workflow.run()
    except PromptAbortedError as e:
        click.echo()
        prompter.error(str(e))
        sys.exit(exitcodes.INTERRUPTED)
    except FetchError as e:
        prompter.error(str(e))
        sys.exit(exitcodes.UNAVAILABLE)
    except WorkflowError as e:
        prompter.error(str(e))
        if config.verbose:
            import traceback
            traceback.print_exc()
        sys.exit(exitcodes.FAILURE)
    finally:
        workflow.client.close()

    report_clones(report)

    if not report.is_successful:
        logger.debug(f"Clone failures: {report.failed}")
        sys.exit(exitcodes.FAILURE)

    sys.exit(exitcodes.OK)


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
