"""
Workflow orchestration for ghclone.

Runs the stages in a fixed order: ask for the account, fetch its
repositories, ask which ones to clone, ask where, then clone. There is
no way back to an earlier stage; any error ends the run.
"""

import logging
from enum import Enum
from typing import Optional

import click

from ghclone.core.config import AppConfig
from ghclone.forge.client import ForgeClient
from ghclone.forge.models import RepositoryIndex
from ghclone.git.cloner import CloneReport, GitCloner
from ghclone.prompts import Prompter

logger = logging.getLogger(__name__)


class WorkflowStage(Enum):
    """Stages of a run, in execution order."""
    PROMPT_ACCOUNT = "prompt_account"
    FETCH = "fetch"
    BUILD_INDEX = "build_index"
    PROMPT_SELECTION = "prompt_selection"
    PROMPT_DESTINATION = "prompt_destination"
    CLONE = "clone"
    DONE = "done"


class CloneWorkflow:
    """
    Sequences the prompts, the forge request and the clones.

    Collaborators are injected so that each can be replaced in tests.
    """

    def __init__(
        self,
        config: AppConfig,
        prompter: Optional[Prompter] = None,
        client: Optional[ForgeClient] = None,
        cloner: Optional[GitCloner] = None,
    ):
        self.config = config
        self.prompter = prompter or Prompter(config.theme)
        self.client = client or ForgeClient(config.forge)
        self.cloner = cloner or GitCloner(config.clone)
        self.stage: Optional[WorkflowStage] = None

    def _enter(self, stage: WorkflowStage) -> None:
        self.stage = stage
        logger.debug(f"Entering stage: {stage.value}")

    def run(self) -> CloneReport:
        """
        Execute the whole workflow.

        Returns:
            CloneReport of the clone stage. An empty report is returned when
            the account has no repositories or nothing was selected.

        Raises:
            PromptAbortedError: If the user interrupts a prompt.
            FetchError: If the repositories cannot be listed.
            GitNotAvailableError: If git is missing and clones were requested.
        """
        self._enter(WorkflowStage.PROMPT_ACCOUNT)
        account_name = self.prompter.account_name()

        self._enter(WorkflowStage.FETCH)
        descriptors = self.client.fetch_repositories(account_name)

        self._enter(WorkflowStage.BUILD_INDEX)
        index = RepositoryIndex(descriptors)

        if not len(index):
            click.echo(f"No repositories found for {account_name}.")
            self._enter(WorkflowStage.DONE)
            return CloneReport(destination="")

        self._enter(WorkflowStage.PROMPT_SELECTION)
        selection = self.prompter.repositories(index)

        if not selection:
            click.echo("No repositories selected. Nothing to clone.")
            self._enter(WorkflowStage.DONE)
            return CloneReport(destination="")

        self._enter(WorkflowStage.PROMPT_DESTINATION)
        destination = self.prompter.destination_dir(
            self.config.default_destination
        )

        self._enter(WorkflowStage.CLONE)
        report = self.cloner.clone_selected(index, selection, destination)

        self._enter(WorkflowStage.DONE)
        logger.info(
            f"Cloned {len(report.cloned)}/{report.attempted} repositories "
            f"into {destination}"
        )
        return report
