"""
REST client for listing the repositories of a forge account.
"""

import logging
from typing import List, Optional

import requests

from ghclone.core.config import ForgeConfig
from ghclone.core.exceptions import (
    AccountNotFoundError,
    BadRequestError,
    MalformedResponseError,
    TransportError,
    UnexpectedStatusError,
)
from ghclone.forge.models import RepositoryDescriptor

logger = logging.getLogger(__name__)


class ForgeClient:
    """
    Lists repositories through the forge REST API.

    A single GET per call: no retry, no pagination (first page only)
    and no caching.
    """

    def __init__(
        self,
        config: ForgeConfig,
        session: Optional[requests.Session] = None,
    ):
        self.config = config
        self.session = session or requests.Session()

    def repositories_url(self, account_name: str) -> str:
        """URL of the "list repositories for a user" endpoint."""
        return f"{self.config.api_url.rstrip('/')}/users/{account_name}/repos"

    def build_headers(self, account_name: str) -> dict:
        """Headers for a listing request."""
        headers = {
            "Accept": self.config.media_type,
            "User-Agent": self.config.user_agent or account_name,
        }
        if self.config.token:
            headers["Authorization"] = f"Bearer {self.config.token}"
        return headers

    def fetch_repositories(self, account_name: str) -> List[RepositoryDescriptor]:
        """
        Fetch the repositories owned by an account.

        Args:
            account_name: Forge account whose repositories are listed.

        Returns:
            Repository descriptors, in the order the API returned them.

        Raises:
            BadRequestError: On HTTP 400.
            AccountNotFoundError: On HTTP 404.
            UnexpectedStatusError: On any other non-200 status.
            TransportError: If the request could not be completed.
            MalformedResponseError: If the body is not a list of repositories.
        """
        url = self.repositories_url(account_name)
        logger.info(f"Fetching repositories: {url}")

        try:
            response = self.session.get(
                url,
                headers=self.build_headers(account_name),
                timeout=self.config.timeout,
            )
        except requests.RequestException as e:
            raise TransportError(url, str(e)) from e

        logger.debug(f"Response status: {response.status_code}")

        if response.status_code == 400:
            raise BadRequestError(account_name)
        if response.status_code == 404:
            raise AccountNotFoundError(account_name)
        if response.status_code != 200:
            raise UnexpectedStatusError(account_name, response.status_code)

        try:
            payload = response.json()
        except ValueError as e:
            raise MalformedResponseError(f"body is not valid JSON ({e})") from e

        if not isinstance(payload, list):
            raise MalformedResponseError(
                f"expected a JSON array, got {type(payload).__name__}"
            )

        repositories = [RepositoryDescriptor.from_api(entry) for entry in payload]
        logger.info(
            f"Found {len(repositories)} repositories for {account_name}"
        )
        return repositories

    def close(self) -> None:
        """Release the underlying HTTP session."""
        self.session.close()
