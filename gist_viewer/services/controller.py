"""Fetch cycle and state for the gist list."""

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Protocol

from pydantic import TypeAdapter, ValidationError

from gist_viewer.exceptions import FetchError, ParseError
from gist_viewer.models.schemas import Gist
from gist_viewer.services.github_client import GITHUB_API_URL, build_gists_url

logger = logging.getLogger(__name__)

DEFAULT_SINCE_THRESHOLD = "2022-01-01T00:00:00Z"
DEFAULT_LIMIT = 100

_gist_list_adapter = TypeAdapter(list[Gist])


class JsonFetcher(Protocol):
    async def fetch_json(self, url: str) -> Any: ...


@dataclass(frozen=True)
class Loading:
    cycle: int


@dataclass(frozen=True)
class Ready:
    cycle: int
    gists: tuple[Gist, ...]


@dataclass(frozen=True)
class Errored:
    cycle: int
    message: str


GistListState = Loading | Ready | Errored


def sort_gists(gists: Iterable[Gist]) -> tuple[Gist, ...]:
    """Most recently updated first; equal timestamps keep their order.

    Gists without an update time go last, in their original order.
    """
    gists = list(gists)
    dated = [gist for gist in gists if gist.updated_at is not None]
    undated = [gist for gist in gists if gist.updated_at is None]
    return tuple(sorted(dated, key=lambda gist: gist.updated_at, reverse=True)) + tuple(undated)


class GistListController:
    """
    Owns the gist list shown for one user.

    Each call to refresh() starts a new fetch cycle. Results of a cycle that
    has been superseded by a later one are dropped, so the latest refresh
    always wins.
    """

    def __init__(
        self,
        client: JsonFetcher,
        username: str,
        since_threshold: str | None = DEFAULT_SINCE_THRESHOLD,
        limit: int = DEFAULT_LIMIT,
        base_url: str = GITHUB_API_URL,
    ):
        if not username:
            raise ValueError("username must not be empty")
        self._client = client
        self._username = username
        self._since_threshold = since_threshold
        self._limit = limit
        self._base_url = base_url
        self._cycle = 0
        self._state: GistListState = Loading(cycle=0)

    @property
    def username(self) -> str:
        return self._username

    @property
    def since_threshold(self) -> str | None:
        return self._since_threshold

    @property
    def cycle(self) -> int:
        return self._cycle

    @property
    def state(self) -> GistListState:
        return self._state

    @property
    def loading(self) -> bool:
        return isinstance(self._state, Loading)

    @property
    def errored(self) -> bool:
        return isinstance(self._state, Errored)

    @property
    def error_message(self) -> str:
        if isinstance(self._state, Errored):
            return self._state.message
        return ""

    @property
    def gists(self) -> tuple[Gist, ...] | None:
        if isinstance(self._state, Ready):
            return self._state.gists
        return None

    @property
    def url(self) -> str:
        return build_gists_url(
            self._username,
            limit=self._limit,
            since=self._since_threshold,
            base_url=self._base_url,
        )

    async def refresh(self) -> GistListState:
        """Run one fetch cycle and return the state it left behind."""
        self._cycle += 1
        cycle = self._cycle
        self._state = Loading(cycle=cycle)

        url = self.url
        logger.debug(f"Fetching gists: {url}")

        try:
            data = await self._client.fetch_json(url)
            gists = sort_gists(self._parse(url, data))
        except FetchError as e:
            new_state: GistListState = Errored(
                cycle=cycle,
                message=f"Unable to fetch Gists API data. Error: {e}",
            )
            logger.error(new_state.message)
        else:
            new_state = Ready(cycle=cycle, gists=gists)
            logger.info(f"Loaded {len(gists)} gists for {self._username}")

        if cycle != self._cycle:
            logger.debug(f"Discarding result of stale fetch cycle {cycle}")
            return self._state

        self._state = new_state
        return new_state

    @staticmethod
    def _parse(url: str, data: Any) -> list[Gist]:
        try:
            return _gist_list_adapter.validate_python(data)
        except ValidationError as e:
            raise ParseError(url, str(e), summary="Unexpected gist payload") from e
