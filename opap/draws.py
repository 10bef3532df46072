from __future__ import annotations

from typing import TYPE_CHECKING, List, Tuple, Union

import requests
from pydantic import Field

from .config import DEFAULT_DRAWS_ENDPOINT
from .types import Draw, Game, JsonPayload, PropoDraw, PropoGame

if TYPE_CHECKING:  # pragma: no cover
    from .client import Client


# The service wraps a single draw as {"draw": {...}} and the draws of a date
# as {"draws": {"draw": [...]}}. These shapes never leave this module.


class _DrawEnvelope(JsonPayload):
    draw: Draw = Field(default_factory=Draw)


class _DrawList(JsonPayload):
    draw: List[Draw] = Field(default_factory=list)


class _DrawsByDateEnvelope(JsonPayload):
    draws: _DrawList = Field(default_factory=_DrawList)


class _PropoDrawEnvelope(JsonPayload):
    draw: PropoDraw = Field(default_factory=PropoDraw)


class _PropoDrawList(JsonPayload):
    draw: List[PropoDraw] = Field(default_factory=list)


class _PropoDrawsByDateEnvelope(JsonPayload):
    draws: _PropoDrawList = Field(default_factory=_PropoDrawList)


def _game_segment(game: Union[Game, str]) -> str:
    try:
        return Game(game).value
    except ValueError as exc:
        raise ValueError(f"Unknown game: {game!r}") from exc


def _propo_segment(game: Union[PropoGame, str]) -> str:
    try:
        return PropoGame(game).value
    except ValueError as exc:
        raise ValueError(f"Unknown Propo game: {game!r}") from exc


def _integer(value: int, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, got {value!r}")
    return value


def _date_segment(day: int, month: int, year: int) -> str:
    # The service expects no zero padding, e.g. 5-1-2018.
    return "%d-%d-%d" % (
        _integer(day, "day"),
        _integer(month, "month"),
        _integer(year, "year"),
    )


class DrawsService:
    """Looks up draw results on the DrawsRestServices endpoint.

    Every method performs exactly one GET and returns the unwrapped result
    together with the `requests.Response`. Errors from `Client.get`
    propagate unchanged.
    """

    def __init__(self, client: "Client", endpoint: str = DEFAULT_DRAWS_ENDPOINT) -> None:
        self._client = client
        self.endpoint = endpoint

    def latest(self, game: Union[Game, str]) -> Tuple[Draw, requests.Response]:
        path = f"{self.endpoint}/{_game_segment(game)}/last.json"
        envelope, resp = self._client.get(path, _DrawEnvelope)
        return envelope.draw, resp

    def by_number(self, game: Union[Game, str], number: int) -> Tuple[Draw, requests.Response]:
        path = f"{self.endpoint}/{_game_segment(game)}/{_integer(number, 'number')}.json"
        envelope, resp = self._client.get(path, _DrawEnvelope)
        return envelope.draw, resp

    def by_date(
        self, game: Union[Game, str], day: int, month: int, year: int
    ) -> Tuple[List[Draw], requests.Response]:
        """Return the draws held on a date; a date may have none or several."""
        path = f"{self.endpoint}/{_game_segment(game)}/drawDate/{_date_segment(day, month, year)}.json"
        envelope, resp = self._client.get(path, _DrawsByDateEnvelope)
        return list(envelope.draws.draw), resp

    def propo_latest(self, game: Union[PropoGame, str]) -> Tuple[PropoDraw, requests.Response]:
        path = f"{self.endpoint}/{_propo_segment(game)}/last.json"
        envelope, resp = self._client.get(path, _PropoDrawEnvelope)
        return envelope.draw, resp

    def propo_by_number(
        self, game: Union[PropoGame, str], number: int
    ) -> Tuple[PropoDraw, requests.Response]:
        path = f"{self.endpoint}/{_propo_segment(game)}/{_integer(number, 'number')}.json"
        envelope, resp = self._client.get(path, _PropoDrawEnvelope)
        return envelope.draw, resp

    def propo_by_date(
        self, game: Union[PropoGame, str], day: int, month: int, year: int
    ) -> Tuple[List[PropoDraw], requests.Response]:
        path = f"{self.endpoint}/{_propo_segment(game)}/drawDate/{_date_segment(day, month, year)}.json"
        envelope, resp = self._client.get(path, _PropoDrawsByDateEnvelope)
        return list(envelope.draws.draw), resp
