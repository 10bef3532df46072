from __future__ import annotations

from enum import Enum
from typing import Any, Tuple

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, model_validator


class Game(str, Enum):
    """Games served by the draws endpoint, except Propo."""

    KINO = "kino"
    LOTTO = "lotto"
    JOKER = "joker"
    PROTO = "proto"
    SUPER3 = "super3"
    EXTRA5 = "extra5"
    PROPOGOAL = "propogoal"
    PENALTIES = "penalties"
    BOWLING = "bowling"
    # The second character is a Greek small omicron (U+03BF).
    POWERSPIN = "p\u03bfwerspin"

    def __str__(self) -> str:
        return self.value


class PropoGame(str, Enum):
    """The Propo games, whose results are match outcomes rather than numbers."""

    SUN = "proposun"
    SAT = "proposat"
    WED = "propowed"

    def __str__(self) -> str:
        return self.value


class JsonPayload(BaseModel):
    """Base for models decoded from the service.

    JSON nulls are treated like missing members, so they decode to the
    field's zero value. A null document decodes like an empty object.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if data is None:
            return {}
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class Draw(JsonPayload):
    """The results of a game's draw.

    `draw_time` is kept verbatim as sent by the service, e.g.
    ``"24-12-2017T22:00:00"``. The number of results depends on the game;
    for Joker the last result is the joker number.
    """

    draw_time: StrictStr = Field("", alias="drawTime")
    draw_no: StrictInt = Field(0, alias="drawNo")
    results: Tuple[StrictInt, ...] = ()


class PropoDraw(JsonPayload):
    """The results of a Propo draw, one outcome ("1", "X" or "2") per match."""

    draw_time: StrictStr = Field("", alias="drawTime")
    draw_no: StrictInt = Field(0, alias="drawNo")
    results: Tuple[StrictStr, ...] = ()
