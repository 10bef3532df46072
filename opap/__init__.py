"""Client for the OPAP draw results REST services.

Construct a client and look up draws through ``client.draws``::

    from opap import Client, Game, PropoGame

    client = Client()

    draw, _ = client.draws.latest(Game.LOTTO)
    draw, _ = client.draws.by_number(Game.JOKER, 1873)
    draws, _ = client.draws.by_date(Game.KINO, 27, 12, 2017)

`latest` and `by_number` return one `Draw`; `by_date` returns a list, since a
date can have zero or many draws. A Joker draw looks like::

    Draw(draw_time="24-12-2017T22:00:00", draw_no=1873, results=[40, 13, 1, 24, 15, 8])

where the last result is the joker number. The Propo games have equivalent
methods returning `PropoDraw` objects with string results::

    draw, _ = client.draws.propo_latest(PropoGame.WED)
    draw, _ = client.draws.propo_by_number(PropoGame.SAT, 201751)
    draws, _ = client.draws.propo_by_date(PropoGame.SUN, 17, 12, 2017)

The second value of every call is the `requests.Response`. Failures raise an
`OpapError` subclass, with the response attached when one was received.

For more control pass a `requests.Session` and a timeout in seconds::

    client = Client(requests.Session(), timeout=1)
"""

from .client import Client
from .config import (
    DEFAULT_BASE_URL,
    DEFAULT_DRAWS_ENDPOINT,
    ClientSettings,
    load_from_environment,
    load_settings,
)
from .draws import DrawsService
from .errors import DecodeError, HTTPStatusError, MalformedURLError, OpapError, TransportError
from .types import Draw, Game, PropoDraw, PropoGame

__all__ = [
    "Client",
    "ClientSettings",
    "DEFAULT_BASE_URL",
    "DEFAULT_DRAWS_ENDPOINT",
    "DecodeError",
    "Draw",
    "DrawsService",
    "Game",
    "HTTPStatusError",
    "MalformedURLError",
    "OpapError",
    "PropoDraw",
    "PropoGame",
    "TransportError",
    "load_from_environment",
    "load_settings",
]
