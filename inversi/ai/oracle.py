"""
External move oracles for the automated player.

An oracle gets a text description of the position and answers with free
text that should contain a coordinate such as "C4". Answers are never
trusted: OracleAgent parses and checks them and falls back to the
heuristic on anything unexpected.
"""
import asyncio
import inspect
import logging
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Callable, Dict, Optional

import aiohttp

from ..core.board import Player
from ..core.notation import format_legal_moves, render_board

logger = logging.getLogger(__name__)

_MOVE_LIST_RE = re.compile(r"[A-H][1-8]")

PROMPT_TEMPLATE = """You are the {side} player in Inversi, a reverse Othello variant.

Rules:
- A piece may only be placed next to an existing piece.
- A piece may not be placed where it would flip opponent pieces.
- A player with no legal move must pass; the game ends when neither side can move.

Current board (● black, ○ white):
{board}
Piece counts: black={black}, white={white}

Legal moves: {moves}

Corners and edges are strong positions. Prefer moves that limit the
opponent's options.

Answer with exactly one move in the form "A1". No explanation."""


class OracleError(Exception):
    """Raised when an oracle cannot produce an answer."""


@dataclass(frozen=True)
class OracleRequest:
    """Everything an oracle is told about the position."""
    board_text: str
    legal_moves_text: str
    counts: Dict[str, int] = field(default_factory=dict)
    player: Player = Player.WHITE

    @classmethod
    def from_position(cls, board, player, legal_moves):
        return cls(
            board_text=render_board(board),
            legal_moves_text=format_legal_moves(legal_moves),
            counts=board.count_pieces(),
            player=Player(player),
        )

    def to_prompt(self):
        return PROMPT_TEMPLATE.format(
            side=self.player.label.lower(),
            board=self.board_text,
            black=self.counts.get('black', 0),
            white=self.counts.get('white', 0),
            moves=self.legal_moves_text,
        )


class Oracle(ABC):
    """Single-method move suggestion service."""

    @abstractmethod
    async def decide(self, request: OracleRequest) -> str:
        """Return free text expected to contain a coordinate."""
        raise NotImplementedError


class ScriptedOracle(Oracle):
    """
    Offline oracle that reads the legal move list from the request text
    and answers corner first, then edge, then the first listed move.
    """

    async def decide(self, request: OracleRequest) -> str:
        moves = _MOVE_LIST_RE.findall(request.legal_moves_text.upper())
        if not moves:
            raise OracleError("no legal moves in request")

        corners = [m for m in moves if m[0] in "AH" and m[1] in "18"]
        if corners:
            return corners[0]
        edges = [m for m in moves if m[0] in "AH" or m[1] in "18"]
        if edges:
            return edges[0]
        return moves[0]


class CallableOracle(Oracle):
    """Adapts a plain function (sync or async) taking an OracleRequest."""

    def __init__(self, func: Callable):
        self.func = func

    async def decide(self, request: OracleRequest) -> str:
        result = self.func(request)
        if inspect.isawaitable(result):
            result = await result
        return result


class HttpOracle(Oracle):
    """
    Oracle backed by an HTTP endpoint.

    POSTs the prompt and position as JSON and accepts either a JSON body
    with a "move" field or a plain text body.
    """

    def __init__(self, url: str, token: Optional[str] = None,
                 timeout: float = 30.0,
                 session: Optional[aiohttp.ClientSession] = None):
        self.url = url
        self.token = token
        self.timeout = timeout
        self._session = session

    async def decide(self, request: OracleRequest) -> str:
        payload = {
            "prompt": request.to_prompt(),
            "legal_moves": request.legal_moves_text,
            "counts": dict(request.counts),
            "player": request.player.label.lower(),
        }
        if self._session is not None:
            return await self._post(self._session, payload)
        async with aiohttp.ClientSession() as session:
            return await self._post(session, payload)

    async def _post(self, session, payload) -> str:
        headers = {}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"

        try:
            async with session.post(
                self.url,
                json=payload,
                headers=headers,
                timeout=aiohttp.ClientTimeout(total=self.timeout),
            ) as resp:
                if resp.status // 100 != 2:
                    raise OracleError(f"oracle returned HTTP {resp.status}")
                if resp.content_type == "application/json":
                    data = await resp.json()
                    if not isinstance(data, dict) or "move" not in data:
                        raise OracleError(f"unexpected oracle reply: {data!r}")
                    return str(data["move"])
                return await resp.text()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise OracleError(f"oracle request to {self.url} failed: {e}") from e


def create_oracle(config):
    """
    Build the oracle named by a configuration.

    Returns:
        Oracle or None: None means heuristic only
    """
    if config.oracle == "none":
        return None
    if config.oracle == "scripted":
        return ScriptedOracle()
    if config.oracle == "http":
        logger.info("Using HTTP oracle at %s", config.oracle_url)
        return HttpOracle(config.oracle_url, token=config.oracle_token,
                          timeout=config.oracle_timeout)
    raise ValueError(f"unknown oracle kind: {config.oracle!r}")
