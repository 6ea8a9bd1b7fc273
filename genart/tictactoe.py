"""Tic-tac-toe rules, a minimax opponent and click-driven game state."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from functools import lru_cache
from typing import Optional, Sequence

Line = tuple[int, int, int]

WINNING_LINES: tuple[Line, ...] = (
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    (0, 4, 8),
    (2, 4, 6),
)


class Field(Enum):
    """Content of one square."""

    EMPTY = 0
    O = 1
    X = 2

    def __neg__(self) -> Field:
        if self is Field.X:
            return Field.O
        if self is Field.O:
            return Field.X
        return Field.EMPTY

    def __str__(self) -> str:
        return "" if self is Field.EMPTY else self.name


class Player(Enum):
    """The two sides; the human plays X, the computer plays O."""

    HUMAN = 1
    COMPUTER = -1

    def __neg__(self) -> Player:
        return Player.COMPUTER if self is Player.HUMAN else Player.HUMAN

    @property
    def mark(self) -> Field:
        return Field.X if self is Player.HUMAN else Field.O


@dataclass(frozen=True)
class Eval:
    """A candidate move and its minimax score.

    Ordering is by descending score, so sorting puts the best score for the
    computer first.
    """

    position: int
    score: int

    def __lt__(self, other: Eval) -> bool:
        if not isinstance(other, Eval):
            return NotImplemented
        return self.score > other.score

    def __str__(self) -> str:
        return f"pos: {self.position},score: {self.score}\n"


class Status(Enum):
    IN_GAME = "in_game"
    TIE = "tie"
    WINNER = "winner"


@dataclass(frozen=True)
class BoardState:
    """Outcome of a board: still running, a tie, or a win along a line."""

    status: Status
    winner: Optional[Player] = None
    line: Optional[Line] = None

    @classmethod
    def in_game(cls) -> BoardState:
        return cls(Status.IN_GAME)

    @classmethod
    def tie(cls) -> BoardState:
        return cls(Status.TIE)

    @classmethod
    def win(cls, player: Player, line: Line) -> BoardState:
        return cls(Status.WINNER, player, tuple(line))


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle given by its centre and size."""

    x: float
    y: float
    w: float
    h: float

    @classmethod
    def from_x_y_w_h(cls, x: float, y: float, w: float, h: float) -> Rect:
        return cls(float(x), float(y), float(w), float(h))

    @classmethod
    def from_w_h(cls, w: float, h: float) -> Rect:
        return cls(0.0, 0.0, float(w), float(h))

    @property
    def left(self) -> float:
        return self.x - self.w / 2.0

    @property
    def right(self) -> float:
        return self.x + self.w / 2.0

    @property
    def bottom(self) -> float:
        return self.y - self.h / 2.0

    @property
    def top(self) -> float:
        return self.y + self.h / 2.0

    def contains(self, x: float, y: float) -> bool:
        """Whether ``(x, y)`` lies inside or on the edge."""
        return self.left <= x <= self.right and self.bottom <= y <= self.top


def check_winner(board: Sequence[Field]) -> BoardState:
    """State of ``board``: the first completed line wins, a full board ties."""
    if len(board) < 9:
        raise ValueError("a board needs at least 9 squares")
    for line in WINNING_LINES:
        a, b, c = (board[i] for i in line)
        if a == b == c:
            if a is Field.X:
                return BoardState.win(Player.HUMAN, line)
            if a is Field.O:
                return BoardState.win(Player.COMPUTER, line)
    if Field.EMPTY not in board:
        return BoardState.tie()
    return BoardState.in_game()


def minimax(
    state: BoardState, board: Sequence[Field], player: Player, depth: int = 0
) -> Eval:
    """Best move for ``player``; the computer maximises, the human minimises."""
    if state.status is Status.TIE:
        return Eval(0, 0)
    if state.status is Status.WINNER:
        if state.winner is Player.HUMAN:
            return Eval(0, depth - 10)
        return Eval(0, 10 - depth)
    return _best_move(tuple(board), player, depth)


@lru_cache(maxsize=None)
def _best_move(board: tuple[Field, ...], player: Player, depth: int) -> Eval:
    evals = []
    for i, square in enumerate(board):
        if square is not Field.EMPTY:
            continue
        child = board[:i] + (player.mark,) + board[i + 1 :]
        score = minimax(check_winner(child), child, -player, depth + 1).score
        evals.append(Eval(i, score))
    if not evals:
        raise ValueError("no free square on a board that is still in play")
    ranked = sorted(evals)
    return ranked[-1] if player is Player.HUMAN else ranked[0]


def _empty_cells() -> list[Field]:
    return [Field.EMPTY] * 9


@dataclass
class Board:
    """Squares, turn and outcome of one game laid out over ``rect``."""

    rect: Rect
    cells: list[Field] = field(default_factory=_empty_cells)
    player_1: Player = Player.HUMAN
    player_2: Player = Player.COMPUTER
    current_player: Player = Player.HUMAN
    state: BoardState = field(default_factory=BoardState.in_game)

    def computer_move(self) -> None:
        """Let the computer play its best move if it is its turn."""
        if self.state.status is Status.IN_GAME and self.current_player is Player.COMPUTER:
            best = minimax(self.state, self.cells, self.current_player, 0)
            self.cells[best.position] = Field.O
            self.made_move()

    def made_move(self) -> None:
        """Update the outcome and pass the turn."""
        self.state = check_winner(self.cells)
        self.current_player = -self.current_player

    def cell_at(self, x: float, y: float) -> int:
        """Index of the square under the point ``(x, y)``."""
        if x < self.rect.left / 3.0:
            column = 0
        elif x > self.rect.right / 3.0:
            column = 2
        else:
            column = 1
        if y > self.rect.top / 3.0:
            row = 0
        elif y < self.rect.bottom / 3.0:
            row = 2
        else:
            row = 1
        return row * 3 + column

    def register_click(self, x: float, y: float) -> None:
        """Play the current player's mark at the click, or restart a finished game."""
        if self.state.status is not Status.IN_GAME:
            self.reset()
            return
        location = self.cell_at(x, y)
        if self.cells[location] is not Field.EMPTY:
            return
        self.cells[location] = self.current_player.mark
        self.made_move()

    def reset(self) -> None:
        """Start a fresh game on the same rectangle."""
        self.cells = _empty_cells()
        self.player_1 = Player.HUMAN
        self.player_2 = Player.COMPUTER
        self.current_player = Player.HUMAN
        self.state = BoardState.in_game()


class GameMode(Enum):
    SINGLE_PLAYER = "single_player"
    MULTI_PLAYER = "multi_player"
    WAITING = "waiting"


_BUTTON_WIDTH = 150.0
_BUTTON_HEIGHT = _BUTTON_WIDTH / 1.618


class Game:
    """Board plus the chosen mode, starting on the mode selection screen."""

    def __init__(self, rect: Rect) -> None:
        self.board = Board(rect)
        self.mode = GameMode.WAITING

    def check_new(self, rect: Rect, x: float, y: float) -> None:
        """Back to mode selection after a finished game, otherwise pass the click on."""
        if self.board.state.status is not Status.IN_GAME:
            self.mode = GameMode.WAITING
            self.board = Board(rect)
        else:
            self.board.register_click(x, y)

    def check_mode(self, rect: Rect, x: float, y: float) -> GameMode:
        """Mode whose button lies under ``(x, y)``, or ``WAITING`` for none."""
        single = Rect.from_x_y_w_h(rect.left / 3.0, 0.0, _BUTTON_WIDTH, _BUTTON_HEIGHT)
        multi = Rect.from_x_y_w_h(rect.right / 3.0, 0.0, _BUTTON_WIDTH, _BUTTON_HEIGHT)
        if single.contains(x, y):
            return GameMode.SINGLE_PLAYER
        if multi.contains(x, y):
            return GameMode.MULTI_PLAYER
        return GameMode.WAITING