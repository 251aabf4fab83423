"""
The GameState is the entrypoint into the domain layer for the service layer.
It is responsible for orchestrating all the business logic required to play a turn:
selecting a piece, moving it, keeping track of captures / the move history, and the resulting status of the game.

Every transition returns a NEW GameState. Nothing in here mutates a state that was handed out before.
"""

import logging
from dataclasses import dataclass, replace
from typing import Optional, Self

from src.chess.board import Board
from src.chess.notation import format_move
from src.chess.pieces import Color, Piece, PieceType
from src.chess.rules import game_status, legal_moves
from src.chess.square import Square
from src.core.exceptions import GameStateError, OutOfBoundsError
from src.core.models import GameModel, PieceRecord
from src.core.shared_types import Status

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameState:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    board: Board
    current_player: Color = Color.WHITE
    selected_square: Optional[Square] = None
    legal_moves: tuple[Square, ...] = ()
    status: Status = Status.PLAYING
    captured_pieces: tuple[Piece, ...] = ()
    move_log: tuple[str, ...] = ()

    @classmethod
    def initial(cls) -> Self:
        """Standard starting position, white to move."""
        board = Board.starting_position()
        return cls(board=board, status=game_status(board, Color.WHITE))

    @classmethod
    def from_model(cls, model: GameModel) -> Self:
        """Define how to construct a GameState from the information the Service layer actually has

        NOTE: legal moves and status are derived data. They get recomputed here, the stored values are not trusted.
        """

        # Validation
        if model.current_player not in [color.value for color in Color]:
            raise GameStateError(
                f"Invalid color: {model.current_player!r}. \nPick one from {','.join(color.value for color in Color)}"
            )
        if model.status not in [status.value for status in Status]:
            raise GameStateError(
                f"Invalid status code: {model.status!r}. \nPick one from {','.join(status.value for status in Status)}"
            )

        try:
            board = Board.from_pieces([_piece_from_record(record) for record in model.pieces])
        except ValueError as exc:
            raise GameStateError(f"Invalid piece placement: {exc}") from exc
        current_player = Color(model.current_player)
        selected_square = (
            _square_from_name(model.selected_square)
            if model.selected_square is not None
            else None
        )
        captured_pieces = tuple(
            _piece_from_record(record) for record in model.captured_pieces
        )

        state = cls(
            board=board,
            current_player=current_player,
            captured_pieces=captured_pieces,
            move_log=tuple(model.move_log),
            status=game_status(board, current_player),
        )
        if selected_square is not None:
            selected_piece = board.piece(selected_square)
            if selected_piece is None or selected_piece.color != current_player:
                raise GameStateError(
                    f"Selected square {model.selected_square!r} does not hold a piece of the player to move."
                )
            state = state._select(selected_square)
        return state

    def to_model(self) -> GameModel:
        """Encode back into a format the Service layer uses"""
        return GameModel(
            pieces=[_piece_to_record(piece) for piece in self.board.pieces()],
            current_player=self.current_player.value,
            selected_square=(
                self.selected_square.to_algebraic()
                if self.selected_square is not None
                else None
            ),
            captured_pieces=[_piece_to_record(piece) for piece in self.captured_pieces],
            move_log=list(self.move_log),
            status=self.status.value,
        )

    @property
    def winner(self) -> Optional[Color]:
        """
        Given we know it is checkmate, the player who is requested to move just got mated and the opponent must be the winner
        """
        if self.status != Status.CHECKMATE:
            return None
        return self.current_player.opponent()

    def activate_square(self, x: int, y: int) -> Self:
        """
        The player clicked / tapped the square (x, y) = (file, rank)
        -----

        1. No piece selected yet: select one of your own pieces (anything else is ignored)
        2. Same square again: deselect
        3. One of the legal moves of the selected piece: make the move
        4. Another one of your own pieces: select that one instead
        5. Anything else: deselect

        Once the game ended in checkmate, every activation is ignored.
        """
        if not isinstance(x, int) or not isinstance(y, int):
            raise OutOfBoundsError(f"Square {(x, y)} is not on the board, coordinates must be integers.")
        square = Square(x, y)
        if not square.is_within_bounds():
            raise OutOfBoundsError(f"Square {(x, y)} is not on the board.")

        if self.status == Status.CHECKMATE:
            return self

        piece = self.board.piece(square)
        is_own_piece = piece is not None and piece.color == self.current_player

        if self.selected_square is None:
            return self._select(square) if is_own_piece else self

        if square == self.selected_square:
            return self._clear_selection()

        if square in self.legal_moves:
            return self._make_move(self.selected_square, square)

        if is_own_piece:
            return self._select(square)

        return self._clear_selection()

    # -- PRIVATE HELPERS ---
    def _select(self, square: Square) -> Self:
        moves = legal_moves(self.board, square)
        logger.debug(
            "%s selected %s (%d legal moves)",
            self.current_player,
            square.to_algebraic(),
            len(moves),
        )
        return replace(self, selected_square=square, legal_moves=moves)

    def _clear_selection(self) -> Self:
        return replace(self, selected_square=None, legal_moves=())

    def _make_move(self, from_square: Square, to_square: Square) -> Self:
        """
        Make the move
        -----

        1. update the board (the piece is relocated and marked as moved)
        2. store the captured piece (if any)
        3. update the move history
        4. pass the turn to the opponent, clear the selection
        5. update game status for the player who is now to move
        """
        moving_piece = self.board.piece(from_square)
        # for the typechecker: squares in legal_moves always start from an occupied square
        assert moving_piece is not None
        captured_piece = self.board.piece(to_square)

        board = self.board.with_move(from_square, to_square)
        captured_pieces = (
            self.captured_pieces + (captured_piece,)
            if captured_piece is not None
            else self.captured_pieces
        )
        notation = format_move(from_square, to_square, moving_piece, captured_piece)
        next_player = self.current_player.opponent()
        status = game_status(board, next_player)

        logger.info("%s played %s", self.current_player, notation)
        if status == Status.CHECKMATE:
            logger.info("Checkmate, %s wins", self.current_player)

        return replace(
            self,
            board=board,
            current_player=next_player,
            selected_square=None,
            legal_moves=(),
            status=status,
            captured_pieces=captured_pieces,
            move_log=self.move_log + (notation,),
        )


# --- MODULE LEVEL API ---
def initial_state() -> GameState:
    return GameState.initial()


def activate_square(state: GameState, x: int, y: int) -> GameState:
    return state.activate_square(x, y)


def reset_game(state: Optional[GameState] = None) -> GameState:
    """A new game always starts from scratch, whatever the previous state was."""
    return GameState.initial()


# --- (DE)SERIALIZATION HELPERS ---
def _piece_to_record(piece: Piece) -> PieceRecord:
    return {
        "id": piece.id,
        "type": piece.type.value,
        "color": piece.color.value,
        "square": piece.position.to_algebraic(),
        "has_moved": piece.has_moved,
    }


def _piece_from_record(record: PieceRecord) -> Piece:
    try:
        piece_type = PieceType(record["type"])
        color = Color(record["color"])
        square = _square_from_name(str(record["square"]))
        return Piece(
            type=piece_type,
            color=color,
            position=square,
            id=str(record["id"]),
            has_moved=bool(record.get("has_moved", False)),
        )
    except (KeyError, ValueError) as exc:
        raise GameStateError(f"Invalid piece record: {record!r}") from exc


def _square_from_name(name: str) -> Square:
    """Parse a square name and make sure it lies on the board"""
    if len(name) != 2 or not name[1].isdigit():
        raise GameStateError(f"Invalid square name: {name!r}")
    square = Square.from_algebraic(name)
    if not square.is_within_bounds():
        raise GameStateError(f"Invalid square name: {name!r}")
    return square
