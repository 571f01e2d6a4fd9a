"""Game management layer — the move/undo controller over a position.

Quick start::

    from chesslaw.game import ChessGame

    game = ChessGame()
    move = game.legal_moves()[0]
    game.make_move(move)
    game.undo_move()
"""

from chesslaw.game.controller import ChessGame

__all__ = ["ChessGame"]
