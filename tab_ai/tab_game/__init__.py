from .board import Board
from .config import config
from .game import Game
from .messages import LoggingMessageSink, MessageSink, RecordingMessageSink
from .moves import all_moves, simulate_move
from .piece import Piece
from .rules import TabRules, valid_targets
from .sticks import StickThrow, throw_sticks
from .topology import BoardTopology
from .types import Move, PieceState, Player

__all__ = [
    "Player",
    "PieceState",
    "config",
    "Move",
    "Board",
    "BoardTopology",
    "Piece",
    "Game",
    "TabRules",
    "valid_targets",
    "all_moves",
    "simulate_move",
    "StickThrow",
    "throw_sticks",
    "MessageSink",
    "LoggingMessageSink",
    "RecordingMessageSink",
]
