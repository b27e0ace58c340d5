import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


@dataclass(slots=True)
class Config:
    # --- Board ---
    ROWS: int = 4
    COLS: int = int(os.getenv("TAB_COLS", 9))

    # --- Automated player ---
    AI_LEVEL: str = os.getenv("AI_LEVEL", "medium")
    # Pacing delays (seconds) before each controller mutation
    ROLL_DELAY: float = float(os.getenv("AI_ROLL_DELAY", 1.0))
    SKIP_DELAY: float = float(os.getenv("AI_SKIP_DELAY", 1.0))
    MOVE_DELAY: float = float(os.getenv("AI_MOVE_DELAY", 0.9))

    EASY_MISTAKE_RATE: float = float(os.getenv("EASY_MISTAKE_RATE", 0.1))
    ADAPTIVE_OVERRIDE_RATE: float = float(os.getenv("ADAPTIVE_OVERRIDE_RATE", 0.2))
    MEDIUM_NOISE: float = float(os.getenv("MEDIUM_NOISE", 0.5))
    EVAL_NOISE: float = float(os.getenv("EVAL_NOISE", 0.05))

    # Headless simulation cap
    MAX_TURNS: int = int(os.getenv("MAX_TURNS", 1000))

    def __post_init__(self):
        if self.ROWS != 4:
            raise ValueError("ROWS is fixed at 4")
        if self.COLS < 2:
            raise ValueError("COLS must be at least 2")
        for name in ("ROLL_DELAY", "SKIP_DELAY", "MOVE_DELAY"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative")
        for name in ("EASY_MISTAKE_RATE", "ADAPTIVE_OVERRIDE_RATE"):
            if not 0.0 <= getattr(self, name) <= 1.0:
                raise ValueError(f"{name} must be within [0, 1]")

    @property
    def TOTAL_CELLS(self) -> int:
        return self.ROWS * self.COLS


@dataclass(slots=True)
class HeuristicWeights:
    """Single-move scoring used by the medium policy."""

    capture: float = 10.0
    forward_row: float = 3.0
    leave_start_row: float = 4.0
    enter_final_row: float = 6.0
    finished_piece_penalty: float = 2.0


@dataclass(slots=True)
class EvaluationWeights:
    """Positional board scoring used by the hard policy."""

    alive: float = 10.0
    progress: float = 2.0
    final_row: float = 5.0
    edge: float = 1.0
    centre: float = 1.0
    opp_alive: float = 10.0
    opp_progress: float = 2.0
    # Opponent sitting on our own start row
    opp_on_base: float = 3.0


config = Config()
heuristic_weights = HeuristicWeights()
evaluation_weights = EvaluationWeights()
