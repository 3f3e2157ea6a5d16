from backend.models.board import BLANK, Board, Direction, Position
from backend.models.display import DisplayConfig, Mode
from backend.models.errors import InvalidBoardError, InvalidDimensionsError
from backend.models.ranking import RankingBoard, RankingEntry

__all__ = [
    "BLANK",
    "Board",
    "Direction",
    "DisplayConfig",
    "InvalidBoardError",
    "InvalidDimensionsError",
    "Mode",
    "Position",
    "RankingBoard",
    "RankingEntry",
]
