from backend.engine.gamemoves.engine import MoveEngine, MoveResult

__all__ = ["MoveEngine", "MoveResult"]
