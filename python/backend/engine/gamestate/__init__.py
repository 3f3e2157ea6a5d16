from backend.engine.gamestate.state import GameState, Status

__all__ = ["GameState", "Status"]
