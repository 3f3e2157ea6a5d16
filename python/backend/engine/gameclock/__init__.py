from backend.engine.gameclock.clock import PolledTicker, TickSource

__all__ = ["PolledTicker", "TickSource"]
