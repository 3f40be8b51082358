from .core import MAX_TURNS, NotInDictionary, play_game, run_batch
from .io import write_csv, timestamp_id

__all__ = ["MAX_TURNS", "NotInDictionary", "play_game", "run_batch", "write_csv", "timestamp_id"]
