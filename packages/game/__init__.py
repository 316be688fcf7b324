from .config import GameConfig
from .controller import GameController
from .io import write_attempts_csv, write_manifest

__all__ = ["GameConfig", "GameController", "write_attempts_csv", "write_manifest"]
