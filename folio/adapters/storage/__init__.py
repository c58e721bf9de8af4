from .json_file import JsonFileStorage
from .memory import MemoryStorage

__all__ = ["JsonFileStorage", "MemoryStorage"]
