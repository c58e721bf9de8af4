from .storage import KeyValueStorage

__all__ = ["KeyValueStorage"]
