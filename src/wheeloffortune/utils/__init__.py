from .events import EventBus
from .random_provider import RandomProvider, RandomSource

__all__ = ["EventBus", "RandomProvider", "RandomSource"]
