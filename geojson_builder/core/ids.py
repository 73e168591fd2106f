from geojson_builder.core.constants import ID_STRATEGY_COUNTER, ID_STRATEGY_RANDOM
from typing import Callable
import itertools
import math
import random
import time


IdGenerator = Callable[[], int]


def random_id() -> int:
    """Random fraction scaled by the current time in milliseconds. Not guaranteed unique."""
    return math.floor(random.random() * time.time() * 1000)


class CounterIdGenerator:
    def __init__(self, start: int = 1):
        self._counter = itertools.count(start)

    def __call__(self) -> int:
        return next(self._counter)


def get_id_generator(strategy: str) -> IdGenerator:
    if strategy == ID_STRATEGY_RANDOM:
        return random_id
    if strategy == ID_STRATEGY_COUNTER:
        return CounterIdGenerator()
    raise ValueError(f'Unknown id strategy: {strategy}')
