import pytest

from utils.roll_random import RollRandom


class ScriptedRandom(RollRandom):
    """结果可控的随机引擎，并记录每次调用"""

    def __init__(self, coin: bool = True, index: int = 0, unit: float = 0.5):
        super().__init__(seed=0)
        self.coin = coin
        self.index = index
        self.unit = unit
        self.calls: list[tuple] = []

    def int(self, low, high):
        self.calls.append(("int", low, high))
        return high - 1

    def bool(self, probability=0.5):
        self.calls.append(("bool", probability))
        return self.coin

    def pick(self, items):
        self.calls.append(("pick", list(items)))
        return items[self.index]

    def real(self):
        return self.unit


@pytest.fixture
def scripted():
    return ScriptedRandom
