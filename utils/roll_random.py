"""随机数引擎 - 给 .roll 插件提供可注入、可设定种子的随机源"""
import math
import random
from typing import Optional, Sequence, TypeVar

T = TypeVar("T")


class RollRandom:
    """
    对 random.Random 的一层薄包装。

    每个实例持有自己的生成器，测试时传入 seed 即可复现结果。
    """

    def __init__(self, seed: Optional[int] = None):
        self._random = random.Random(seed)

    def int(self, low: int, high: int) -> int:
        """返回 [low, high) 内的均匀整数，想要 [1, max] 时传 max + 1"""
        return self._random.randrange(low, high)

    def bool(self, probability: float = 0.5) -> bool:
        """以 probability 的概率返回 True"""
        return self._random.random() < probability

    def pick(self, items: Sequence[T]) -> T:
        """从非空序列中均匀取出一个元素"""
        if not items:
            raise IndexError("cannot pick from an empty sequence")
        return items[self._random.randrange(len(items))]

    def real(self) -> float:
        return self._random.random()

    def percent(self) -> str:
        """
        把 real() 缩放为百分比，保留两位小数。

        先截断到百分之一再格式化，结果落在 [0.00, 100.00) 内，不会被四舍五入成 100.00。
        """
        hundredths = min(math.floor(self.real() * 10000), 9999)
        return f"{hundredths / 100:.2f}"


default_random = RollRandom()
