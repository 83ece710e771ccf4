"""句式匹配模块 - 按固定顺序尝试每条规则，只处理第一条匹配的"""
import re
from dataclasses import dataclass, field
from typing import Callable, Optional

from .roll_args import replace_my
from .roll_random import RollRandom, default_random


@dataclass(frozen=True)
class RollReply:
    """回复的模板键和参数，由调用方根据消息目录渲染成文本"""
    key: str
    args: tuple = field(default_factory=tuple)


Handler = Callable[[dict[str, str], RollRandom], RollReply]


@dataclass(frozen=True)
class RollRule:
    pattern: re.Pattern
    handler: Handler


# 超过这个位数就不再转换成整数
MAX_INT_DIGITS = 100


def roll_integer(groups: dict[str, str], rng: RollRandom) -> RollReply:
    """.roll 6 => 1~6 的随机整数"""
    digits = groups["int"].lstrip("0")
    if len(digits) > MAX_INT_DIGITS:
        return RollReply("number-too-large")
    max_value = int(digits or "0")
    if max_value <= 1:
        return RollReply("number-too-small")
    return RollReply("roll-integer", (rng.int(1, max_value + 1),))


def yes_or_no(groups: dict[str, str], rng: RollRandom) -> RollReply:
    # 我是不是耳聋 => { prefix: 我, word: 是, type: 不, suffix: 耳聋 }
    # 我今天吃没吃 => { prefix: 我今天, word: 吃, type: 没, suffix: '' }
    prefix = replace_my(groups["prefix"])
    suffix = replace_my(groups["suffix"])
    word, neg = groups["word"], groups["type"]
    result = rng.bool(0.5)
    if neg == "不":
        # 你是耳聋 / 你不是耳聋
        text = f"{prefix}{'' if result else '不'}{word}{suffix}"
    else:
        # 你今天吃了 / 你今天没吃
        text = f"{prefix}{'' if result else '没'}{word}{'了' if result else ''}{suffix}"
    return RollReply("i-think", (text,))


def either_or(groups: dict[str, str], rng: RollRandom) -> RollReply:
    choices = [replace_my(groups["prefix"]), replace_my(groups["suffix"])]
    return RollReply("surely", (rng.pick(choices),))


def probability(groups: dict[str, str], rng: RollRandom) -> RollReply:
    return RollReply("probability", (replace_my(groups["name"]), rng.percent()))


# 规则顺序即优先级，全部使用 fullmatch 整句匹配
ROLL_RULES: tuple[RollRule, ...] = (
    RollRule(re.compile(r"(?P<int>[0-9]+)"), roll_integer),
    RollRule(
        re.compile(r"(?P<prefix>.*)(?P<word>.+)(?P<type>不|没)(?P=word)(?P<suffix>.*?)[呀呢啊]?[？?！!]*"),
        yes_or_no,
    ),
    RollRule(re.compile(r"(?P<prefix>.*)还是(?P<suffix>.*?)[呀呢啊]?[？?]*"), either_or),
    RollRule(re.compile(r"(?P<name>.+?)的?概率[是为]?[？?]*"), probability),
)


def match_rules(text: str,
                rules: tuple[RollRule, ...] = ROLL_RULES,
                rng: Optional[RollRandom] = None) -> Optional[RollReply]:
    """返回第一条匹配规则的回复，全部不匹配时返回 None"""
    rng = rng or default_random
    for rule in rules:
        match = rule.pattern.fullmatch(text)
        if match is None:
            continue
        return rule.handler(match.groupdict(), rng)
    return None
