""".roll 的整体流程：空参数 -> 屏蔽词 -> 句式规则 -> 参数切分随机选择"""
from typing import Iterable, Optional

from loguru import logger

from .roll_args import ArgParseError, parse_args, replace_my
from .roll_messages import MESSAGES
from .roll_random import RollRandom, default_random
from .roll_rules import ROLL_RULES, RollReply, match_rules


def interpret(arg: str,
              block_words: Optional[Iterable[str]] = None,
              rng: Optional[RollRandom] = None) -> RollReply:
    """
    解释 .roll 后面的参数，任何输入都会得到一个回复，不会抛出异常。

    Args:
        arg: 命令后面的全部文本
        block_words: 屏蔽词，出现任意一个就直接拒绝
        rng: 随机数引擎，默认使用模块级实例

    Returns:
        RollReply
    """
    rng = rng or default_random
    arg = arg.strip()

    if not arg:
        return RollReply("roll-integer", (rng.int(1, 101),))

    for word in block_words or ():
        if word in arg:
            logger.debug(f"参数命中屏蔽词: {word}")
            return RollReply("block-word")

    if reply := match_rules(arg, ROLL_RULES, rng):
        logger.debug(f"句式匹配成功: {reply.key}")
        return reply

    try:
        args = [replace_my(a) for a in parse_args(arg)]
    except ArgParseError as e:
        logger.debug(f"参数切分失败: {e}")
        return RollReply("invalid-arg")

    if len(args) < 2:
        return RollReply("invalid-arg")
    return RollReply("choice", (rng.pick(args),))


def render(reply: RollReply, messages: Optional[dict[str, str]] = None) -> str:
    """按模板键把回复渲染为文本"""
    messages = messages or MESSAGES
    return messages[reply.key].format(*reply.args)


def roll_text(arg: str,
              block_words: Optional[Iterable[str]] = None,
              rng: Optional[RollRandom] = None) -> str:
    return render(interpret(arg, block_words, rng))
