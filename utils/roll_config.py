"""屏蔽词配置，可通过 .env 中的 ROLL_BLOCK_WORDS 覆盖"""
import os
import re
from typing import Optional

from dotenv import load_dotenv
from loguru import logger

load_dotenv()

# fmt: off
DEFAULT_BLOCK_WORDS = [
    "打胶", "傻逼", "做爱", "sb", "打炮", "打飞机", "打枪", "自慰", "鸡巴", "鸡吧", "鸡把",
    "鸡鸡", "自杀", "去世", "紫砂", "屌", "破处", "处女",
]
# fmt: on


def load_block_words(raw: Optional[str] = None) -> list[str]:
    """
    读取屏蔽词列表。

    Args:
        raw: 逗号分隔的屏蔽词，为 None 时读取环境变量 ROLL_BLOCK_WORDS

    Returns:
        屏蔽词列表；环境变量未设置时使用默认列表，设置为空字符串时不屏蔽任何词
    """
    if raw is None:
        raw = os.getenv("ROLL_BLOCK_WORDS")
    if raw is None:
        logger.info(f"使用默认屏蔽词, 共 {len(DEFAULT_BLOCK_WORDS)} 个")
        return list(DEFAULT_BLOCK_WORDS)

    words = [w.strip() for w in re.split(r"[,，]", raw) if w.strip()]
    logger.info(f"从环境变量加载屏蔽词, 共 {len(words)} 个")
    return words
