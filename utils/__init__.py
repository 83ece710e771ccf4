"""工具模块"""
from .roll_args import ArgParseError, parse_args, replace_my
from .roll_config import DEFAULT_BLOCK_WORDS, load_block_words
from .roll_core import interpret, render, roll_text
from .roll_messages import MESSAGES
from .roll_random import RollRandom
from .roll_rules import ROLL_RULES, RollReply, RollRule, match_rules
