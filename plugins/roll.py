from melobot import PluginPlanner
from melobot.protocols.onebot.v11 import MessageEvent, Adapter, on_message
from melobot.utils.parse import CmdParser, CmdArgs

from utils.roll_config import load_block_words
from utils.roll_core import roll_text

ROLL_CMD = ".roll"
BLOCK_WORDS = load_block_words()


def strip_command(text: str) -> str | None:
    """去掉开头的 .roll，只留下参数部分；不是 .roll 命令时返回 None"""
    text = text.strip()
    if not text.startswith(ROLL_CMD):
        return None
    rest = text[len(ROLL_CMD):]
    # .rolling、.rollback 之类不算
    if rest and not rest[0].isspace():
        return None
    return rest.strip()


@on_message(parser=CmdParser(cmd_start=".", cmd_sep=" ", targets="roll"))
async def roll(event: MessageEvent, args: CmdArgs, adaptor: Adapter) -> None:
    """处理 .roll 命令：掷骰子、回答是非题、二选一、估算概率或从选项中随机挑一个"""
    # CmdArgs 按空格切分会丢掉引号，参数从原始文本里取
    arg = strip_command(event.text)
    if arg is None:
        return
    await adaptor.send_reply(roll_text(arg, BLOCK_WORDS))

RollPlugin = PluginPlanner(version="1.1.0", flows=[roll])
