"""参数切分模块 - 支持引号与反斜杠转义"""

# 左引号 -> 右引号，按顺序匹配
QUOTE_PAIRS: dict[str, str] = {
    '"': '"',
    "'": "'",
    "“": "”",
    "‘": "’",
}
ESCAPE = "\\"


class ArgParseError(ValueError):
    """参数无法切分，目前只有引号未闭合一种情况"""


def parse_args(text: str) -> list[str]:
    """
    把一段文本切分为参数列表。

    Args:
        text: 原始文本

    Returns:
        去掉引号、处理完转义后的参数，不会包含空字符串

    Raises:
        ArgParseError: 有引号直到结尾都没有闭合
    """
    args: list[str] = []
    token: list[str] = []
    closer: str | None = None
    pending_escape = False

    for char in text:
        if char == ESCAPE:
            # 先原样写入，下一个字符到来时再替换掉
            token.append(char)
            pending_escape = True
        elif pending_escape:
            token[-1] = char
            pending_escape = False
        elif closer is None and char in QUOTE_PAIRS:
            closer = QUOTE_PAIRS[char]
        elif char == closer or (closer is None and char.isspace()):
            closer = None
            if token:
                args.append("".join(token))
                token = []
        else:
            token.append(char)

    if closer is not None:
        raise ArgParseError("unmatched quote")
    if token:
        args.append("".join(token))
    return args


def replace_my(text: str) -> str:
    """把第一个“我”换成“你”，用于复述用户的话"""
    return text.replace("我", "你", 1)
