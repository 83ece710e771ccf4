""".roll 插件的回复文本（zh-CN），键与 RollReply.key 对应"""

MESSAGES: dict[str, str] = {
    "roll-integer": "你掷出了 {0} 点",
    "number-too-small": "请指定一个大于 1 的整数",
    "number-too-large": "这个数字太大啦，掷不动",
    "block-word": "这种事情不可以拿来 roll 哦",
    "i-think": "我觉得{0}",
    "surely": "当然是{0}啦",
    "probability": "{0}的概率是 {1}%",
    "invalid-arg": "参数不太对呢，给我至少两个选项吧",
    "choice": "{0}",
}
