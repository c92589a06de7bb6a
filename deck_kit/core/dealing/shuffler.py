"""
洗牌引擎.

对牌序列连续执行三遍Fisher-Yates洗牌，返回新的不可变序列.
相同的种子和相同的输入顺序总是得到相同的输出顺序.
"""

import logging
import random
from typing import Optional, Sequence, Tuple

from ..deck.card import Card
from ..exceptions import InvalidRequestError

logger = logging.getLogger(__name__)

# 连续洗牌的遍数，改变它会改变给定种子下的输出顺序
SHUFFLE_PASSES = 3


def shuffle(cards: Sequence[Card], rng: Optional[random.Random] = None,
            passes: int = SHUFFLE_PASSES) -> Tuple[Card, ...]:
    """
    洗牌.

    复制输入序列后用同一个随机数生成器连续洗牌passes遍.
    洗好的牌被逐张压入牌堆，因此工作列表的最后一张成为返回序列的第一张.

    Args:
        cards: 要洗的牌，不会被修改
        rng: 随机数生成器，为None时使用新的random.Random()
        passes: 洗牌遍数

    Returns:
        Tuple[Card, ...]: 洗好的牌，第一张最先发出

    Raises:
        InvalidRequestError: 当passes小于1时
    """
    if passes < 1:
        raise InvalidRequestError(f"洗牌遍数必须至少为1，实际: {passes}")

    rng = rng or random.Random()
    working = list(cards)
    for _ in range(passes):
        rng.shuffle(working)

    logger.debug(f"洗牌完成: {len(working)}张牌, {passes}遍")
    return tuple(reversed(working))
