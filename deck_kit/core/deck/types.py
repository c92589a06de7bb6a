"""
扑克牌基础类型定义.

定义扑克牌的花色、点数等基础枚举类型，以及它们在全序中的位置.
"""

from enum import Enum, IntEnum
from typing import List


class Suit(Enum):
    """
    扑克牌花色枚举.

    定义四种标准扑克牌花色，使用Unicode符号表示.
    成员的定义顺序即花色的排序位置: 梅花 < 方块 < 红桃 < 黑桃.
    """

    CLUBS = "♣"       # 梅花
    DIAMONDS = "♦"    # 方块
    HEARTS = "♥"      # 红桃
    SPADES = "♠"      # 黑桃

    @property
    def order(self) -> int:
        """花色在全序中的位置，从0开始."""
        return _SUIT_ORDER[self]

    @property
    def letter(self) -> str:
        """花色的单字母缩写，如"H"表示红桃."""
        return self.name[0]


_SUIT_ORDER = {suit: position for position, suit in enumerate(Suit)}


class Rank(IntEnum):
    """
    扑克牌点数枚举.

    定义13种扑克牌点数，数值越大表示点数越大，A为最大.
    """

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    @property
    def symbol(self) -> str:
        """点数的显示符号，如"A"、"10"."""
        if self.value <= 10:
            return str(self.value)
        return self.name[0]


def get_all_suits() -> List[Suit]:
    """
    获取所有花色.

    Returns:
        List[Suit]: 按排序位置排列的四种花色
    """
    return list(Suit)


def get_all_ranks() -> List[Rank]:
    """
    获取所有点数.

    Returns:
        List[Rank]: 从2到A排列的13种点数
    """
    return list(Rank)
