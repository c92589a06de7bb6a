"""
扑克牌数据结构.

定义不可变的Card类及52张牌的全集，Card之间存在固定的全序:
先比较花色位置，再比较点数.
"""

from dataclasses import dataclass
from typing import Dict, Tuple

from .types import Suit, Rank, get_all_suits, get_all_ranks


@dataclass(frozen=True)
class Card:
    """
    表示一张扑克牌.

    不可变数据类，包含花色和点数，支持比较、排序和字符串表示等操作.
    相等性基于(花色, 点数)的结构相等.

    Attributes:
        suit: 花色
        rank: 点数

    Examples:
        >>> card = Card(Suit.HEARTS, Rank.ACE)
        >>> str(card)
        'AH'
        >>> Card(Suit.CLUBS, Rank.ACE) < Card(Suit.DIAMONDS, Rank.TWO)
        True
    """

    suit: Suit
    rank: Rank

    def __post_init__(self) -> None:
        """
        验证扑克牌数据的有效性.

        Raises:
            TypeError: 当花色或点数类型无效时
        """
        if not isinstance(self.suit, Suit):
            raise TypeError(f"花色必须是Suit类型，实际: {type(self.suit)}")
        if not isinstance(self.rank, Rank):
            raise TypeError(f"点数必须是Rank类型，实际: {type(self.rank)}")

    def __str__(self) -> str:
        """
        返回扑克牌的字符串表示.

        Returns:
            str: 格式为"点数花色"的字符串，如"AH"表示红桃A
        """
        return f"{self.rank.symbol}{self.suit.letter}"

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    def sort_key(self) -> Tuple[int, int]:
        """
        返回用于全序比较的键.

        Returns:
            Tuple[int, int]: (花色位置, 点数值)
        """
        return (self.suit.order, self.rank.value)

    @classmethod
    def from_str(cls, card_str: str) -> 'Card':
        """
        从字符串创建扑克牌对象.

        Args:
            card_str: 扑克牌字符串，格式为"点数花色"，如"AH"、"10d"、"Ts"

        Returns:
            Card: 对应的扑克牌对象

        Raises:
            TypeError: 当输入不是字符串时
            ValueError: 当字符串格式无效时
        """
        if not isinstance(card_str, str):
            raise TypeError(f"输入必须是字符串，实际: {type(card_str)}")

        if len(card_str) < 2:
            raise ValueError(f"卡牌字符串格式错误: {card_str}")

        # 处理10的特殊情况
        if card_str.startswith("10"):
            rank_str, suit_str = "10", card_str[2:]
        else:
            rank_str, suit_str = card_str[0], card_str[1:]

        if rank_str.upper() not in _RANK_BY_SYMBOL:
            raise ValueError(f"无效的点数: {rank_str}")
        if suit_str.upper() not in _SUIT_BY_LETTER:
            raise ValueError(f"无效的花色: {suit_str}")

        return cls(_SUIT_BY_LETTER[suit_str.upper()], _RANK_BY_SYMBOL[rank_str.upper()])

    def __lt__(self, other: 'Card') -> bool:
        """
        按全序比较两张牌.

        Args:
            other: 另一张牌

        Returns:
            bool: 如果当前牌排在另一张牌之前则返回True
        """
        if not isinstance(other, Card):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __le__(self, other: 'Card') -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.sort_key() <= other.sort_key()


_RANK_BY_SYMBOL: Dict[str, Rank] = {rank.symbol: rank for rank in Rank}
_RANK_BY_SYMBOL["T"] = Rank.TEN

_SUIT_BY_LETTER: Dict[str, Suit] = {suit.letter: suit for suit in Suit}


def all_cards() -> Tuple[Card, ...]:
    """
    生成52张牌的全集.

    Returns:
        Tuple[Card, ...]: 按全序排列的52张牌
    """
    return tuple(
        Card(suit, rank)
        for suit in get_all_suits()
        for rank in get_all_ranks()
    )
