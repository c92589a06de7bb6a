"""
不可变的扑克牌组.

定义Deck类: 构造时一次性生成排序、去重的52张牌，并预先按花色分组.
构造之后不再修改；洗牌和发牌都返回新的值.
"""

import logging
import random
from typing import TYPE_CHECKING, Dict, Iterator, Optional, Tuple

from .card import Card, all_cards
from .types import Suit, Rank
from ..stats import aggregation

if TYPE_CHECKING:
    from ..dealing.types import DealtHands

logger = logging.getLogger(__name__)


class Deck:
    """
    表示一副标准扑克牌.

    包含按全序排列的52张牌，以及按花色预先计算好的13张子集.
    洗牌需要调用方提供随机数生成器，以支持确定性测试.

    Attributes:
        _cards: 排序后的52张牌
        _cards_by_suit: 花色到该花色13张牌的映射

    Examples:
        >>> deck = Deck()
        >>> len(deck)
        52
        >>> str(deck.hearts()[-1])
        'AH'
    """

    def __init__(self) -> None:
        """初始化牌组，生成全集并按花色分组."""
        self._cards: Tuple[Card, ...] = tuple(sorted(set(all_cards())))
        self._cards_by_suit: Dict[Suit, Tuple[Card, ...]] = aggregation.group_by_suit(self._cards)
        logger.debug(f"牌组已构建: {len(self._cards)}张牌, {len(self._cards_by_suit)}种花色")

    @property
    def cards(self) -> Tuple[Card, ...]:
        """按全序排列的52张牌."""
        return self._cards

    @property
    def cards_by_suit(self) -> Dict[Suit, Tuple[Card, ...]]:
        """
        按花色分组的牌.

        Returns:
            Dict[Suit, Tuple[Card, ...]]: 映射的副本，各花色的元组与构造时相同
        """
        return dict(self._cards_by_suit)

    def cards_of(self, suit: Suit) -> Tuple[Card, ...]:
        """
        获取某一花色的13张牌.

        Args:
            suit: 花色

        Returns:
            Tuple[Card, ...]: 构造时计算好的子集，不会重新计算

        Raises:
            TypeError: 当suit不是Suit类型时
        """
        if not isinstance(suit, Suit):
            raise TypeError(f"花色必须是Suit类型，实际: {type(suit)}")
        return self._cards_by_suit[suit]

    def clubs(self) -> Tuple[Card, ...]:
        return self.cards_of(Suit.CLUBS)

    def diamonds(self) -> Tuple[Card, ...]:
        return self.cards_of(Suit.DIAMONDS)

    def hearts(self) -> Tuple[Card, ...]:
        return self.cards_of(Suit.HEARTS)

    def spades(self) -> Tuple[Card, ...]:
        return self.cards_of(Suit.SPADES)

    def counts_by_suit(self) -> Dict[Suit, int]:
        """每种花色的牌数，完整牌组为4种花色各13张."""
        return aggregation.counts_by_suit(self._cards)

    def counts_by_rank(self) -> Dict[Rank, int]:
        """每种点数的牌数，完整牌组为13种点数各4张."""
        return aggregation.counts_by_rank(self._cards)

    def shuffle(self, rng: Optional[random.Random] = None) -> Tuple[Card, ...]:
        """
        洗牌，返回新的牌序列，牌组本身不变.

        Args:
            rng: 随机数生成器，为None时使用新的random.Random()

        Returns:
            Tuple[Card, ...]: 洗好的52张牌，第一张最先发出
        """
        from ..dealing.shuffler import shuffle
        return shuffle(self._cards, rng)

    def shuffle_and_deal(self, rng: Optional[random.Random],
                         hands: int, cards_per_hand: int) -> 'DealtHands':
        """
        洗牌后依次发出若干手牌.

        Args:
            rng: 随机数生成器
            hands: 手牌数量
            cards_per_hand: 每手牌的张数

        Returns:
            DealtHands: 按发牌顺序排列的手牌和剩余牌序列

        Raises:
            InvalidRequestError: 当参数为负数或总张数超过52时
        """
        from ..dealing.dealer import shuffle_and_deal
        return shuffle_and_deal(self, rng, hands, cards_per_hand)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __contains__(self, card: object) -> bool:
        return card in self._cards

    def __str__(self) -> str:
        return f"Deck({len(self._cards)} cards)"

    def __repr__(self) -> str:
        return f"Deck(cards={len(self._cards)}, suits={len(self._cards_by_suit)})"
