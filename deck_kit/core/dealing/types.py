"""
发牌结果类型定义

发牌操作返回的不可变结果，支持元组解包:
    card, rest = deal_one(sequence)
"""

from dataclasses import dataclass
from typing import FrozenSet, Iterator, Tuple

from ..deck.card import Card

Hand = FrozenSet[Card]
CardSequence = Tuple[Card, ...]

__all__ = ['Hand', 'CardSequence', 'DealtCard', 'DealtHand', 'DealtHands']


@dataclass(frozen=True)
class DealtCard:
    """发出的一张牌和剩余牌序列"""
    card: Card
    residual: CardSequence

    def __iter__(self) -> Iterator:
        return iter((self.card, self.residual))


@dataclass(frozen=True)
class DealtHand:
    """发出的一手牌和剩余牌序列"""
    hand: Hand
    residual: CardSequence

    def __iter__(self) -> Iterator:
        return iter((self.hand, self.residual))


@dataclass(frozen=True)
class DealtHands:
    """按发牌顺序排列的多手牌和最终剩余牌序列"""
    hands: Tuple[Hand, ...]
    residual: CardSequence

    def __iter__(self) -> Iterator:
        return iter((self.hands, self.residual))

    @property
    def cards_dealt(self) -> int:
        """已发出的总张数"""
        return sum(len(hand) for hand in self.hands)
