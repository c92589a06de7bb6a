"""
deck_kit Core Module - 纯领域逻辑层

只依赖标准库，不依赖应用层或UI层。

Modules:
    deck: 花色、点数、Card和不可变牌组
    dealing: 洗牌与发牌
    stats: 按花色/点数分组计数
    exceptions: 核心异常
"""

from .exceptions import DeckError, EmptySequenceError, InvalidRequestError
from .deck import Suit, Rank, Card, Deck, all_cards
from .dealing import (
    SHUFFLE_PASSES,
    DealtCard,
    DealtHand,
    DealtHands,
    shuffle,
    deal_one,
    deal,
    deal_hands,
    shuffle_and_deal,
)
from .stats import counts_by_suit, counts_by_rank, group_by_suit, hand_summary

__all__ = [
    'DeckError',
    'EmptySequenceError',
    'InvalidRequestError',
    'Suit',
    'Rank',
    'Card',
    'Deck',
    'all_cards',
    'SHUFFLE_PASSES',
    'DealtCard',
    'DealtHand',
    'DealtHands',
    'shuffle',
    'deal_one',
    'deal',
    'deal_hands',
    'shuffle_and_deal',
    'counts_by_suit',
    'counts_by_rank',
    'group_by_suit',
    'hand_summary',
]
