"""
牌组统计视图.

提供按花色、按点数的分组与计数，以及对一手牌的简单描述.
所有函数都是只读的纯函数，不修改输入.
"""

from collections import Counter
from typing import Any, Dict, Iterable, List, Tuple

from ..deck.card import Card
from ..deck.types import Suit, Rank, get_all_suits, get_all_ranks

# 大牌点: A=4, K=3, Q=2, J=1
HIGH_CARD_POINTS: Dict[Rank, int] = {
    Rank.ACE: 4,
    Rank.KING: 3,
    Rank.QUEEN: 2,
    Rank.JACK: 1,
}


def group_by_suit(cards: Iterable[Card]) -> Dict[Suit, Tuple[Card, ...]]:
    """
    按花色分组，保持每组内的原始顺序.

    Args:
        cards: 任意顺序的牌

    Returns:
        Dict[Suit, Tuple[Card, ...]]: 花色到该花色牌的映射，只包含出现过的花色
    """
    groups: Dict[Suit, List[Card]] = {}
    for card in cards:
        groups.setdefault(card.suit, []).append(card)
    return {
        suit: tuple(groups[suit])
        for suit in get_all_suits()
        if suit in groups
    }


def counts_by_suit(cards: Iterable[Card]) -> Dict[Suit, int]:
    """
    统计每种花色的牌数.

    Args:
        cards: 要统计的牌

    Returns:
        Dict[Suit, int]: 按花色顺序排列的计数，只包含出现过的花色
    """
    counter = Counter(card.suit for card in cards)
    return {suit: counter[suit] for suit in get_all_suits() if suit in counter}


def counts_by_rank(cards: Iterable[Card]) -> Dict[Rank, int]:
    """
    统计每种点数的牌数.

    Args:
        cards: 要统计的牌

    Returns:
        Dict[Rank, int]: 按点数顺序排列的计数，只包含出现过的点数
    """
    counter = Counter(card.rank for card in cards)
    return {rank: counter[rank] for rank in get_all_ranks() if rank in counter}


def hand_summary(hand: Iterable[Card]) -> Dict[str, Any]:
    """
    描述一手牌: 排序后的牌、各花色张数和大牌点.

    Args:
        hand: 一手牌（通常是frozenset）

    Returns:
        Dict[str, Any]: 包含cards、suit_counts、high_card_points
    """
    cards = sorted(hand)
    suit_counts = Counter(card.suit for card in cards)
    return {
        'cards': tuple(cards),
        'suit_counts': {suit: suit_counts[suit] for suit in get_all_suits()},
        'high_card_points': sum(HIGH_CARD_POINTS.get(card.rank, 0) for card in cards),
    }
