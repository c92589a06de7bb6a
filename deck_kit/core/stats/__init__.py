"""
牌组统计模块.

按花色/点数分组计数，以及手牌描述.
"""

from .aggregation import (
    HIGH_CARD_POINTS,
    group_by_suit,
    counts_by_suit,
    counts_by_rank,
    hand_summary,
)

__all__ = [
    'HIGH_CARD_POINTS',
    'group_by_suit',
    'counts_by_suit',
    'counts_by_rank',
    'hand_summary',
]
