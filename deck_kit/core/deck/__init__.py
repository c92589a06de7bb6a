"""
扑克牌组管理模块.

提供Card和Deck类，实现扑克牌的全序、不可变牌组和按花色分组.
"""

from .types import Suit, Rank, get_all_suits, get_all_ranks
from .card import Card, all_cards
from .deck import Deck

__all__ = ['Suit', 'Rank', 'get_all_suits', 'get_all_ranks', 'Card', 'all_cards', 'Deck']
