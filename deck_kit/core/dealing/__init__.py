"""
洗牌与发牌模块.

shuffler: 三遍Fisher-Yates洗牌
dealer: 从牌序列前端发一张牌、一手牌或多手牌
"""

from .types import Hand, CardSequence, DealtCard, DealtHand, DealtHands
from .shuffler import SHUFFLE_PASSES, shuffle
from .dealer import deal_one, deal, deal_hands, validate_deal_request, shuffle_and_deal

__all__ = [
    'Hand',
    'CardSequence',
    'DealtCard',
    'DealtHand',
    'DealtHands',
    'SHUFFLE_PASSES',
    'shuffle',
    'deal_one',
    'deal',
    'deal_hands',
    'validate_deal_request',
    'shuffle_and_deal',
]
