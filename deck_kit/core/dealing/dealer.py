"""
发牌引擎.

从牌序列的前端依次发牌，每次操作都返回发出的牌和新的剩余序列，
输入序列本身不会被修改.
"""

import logging
import random
from typing import TYPE_CHECKING, List, Optional, Sequence

from ..deck.card import Card
from ..exceptions import EmptySequenceError, InvalidRequestError
from .shuffler import SHUFFLE_PASSES, shuffle
from .types import CardSequence, DealtCard, DealtHand, DealtHands, Hand

if TYPE_CHECKING:
    from ..deck.deck import Deck

logger = logging.getLogger(__name__)


def deal_one(sequence: Sequence[Card]) -> DealtCard:
    """
    发一张牌.

    Args:
        sequence: 牌序列

    Returns:
        DealtCard: 序列的第一张牌和其余牌组成的新序列

    Raises:
        EmptySequenceError: 当序列为空时
    """
    if not sequence:
        raise EmptySequenceError("Cannot deal from an empty sequence")
    return DealtCard(card=sequence[0], residual=tuple(sequence[1:]))


def deal(sequence: Sequence[Card], count: int) -> DealtHand:
    """
    发一手牌.

    重复count次发一张牌，把发出的牌收集为一手牌.
    张数不足时在发到空序列的那一次失败.

    Args:
        sequence: 牌序列
        count: 要发的张数

    Returns:
        DealtHand: 一手牌和剩余牌序列

    Raises:
        InvalidRequestError: 当count为负数时
        EmptySequenceError: 当序列中的牌不足count张时
    """
    if count < 0:
        raise InvalidRequestError(f"发牌张数不能为负数: {count}")

    residual: CardSequence = tuple(sequence)
    hand: Hand = frozenset()
    for _ in range(count):
        card, residual = deal_one(residual)
        hand = hand | {card}
    return DealtHand(hand=hand, residual=residual)


def deal_hands(sequence: Sequence[Card], hands: int, cards_per_hand: int) -> DealtHands:
    """
    依次发出多手牌.

    每一手牌都从上一次的剩余序列中发出，因此各手牌互不相交.

    Args:
        sequence: 牌序列
        hands: 手牌数量
        cards_per_hand: 每手牌的张数

    Returns:
        DealtHands: 按发牌顺序排列的手牌和最终剩余序列

    Raises:
        InvalidRequestError: 当参数为负数时
        EmptySequenceError: 当hands * cards_per_hand超过序列长度时
    """
    if hands < 0:
        raise InvalidRequestError(f"手牌数量不能为负数: {hands}")
    if cards_per_hand < 0:
        raise InvalidRequestError(f"每手牌张数不能为负数: {cards_per_hand}")

    residual: CardSequence = tuple(sequence)
    dealt: List[Hand] = []
    for index in range(hands):
        try:
            hand, residual = deal(residual, cards_per_hand)
        except EmptySequenceError:
            logger.debug(f"第{index + 1}手牌发牌时牌已发完")
            raise
        dealt.append(hand)

    logger.debug(f"发牌完成: {hands}手 x {cards_per_hand}张, 剩余{len(residual)}张")
    return DealtHands(hands=tuple(dealt), residual=residual)


def validate_deal_request(hands: int, cards_per_hand: int, available: int) -> None:
    """
    在发牌前检查请求是否可以完成.

    Args:
        hands: 手牌数量
        cards_per_hand: 每手牌的张数
        available: 可用的牌数

    Raises:
        InvalidRequestError: 当参数为负数或总张数超过可用牌数时
    """
    if hands < 0:
        raise InvalidRequestError(f"手牌数量不能为负数: {hands}")
    if cards_per_hand < 0:
        raise InvalidRequestError(f"每手牌张数不能为负数: {cards_per_hand}")
    if hands * cards_per_hand > available:
        raise InvalidRequestError(
            f"Cannot deal {hands} hands of {cards_per_hand} cards, only {available} available"
        )


def shuffle_and_deal(deck: 'Deck', rng: Optional[random.Random],
                     hands: int, cards_per_hand: int,
                     passes: int = SHUFFLE_PASSES) -> DealtHands:
    """
    洗整副牌后依次发出多手牌.

    参数在消耗任何随机数之前校验.

    Args:
        deck: 牌组
        rng: 随机数生成器，为None时使用新的random.Random()
        hands: 手牌数量
        cards_per_hand: 每手牌的张数
        passes: 洗牌遍数

    Returns:
        DealtHands: 按发牌顺序排列的手牌和剩余序列

    Raises:
        InvalidRequestError: 当参数为负数或总张数超过牌组张数时
    """
    validate_deal_request(hands, cards_per_hand, len(deck))
    shuffled = shuffle(deck.cards, rng, passes)
    return deal_hands(shuffled, hands, cards_per_hand)
