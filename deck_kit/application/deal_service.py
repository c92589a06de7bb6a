#!/usr/bin/env python3
"""
DealService - 发牌应用服务

应用层的唯一发牌入口：解析配置、创建带种子的随机数生成器、
调用核心层洗牌发牌，并把核心异常转换为带错误码的结果对象。
"""

import logging
import random
from dataclasses import replace
from typing import Any, Dict, Optional, Tuple

from deck_kit.core.deck import Card, Deck, Suit
from deck_kit.core.dealing import shuffle_and_deal
from deck_kit.core.exceptions import InvalidRequestError

from .config_service import ConfigService, DealConfig
from .types import DealOutcome, DealResult, QueryResult


class DealService:
    """发牌应用服务"""

    def __init__(self, config_service: Optional[ConfigService] = None,
                 deck: Optional[Deck] = None):
        """
        初始化发牌服务

        Args:
            config_service: 配置服务，为None时创建默认配置服务
            deck: 牌组，为None时构建一副新牌组；牌组不可变，可以在多个服务之间共享
        """
        self.logger = logging.getLogger(__name__)
        self.config_service = config_service or ConfigService()
        self.deck = deck or Deck()

    def resolve_deal_config(self, profile: str = "default", seed: Optional[int] = None,
                            hands: Optional[int] = None,
                            cards_per_hand: Optional[int] = None) -> DealConfig:
        """
        合并配置文件和调用方覆盖的参数

        Raises:
            ValueError: 合并后的配置无效时
        """
        config = self.config_service.get_deal_config(profile).data
        overrides: Dict[str, Any] = {}
        if seed is not None:
            overrides['seed'] = seed
        if hands is not None:
            overrides['hands'] = hands
        if cards_per_hand is not None:
            overrides['cards_per_hand'] = cards_per_hand
        return replace(config, **overrides) if overrides else config

    def shuffle_and_deal(self, profile: str = "default", seed: Optional[int] = None,
                         hands: Optional[int] = None,
                         cards_per_hand: Optional[int] = None) -> DealResult:
        """
        洗牌并发出多手牌

        Args:
            profile: 发牌配置文件名
            seed: 随机种子，覆盖配置中的种子；都为None时随机生成一个并在结果中返回
            hands: 手牌数量，覆盖配置
            cards_per_hand: 每手牌张数，覆盖配置

        Returns:
            发牌结果；配置字段无效时错误码为INVALID_DEAL_CONFIG，
            总张数超过牌组时错误码为INVALID_REQUEST
        """
        try:
            config = self.resolve_deal_config(profile, seed, hands, cards_per_hand)
        except ValueError as e:
            self.logger.warning(f"发牌配置无效: {e}")
            return DealResult.rejected(str(e), error_code="INVALID_DEAL_CONFIG")

        effective_seed = config.seed if config.seed is not None else random.SystemRandom().randrange(2 ** 32)
        rng = random.Random(effective_seed)

        try:
            dealt = shuffle_and_deal(
                self.deck, rng, config.hands, config.cards_per_hand,
                passes=config.shuffle_passes
            )
        except InvalidRequestError as e:
            self.logger.warning(f"发牌请求无效: {e}")
            return DealResult.rejected(str(e), error_code="INVALID_REQUEST")

        self.logger.info(
            f"发牌完成: profile={profile}, seed={effective_seed}, "
            f"{config.hands}手 x {config.cards_per_hand}张, 剩余{len(dealt.residual)}张"
        )
        return DealResult.dealt(DealOutcome(
            hands=dealt.hands,
            residual=dealt.residual,
            seed=effective_seed,
            profile=profile,
        ))

    def get_deck_statistics(self) -> QueryResult[Dict[str, Any]]:
        """
        获取牌组统计

        Returns:
            查询结果，包含total、counts_by_suit、counts_by_rank
        """
        return QueryResult.success_result({
            'total': len(self.deck),
            'counts_by_suit': self.deck.counts_by_suit(),
            'counts_by_rank': self.deck.counts_by_rank(),
        })

    def get_cards_of_suit(self, suit: Suit) -> QueryResult[Tuple[Card, ...]]:
        """
        获取某一花色的牌

        Args:
            suit: 花色

        Returns:
            查询结果，包含该花色按顺序排列的13张牌
        """
        if not isinstance(suit, Suit):
            return QueryResult.failure_result(
                f"花色必须是Suit类型，实际: {type(suit).__name__}",
                error_code="INVALID_SUIT"
            )
        return QueryResult.success_result(self.deck.cards_of(suit))
