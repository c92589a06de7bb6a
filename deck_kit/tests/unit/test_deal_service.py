#!/usr/bin/env python3
"""
DealService单元测试

测试配置合并、种子处理、错误码转换和查询接口。
"""

import logging
import random

import pytest

from deck_kit.application import DealConfig, DealOutcome, DealResult, DealService, ResultStatus
from deck_kit.core.dealing import shuffle_and_deal
from deck_kit.core.deck import Card, Deck, Suit, Rank
from deck_kit.tests.anti_cheat.core_usage_checker import CoreUsageChecker


class TestDealServiceShuffleAndDeal:
    """DealService.shuffle_and_deal的单元测试"""

    def test_default_profile_deals_four_hands(self, deal_service, mock_detector):
        mock_detector(deal_service, deal_service.deck, deal_service.config_service)
        CoreUsageChecker.verify_real_objects(deal_service, "DealService")

        result = deal_service.shuffle_and_deal(seed=42)

        assert result.success
        assert result.status == ResultStatus.SUCCESS
        assert len(result.outcome.hands) == 4
        assert all(len(hand) == 13 for hand in result.outcome.hands)
        assert result.outcome.residual == ()
        assert result.outcome.seed == 42
        assert result.outcome.profile == "default"

    def test_result_matches_core_for_same_seed(self, deal_service, deck):
        result = deal_service.shuffle_and_deal(profile="poker", seed=1234)
        expected = shuffle_and_deal(deck, random.Random(1234), 9, 2)

        assert result.outcome.hands == expected.hands
        assert result.outcome.residual == expected.residual

    def test_same_seed_same_deal(self, deal_service):
        first = deal_service.shuffle_and_deal(seed=99)
        second = deal_service.shuffle_and_deal(seed=99)
        assert first.outcome.hands == second.outcome.hands

    def test_generated_seed_reproduces_deal(self, deal_service):
        first = deal_service.shuffle_and_deal(profile="gin_rummy")
        replay = deal_service.shuffle_and_deal(profile="gin_rummy", seed=first.outcome.seed)

        assert isinstance(first.outcome.seed, int)
        assert replay.outcome.hands == first.outcome.hands

    def test_overrides_take_precedence(self, deal_service):
        result = deal_service.shuffle_and_deal(profile="bridge", hands=2, cards_per_hand=5, seed=3)

        assert len(result.outcome.hands) == 2
        assert all(len(hand) == 5 for hand in result.outcome.hands)
        assert len(result.outcome.residual) == 42
        CoreUsageChecker.verify_card_conservation(
            deal_service.deck.cards, result.outcome.hands, result.outcome.residual
        )

    def test_profile_seed_is_used(self, deal_service, config_service):
        config_service.register_deal_profile("fixed", DealConfig(hands=1, cards_per_hand=3, seed=77))

        first = deal_service.shuffle_and_deal(profile="fixed")
        second = deal_service.shuffle_and_deal(profile="fixed")

        assert first.outcome.seed == 77
        assert first.outcome.hands == second.outcome.hands

    def test_outcome_is_frozen_and_typed(self, deal_service):
        result = deal_service.shuffle_and_deal(profile="poker", seed=8)

        assert isinstance(result, DealResult)
        assert isinstance(result.outcome, DealOutcome)
        assert result.outcome.cards_per_hand == 2
        assert result.message == "已发出9手牌"
        with pytest.raises(AttributeError):
            result.outcome.seed = 9

    def test_oversized_request_is_invalid_request(self, deal_service, caplog):
        with caplog.at_level(logging.WARNING, logger="deck_kit.application.deal_service"):
            result = deal_service.shuffle_and_deal(hands=53, cards_per_hand=1, seed=1)

        assert not result.success
        assert result.status == ResultStatus.VALIDATION_ERROR
        assert result.error_code == "INVALID_REQUEST"
        assert result.outcome is None
        assert "only 52 available" in result.message
        assert "发牌请求无效" in caplog.text

    def test_oversized_profile_is_invalid_request(self, deal_service, config_service):
        config_service.register_deal_profile("crowded", DealConfig(hands=6, cards_per_hand=10))

        result = deal_service.shuffle_and_deal(profile="crowded")

        assert not result.success
        assert result.error_code == "INVALID_REQUEST"

    def test_negative_request_is_validation_error(self, deal_service):
        result = deal_service.shuffle_and_deal(hands=-1)
        assert not result.success
        assert result.status == ResultStatus.VALIDATION_ERROR
        assert result.error_code == "INVALID_DEAL_CONFIG"

    def test_success_is_logged(self, deal_service, caplog):
        with caplog.at_level(logging.INFO, logger="deck_kit.application.deal_service"):
            deal_service.shuffle_and_deal(seed=5)
        assert "seed=5" in caplog.text


class TestDealServiceQueries:
    """DealService查询接口的单元测试"""

    def test_deck_statistics(self, deal_service):
        result = deal_service.get_deck_statistics()

        assert result.success
        assert result.data['total'] == 52
        assert set(result.data['counts_by_suit'].values()) == {13}
        assert set(result.data['counts_by_rank'].values()) == {4}

    def test_cards_of_suit(self, deal_service):
        result = deal_service.get_cards_of_suit(Suit.SPADES)

        assert result.success
        assert result.data is deal_service.deck.spades()
        assert result.data[-1] == Card(Suit.SPADES, Rank.ACE)

    def test_cards_of_suit_invalid(self, deal_service):
        result = deal_service.get_cards_of_suit("spades")
        assert not result.success
        assert result.error_code == "INVALID_SUIT"

    def test_default_construction(self):
        service = DealService()
        assert isinstance(service.deck, Deck)
        assert len(service.deck) == 52

    def test_shared_deck(self, deck):
        first = DealService(deck=deck)
        second = DealService(deck=deck)
        assert first.deck is second.deck
