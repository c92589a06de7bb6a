"""
牌组、洗牌、发牌和统计的集成测试.

从构造牌组到洗牌、发四手牌的完整流程，以及应用层入口.
"""

import random

import pytest

from deck_kit.application import DealService
from deck_kit.core.deck import Card, Deck, Suit, Rank
from deck_kit.core.dealing import deal_one, deal_hands, shuffle, shuffle_and_deal
from deck_kit.core.exceptions import EmptySequenceError
from deck_kit.core.stats import hand_summary
from deck_kit.tests.anti_cheat.core_usage_checker import CoreUsageChecker


@pytest.mark.integration
class TestFullDealFlow:
    """完整发牌流程的集成测试."""

    def test_bridge_deal_uses_whole_deck(self):
        """构造牌组 → 固定种子洗牌 → 发4手13张."""
        deck = Deck()
        shuffled = shuffle(deck.cards, random.Random(2024))
        hands, residual = deal_hands(shuffled, 4, 13)

        assert len(hands) == 4
        assert all(len(hand) == 13 for hand in hands)
        assert frozenset().union(*hands) == frozenset(deck.cards)
        assert residual == ()
        CoreUsageChecker.verify_card_conservation(deck.cards, hands, residual)

        # 四手牌的大牌点总和恒为40
        assert sum(hand_summary(hand)['high_card_points'] for hand in hands) == 40

    def test_deal_card_by_card_until_exhausted(self, deck, seeded_rng):
        sequence = shuffle(deck.cards, seeded_rng)
        drawn = []
        while sequence:
            card, sequence = deal_one(sequence)
            drawn.append(card)

        assert len(drawn) == 52
        assert sorted(drawn) == list(deck.cards)
        with pytest.raises(EmptySequenceError):
            deal_one(sequence)

    def test_first_card_dealt_is_top_of_shuffled_stack(self, deck):
        """第一张发出的牌是三遍洗牌后工作列表的最后一张."""
        working = list(deck.cards)
        rng = random.Random(31)
        for _ in range(3):
            rng.shuffle(working)

        hands, residual = shuffle_and_deal(deck, random.Random(31), 1, 1)

        assert hands[0] == frozenset({working[-1]})
        assert residual[-1] == working[0]

    def test_deck_unchanged_after_many_deals(self, deck):
        snapshot = deck.cards
        for seed in range(20):
            shuffle_and_deal(deck, random.Random(seed), 4, 13)

        assert deck.cards == snapshot
        assert deck.counts_by_suit() == {suit: 13 for suit in Suit}
        assert deck.counts_by_rank() == {rank: 4 for rank in Rank}

    def test_service_and_core_agree(self, deck):
        service = DealService(deck=deck)
        result = service.shuffle_and_deal(profile="bridge", seed=2024)
        core = deal_hands(shuffle(deck.cards, random.Random(2024)), 4, 13)

        assert result.outcome.hands == core.hands

    def test_core_does_not_depend_on_outer_layers(self):
        import sys
        import deck_kit.application  # noqa: F401 确保外层已加载
        for module_name in list(sys.modules):
            CoreUsageChecker.verify_no_external_dependencies(module_name)

    def test_seeded_reference_hand_is_stable(self, deck):
        """同一种子在不同牌组实例上给出相同的手牌."""
        first = shuffle_and_deal(Deck(), random.Random(7), 4, 13)
        second = shuffle_and_deal(deck, random.Random(7), 4, 13)

        assert first == second
        assert Card(Suit.SPADES, Rank.ACE) in frozenset().union(*first.hands)
