"""
统计视图的单元测试.
"""

from deck_kit.core.deck import Card, Suit, Rank
from deck_kit.core.stats import (
    HIGH_CARD_POINTS,
    counts_by_rank,
    counts_by_suit,
    group_by_suit,
    hand_summary,
)


def _cards(*names):
    return [Card.from_str(name) for name in names]


class TestGrouping:
    """分组计数的单元测试."""

    def test_group_by_suit_preserves_input_order(self):
        cards = _cards("KH", "2C", "3H", "AC")
        groups = group_by_suit(cards)

        assert list(groups.keys()) == [Suit.CLUBS, Suit.HEARTS]
        assert groups[Suit.HEARTS] == tuple(_cards("KH", "3H"))
        assert groups[Suit.CLUBS] == tuple(_cards("2C", "AC"))

    def test_group_by_suit_empty(self):
        assert group_by_suit([]) == {}

    def test_counts_only_include_present_keys(self):
        cards = _cards("KH", "KS", "2S")

        assert counts_by_suit(cards) == {Suit.HEARTS: 1, Suit.SPADES: 2}
        assert counts_by_rank(cards) == {Rank.TWO: 1, Rank.KING: 2}

    def test_counts_accept_generators(self):
        cards = _cards("AH", "AD")
        assert counts_by_rank(card for card in cards) == {Rank.ACE: 2}

    def test_full_deck_counts(self, deck):
        assert set(counts_by_suit(deck.cards).values()) == {13}
        assert len(counts_by_suit(deck.cards)) == 4
        assert set(counts_by_rank(deck.cards).values()) == {4}
        assert len(counts_by_rank(deck.cards)) == 13


class TestHandSummary:
    """手牌描述的单元测试."""

    def test_summary_sorts_and_counts(self):
        hand = frozenset(_cards("AS", "KH", "2C", "JH", "5D"))
        summary = hand_summary(hand)

        assert summary['cards'] == tuple(_cards("2C", "5D", "JH", "KH", "AS"))
        assert summary['suit_counts'] == {
            Suit.CLUBS: 1, Suit.DIAMONDS: 1, Suit.HEARTS: 2, Suit.SPADES: 1,
        }
        assert summary['high_card_points'] == 4 + 3 + 1

    def test_empty_hand(self):
        summary = hand_summary(frozenset())
        assert summary['cards'] == ()
        assert summary['high_card_points'] == 0
        assert set(summary['suit_counts'].values()) == {0}

    def test_full_deck_has_forty_points(self, deck):
        assert hand_summary(deck.cards)['high_card_points'] == 40
        assert sum(HIGH_CARD_POINTS.values()) == 10
