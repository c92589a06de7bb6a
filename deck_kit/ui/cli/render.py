"""发牌CLI渲染模块.

这个模块负责将发牌结果和牌组统计渲染为命令行文本，
实现显示逻辑与发牌逻辑的分离。
"""

from typing import Dict, Iterable, List, Optional

from deck_kit.core.deck import Card, Suit, Rank
from deck_kit.core.stats import hand_summary


class CLIRenderer:
    """CLI渲染器.

    所有渲染方法都是纯函数，仅依赖传入的数据，返回字符串。
    """

    @staticmethod
    def render_header(profile: str, seed: int, hands: int, cards_per_hand: int) -> str:
        """渲染头部信息.

        Args:
            profile: 发牌配置文件名
            seed: 随机种子
            hands: 手牌数量
            cards_per_hand: 每手牌张数

        Returns:
            格式化的头部信息字符串
        """
        lines = [
            "=== deck_kit 发牌 ===",
            f"配置: {profile}, 种子: {seed}",
            f"{hands}手 x {cards_per_hand}张",
        ]
        return "\n".join(lines)

    @staticmethod
    def render_hands(hands: Iterable[Iterable[Card]]) -> str:
        """渲染所有手牌，每手牌按全序排列并附带花色张数和大牌点.

        Args:
            hands: 按发牌顺序排列的手牌

        Returns:
            格式化的手牌字符串
        """
        lines = []
        for seat, hand in enumerate(hands, start=1):
            summary = hand_summary(hand)
            cards_str = CLIRenderer.format_cards(summary['cards'])
            shape = "-".join(str(summary['suit_counts'][suit]) for suit in Suit)
            lines.append(
                f"手牌 {seat}: {cards_str}  [牌型 {shape}, 大牌点 {summary['high_card_points']}]"
            )
        return "\n".join(lines)

    @staticmethod
    def render_residual(residual: Iterable[Card]) -> str:
        """渲染剩余未发出的牌."""
        residual = tuple(residual)
        if not residual:
            return "剩余: 0张"
        return f"剩余: {len(residual)}张 ({CLIRenderer.format_cards(residual)})"

    @staticmethod
    def render_statistics(counts_by_suit: Dict[Suit, int], counts_by_rank: Dict[Rank, int]) -> str:
        """渲染牌组统计.

        Args:
            counts_by_suit: 每种花色的张数
            counts_by_rank: 每种点数的张数

        Returns:
            格式化的统计字符串
        """
        suit_line = ", ".join(f"{suit.value} {count}" for suit, count in counts_by_suit.items())
        rank_line = ", ".join(f"{rank.symbol}:{count}" for rank, count in counts_by_rank.items())
        return "\n".join([
            "牌组统计:",
            f"  按花色: {suit_line}",
            f"  按点数: {rank_line}",
        ])

    @staticmethod
    def format_cards(cards: Iterable[Card]) -> str:
        return " ".join(str(card) for card in cards)

    @staticmethod
    def render_error(message: str, error_code: Optional[str] = None) -> str:
        """渲染错误信息."""
        lines: List[str] = [f"发牌失败: {message}"]
        if error_code:
            lines.append(f"错误码: {error_code}")
        return "\n".join(lines)
