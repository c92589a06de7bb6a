"""发牌查看器 Streamlit 应用.

运行:
    streamlit run deck_kit/ui/streamlit/app.py
"""

import logging
from typing import Any, Dict, Iterable

import streamlit as st

from deck_kit.application import ConfigType, DealService
from deck_kit.core.deck import Card, Suit
from deck_kit.core.stats import hand_summary

logger = logging.getLogger(__name__)

# 红色花色
RED_SUITS = (Suit.HEARTS, Suit.DIAMONDS)


def initialize_session_state():
    """初始化session state."""
    if 'deal_service' not in st.session_state:
        st.session_state.deal_service = DealService()
    if 'last_result' not in st.session_state:
        st.session_state.last_result = None
    if 'deal_count' not in st.session_state:
        st.session_state.deal_count = 0


def format_card_html(card: Card) -> str:
    """把一张牌格式化为带颜色的HTML片段."""
    color = "red" if card.suit in RED_SUITS else "black"
    return f'<span style="color:{color}; font-weight:bold">{card.rank.symbol}{card.suit.value}</span>'


def render_header():
    """渲染页面头部."""
    st.title("🃏 deck_kit 发牌查看器")
    st.markdown("---")


def render_sidebar() -> Dict[str, Any]:
    """渲染侧边栏输入，返回发牌参数."""
    service: DealService = st.session_state.deal_service
    profiles = service.config_service.list_available_profiles(ConfigType.DEAL).data

    st.sidebar.header("发牌设置")
    profile = st.sidebar.selectbox("配置", profiles, index=0)
    defaults = service.config_service.get_deal_config(profile).data
    hands = st.sidebar.number_input("手牌数量", min_value=0, max_value=52, value=defaults.hands)
    cards_per_hand = st.sidebar.number_input("每手张数", min_value=0, max_value=52,
                                             value=defaults.cards_per_hand)
    use_seed = st.sidebar.checkbox("固定种子", value=False)
    seed = st.sidebar.number_input("种子", min_value=0, value=42) if use_seed else None

    return {
        'profile': profile,
        'hands': int(hands),
        'cards_per_hand': int(cards_per_hand),
        'seed': int(seed) if seed is not None else None,
    }


def deal_from_session(params: Dict[str, Any]):
    """用session中的发牌服务发牌，并保存结果."""
    service: DealService = st.session_state.deal_service
    result = service.shuffle_and_deal(**params)
    st.session_state.last_result = result
    if result.success:
        st.session_state.deal_count += 1
    else:
        logger.warning(f"发牌失败: {result.message}")
    return result


def render_hands(hands: Iterable[Iterable[Card]]):
    """按座位渲染每手牌."""
    hands = list(hands)
    if not hands:
        st.info("没有发出手牌")
        return

    columns = st.columns(min(len(hands), 4))
    for seat, hand in enumerate(hands):
        summary = hand_summary(hand)
        with columns[seat % len(columns)]:
            st.subheader(f"手牌 {seat + 1}")
            for suit in reversed(list(Suit)):
                suit_cards = [card for card in summary['cards'] if card.suit == suit]
                cards_html = " ".join(format_card_html(card) for card in suit_cards) or "-"
                st.markdown(f"{suit.value} {cards_html}", unsafe_allow_html=True)
            st.caption(f"大牌点: {summary['high_card_points']}")


def render_result(result):
    """渲染最近一次发牌结果."""
    if result is None:
        st.info("点击 '发牌' 开始")
        return
    if not result.success:
        st.error(f"发牌失败: {result.message}")
        return

    st.metric("种子", result.outcome.seed)
    render_hands(result.outcome.hands)
    st.write(f"剩余 {len(result.outcome.residual)} 张")


def render_statistics():
    """渲染牌组统计."""
    service: DealService = st.session_state.deal_service
    stats = service.get_deck_statistics().data
    with st.expander("📊 牌组统计", expanded=False):
        st.write(f"总张数: {stats['total']}")
        st.write({suit.name: count for suit, count in stats['counts_by_suit'].items()})
        st.write({rank.symbol: count for rank, count in stats['counts_by_rank'].items()})


def main():
    """应用主入口."""
    st.set_page_config(page_title="deck_kit", page_icon="🃏", layout="wide")
    initialize_session_state()
    render_header()
    params = render_sidebar()
    if st.sidebar.button("发牌"):
        deal_from_session(params)
    render_result(st.session_state.last_result)
    render_statistics()


if __name__ == "__main__":
    main()
