"""发牌命令行入口.

洗一副牌并按配置发出若干手牌，打印每手牌和剩余的牌。

用法:
    deck-kit-deal --profile bridge --seed 42
    deck-kit-deal --hands 9 --cards-per-hand 2 --stats
"""

import argparse
import sys
from dataclasses import replace
from typing import List, Optional

from deck_kit.application import ConfigService, ConfigType, DealService, configure_logging

from .render import CLIRenderer


def build_parser(config_service: ConfigService) -> argparse.ArgumentParser:
    """构建命令行参数解析器."""
    profiles = config_service.list_available_profiles(ConfigType.DEAL).data
    parser = argparse.ArgumentParser(
        prog="deck-kit-deal",
        description="洗牌并发出若干手牌"
    )
    parser.add_argument("--profile", default="default",
                        help=f"发牌配置 ({', '.join(profiles)})")
    parser.add_argument("--hands", type=int, default=None, help="手牌数量，覆盖配置")
    parser.add_argument("--cards-per-hand", type=int, default=None, help="每手牌张数，覆盖配置")
    parser.add_argument("--seed", type=int, default=None, help="随机种子，省略时随机生成")
    parser.add_argument("--stats", action="store_true", help="同时打印牌组统计")
    parser.add_argument("--log-level", default=None,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="日志级别，默认使用quiet日志配置")
    return parser


def run(argv: Optional[List[str]] = None) -> int:
    """执行一次发牌并打印结果.

    Args:
        argv: 命令行参数，为None时使用sys.argv

    Returns:
        退出码，成功为0，请求无效为1
    """
    config_service = ConfigService()
    args = build_parser(config_service).parse_args(argv)

    logging_config = config_service.get_logging_config("quiet").data
    if args.log_level:
        logging_config = replace(logging_config, log_level=args.log_level)
    configure_logging(logging_config)

    service = DealService(config_service=config_service)
    result = service.shuffle_and_deal(
        profile=args.profile,
        seed=args.seed,
        hands=args.hands,
        cards_per_hand=args.cards_per_hand,
    )
    if not result.success:
        print(CLIRenderer.render_error(result.message, result.error_code), file=sys.stderr)
        return 1

    outcome = result.outcome
    print(CLIRenderer.render_header(outcome.profile, outcome.seed,
                                    len(outcome.hands), outcome.cards_per_hand))
    print(CLIRenderer.render_hands(outcome.hands))
    print(CLIRenderer.render_residual(outcome.residual))

    if args.stats:
        stats = service.get_deck_statistics().data
        print(CLIRenderer.render_statistics(stats['counts_by_suit'], stats['counts_by_rank']))

    return 0


def main():
    """CLI主入口."""
    try:
        sys.exit(run())
    except KeyboardInterrupt:
        print("\n发牌被中断")
        sys.exit(130)


if __name__ == "__main__":
    main()
