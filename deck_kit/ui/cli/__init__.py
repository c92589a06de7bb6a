"""发牌CLI用户界面模块.

这个包提供命令行发牌工具，包括：
- 命令行入口
- 渲染器（显示逻辑）
"""

from .cli_deal import main, run
from .render import CLIRenderer

__all__ = [
    'main',
    'run',
    'CLIRenderer',
]
