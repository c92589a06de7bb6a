#!/usr/bin/env python3
"""
ConfigService - 配置管理服务

负责集中化管理发牌和日志配置，包括：
- 发牌配置（手牌数、每手张数、种子、洗牌遍数）
- 日志配置

按名称查找配置，找不到时回退到默认配置并记录警告。
"""

import logging
from dataclasses import dataclass
from enum import Enum
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, List, Optional

from deck_kit.core.dealing import SHUFFLE_PASSES

from .types import QueryResult


class ConfigType(Enum):
    """配置类型枚举"""
    DEAL = "deal"
    LOGGING = "logging"


@dataclass(frozen=True)
class DealConfig:
    """
    发牌配置

    只校验单个字段，总张数是否超过牌组由核心层在发牌前校验。
    """
    hands: int = 4
    cards_per_hand: int = 13
    seed: Optional[int] = None
    shuffle_passes: int = SHUFFLE_PASSES

    def __post_init__(self):
        """验证发牌参数"""
        if self.hands < 0:
            raise ValueError(f"hands不能为负数: {self.hands}")
        if self.cards_per_hand < 0:
            raise ValueError(f"cards_per_hand不能为负数: {self.cards_per_hand}")
        if self.shuffle_passes < 1:
            raise ValueError(f"shuffle_passes必须至少为1: {self.shuffle_passes}")


@dataclass(frozen=True)
class LoggingConfig:
    """日志配置"""
    log_level: str = 'INFO'
    log_format: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    enable_console_logging: bool = True
    enable_file_logging: bool = False
    log_file_path: str = "logs/deck_kit.log"
    max_log_file_size_mb: int = 10
    backup_count: int = 5


class ConfigService:
    """配置管理服务"""

    def __init__(self):
        """初始化配置服务"""
        self.logger = logging.getLogger(__name__)
        self._configs: Dict[ConfigType, Dict[str, Any]] = {}
        self._load_default_configs()

    def _load_default_configs(self):
        """加载默认配置"""
        self._configs[ConfigType.DEAL] = {
            'default': DealConfig(),
            'bridge': DealConfig(hands=4, cards_per_hand=13),
            'poker': DealConfig(hands=9, cards_per_hand=2),
            'gin_rummy': DealConfig(hands=2, cards_per_hand=10),
            'single': DealConfig(hands=1, cards_per_hand=1),
        }

        self._configs[ConfigType.LOGGING] = {
            'default': LoggingConfig(),
            'debug': LoggingConfig(log_level='DEBUG'),
            'quiet': LoggingConfig(log_level='WARNING'),
        }

        self.logger.debug("默认配置加载完成")

    def get_deal_config(self, profile: str = "default") -> QueryResult[DealConfig]:
        """
        获取发牌配置

        Args:
            profile: 配置文件名 (default, bridge, poker, gin_rummy, single)

        Returns:
            查询结果，包含发牌配置
        """
        config_profiles = self._configs[ConfigType.DEAL]
        if profile not in config_profiles:
            self.logger.warning(f"未找到发牌配置 '{profile}'，使用默认配置")
            profile = "default"
        return QueryResult.success_result(config_profiles[profile])

    def get_logging_config(self, profile: str = "default") -> QueryResult[LoggingConfig]:
        """
        获取日志配置

        Args:
            profile: 配置文件名 (default, debug, quiet)

        Returns:
            查询结果，包含日志配置
        """
        config_profiles = self._configs[ConfigType.LOGGING]
        if profile not in config_profiles:
            self.logger.warning(f"未找到日志配置 '{profile}'，使用默认配置")
            profile = "default"
        return QueryResult.success_result(config_profiles[profile])

    def register_deal_profile(self, profile: str, config: DealConfig) -> QueryResult[bool]:
        """
        注册自定义发牌配置

        Args:
            profile: 配置文件名
            config: 发牌配置

        Returns:
            查询结果，包含注册是否成功
        """
        if not isinstance(config, DealConfig):
            return QueryResult.failure_result(
                f"配置必须是DealConfig类型，实际: {type(config).__name__}",
                error_code="INVALID_CONFIG_TYPE"
            )
        if not profile:
            return QueryResult.failure_result(
                "配置文件名不能为空",
                error_code="INVALID_PROFILE_NAME"
            )

        self._configs[ConfigType.DEAL][profile] = config
        self.logger.info(f"发牌配置 '{profile}' 注册成功")
        return QueryResult.success_result(True)

    def list_available_profiles(self, config_type: ConfigType) -> QueryResult[List[str]]:
        """
        列出可用的配置文件

        Args:
            config_type: 配置类型

        Returns:
            查询结果，包含可用配置文件列表
        """
        if config_type not in self._configs:
            return QueryResult.failure_result(
                f"配置类型 {config_type} 不存在",
                error_code="CONFIG_TYPE_NOT_FOUND"
            )
        return QueryResult.success_result(list(self._configs[config_type].keys()))


def configure_logging(config: LoggingConfig) -> logging.Logger:
    """
    按日志配置设置deck_kit的日志处理器

    重复调用时会先移除之前添加的处理器，避免重复输出。

    Args:
        config: 日志配置

    Returns:
        deck_kit包的根日志记录器
    """
    package_logger = logging.getLogger("deck_kit")
    package_logger.setLevel(getattr(logging, config.log_level.upper(), logging.INFO))

    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(config.log_format)

    if config.enable_console_logging:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        package_logger.addHandler(console_handler)

    if config.enable_file_logging:
        Path(config.log_file_path).parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            config.log_file_path,
            maxBytes=config.max_log_file_size_mb * 1024 * 1024,
            backupCount=config.backup_count,
            encoding='utf-8'
        )
        file_handler.setFormatter(formatter)
        package_logger.addHandler(file_handler)

    if not package_logger.handlers:
        package_logger.addHandler(logging.NullHandler())

    return package_logger
