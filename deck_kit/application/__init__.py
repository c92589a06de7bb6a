"""
Application Layer - 应用服务层

Services:
    ConfigService: 发牌与日志配置
    DealService: 发牌入口，返回结果对象
"""

from .types import ResultStatus, DealOutcome, DealResult, QueryResult
from .config_service import ConfigService, ConfigType, DealConfig, LoggingConfig, configure_logging
from .deal_service import DealService

__all__ = [
    'ResultStatus',
    'DealOutcome',
    'DealResult',
    'QueryResult',
    'ConfigService',
    'ConfigType',
    'DealConfig',
    'LoggingConfig',
    'configure_logging',
    'DealService',
]
