"""
設定管理パッケージ

.envファイルから設定を読み込み、DB接続パラメータと
ロード元の設定値を提供します。
"""

from .config_loader import (
    load_config,
    get_db_connection_params,
    get_table_source_config,
)

__all__ = [
    'load_config',
    'get_db_connection_params',
    'get_table_source_config',
]
