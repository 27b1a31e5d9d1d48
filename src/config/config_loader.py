"""
設定ファイル読み込みモジュール
.envファイルから環境変数を読み込み、DB接続パラメータとロード元設定を提供します
"""

import logging
import os
from pathlib import Path
from typing import Dict

from dotenv import load_dotenv

from src.oracleai.sources import TableSource

logger = logging.getLogger(__name__)


def load_config() -> Path:
    """
    環境変数を読み込む
    .envファイルが存在しない場合はエラーを発生させます

    .envファイルの検索順序:
    1. カレントディレクトリ
    2. 親ディレクトリ（プロジェクトルート）

    Returns:
        読み込んだ.envファイルのパス
    """
    env_file = Path('.env')

    if not env_file.exists():
        env_file = Path('..') / '.env'

    if not env_file.exists():
        raise FileNotFoundError(
            ".envファイルが見つかりません。\n"
            "プロジェクトルートに.env.templateをコピーして.envを作成し、必要な値を設定してください。\n"
            f"検索パス: {Path('.env').absolute()}, {(Path('..') / '.env').absolute()}"
        )

    load_dotenv(env_file)
    logger.info(f"Loaded environment variables from {env_file.absolute()}")
    return env_file


def get_db_connection_params() -> Dict[str, str]:
    """
    Oracle Database接続パラメータを取得

    Returns:
        dict: user, password, dsnを含む辞書

    Raises:
        ValueError: 必須パラメータが設定されていない場合
    """
    username = os.getenv('DB_USERNAME')
    password = os.getenv('DB_PASSWORD')
    dsn = os.getenv('DB_DSN')

    if not all([username, password, dsn]):
        missing = []
        if not username: missing.append('DB_USERNAME')
        if not password: missing.append('DB_PASSWORD')
        if not dsn: missing.append('DB_DSN')
        raise ValueError(
            f"必須のDB接続パラメータが設定されていません: {', '.join(missing)}"
        )

    return {
        'user': username,
        'password': password,
        'dsn': dsn
    }


def get_table_source_config() -> TableSource:
    """
    テーブルのロード元設定を取得

    ORACLEAI_MDATA_COLS はカンマ区切り（省略可）。

    Returns:
        TableSource

    Raises:
        ValueError: 必須パラメータが設定されていない場合
    """
    owner = os.getenv('ORACLEAI_OWNER')
    table = os.getenv('ORACLEAI_TABLE')
    column = os.getenv('ORACLEAI_COLUMN')

    if not all([owner, table, column]):
        missing = []
        if not owner: missing.append('ORACLEAI_OWNER')
        if not table: missing.append('ORACLEAI_TABLE')
        if not column: missing.append('ORACLEAI_COLUMN')
        raise ValueError(
            f"必須のロード元パラメータが設定されていません: {', '.join(missing)}"
        )

    mdata_cols = [
        col.strip()
        for col in os.getenv('ORACLEAI_MDATA_COLS', '').split(',')
        if col.strip()
    ]

    return TableSource(
        owner=owner,
        table=table,
        column=column,
        mdata_cols=tuple(mdata_cols)
    )
