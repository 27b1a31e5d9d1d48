"""
ユニットテスト共通のフィクスチャ

oracledb接続をMagicMockで置き換え、connection.cursor() の呼び出しごとに
指定した列と行を返すカーソルを順番に払い出します。
"""
import pytest
from unittest.mock import MagicMock


def _make_cursor(columns, rows):
    """列名のリストと行（タプル）のリストを返すカーソルのモックを作成"""
    cursor = MagicMock()
    cursor.description = [(name, None, None, None, None, None, None) for name in columns]
    cursor.fetchall.return_value = rows
    return cursor


@pytest.fixture
def make_cursor():
    """カーソルのモックを作成する関数"""
    return _make_cursor


@pytest.fixture
def make_connection():
    """
    カーソルを順に返す接続モックのファクトリ

    Usage:
        connection = make_connection(
            make_cursor(['USER'], [('SCOTT',)]),
        )
    """
    def _factory(*cursors):
        connection = MagicMock()
        contexts = []
        for cursor in cursors:
            context = MagicMock()
            context.__enter__.return_value = cursor
            contexts.append(context)
        connection.cursor.side_effect = contexts
        return connection

    return _factory
