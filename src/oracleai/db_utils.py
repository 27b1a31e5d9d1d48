"""
Oracle Databaseアクセス用のヘルパー

接続は呼び出し側から借用するだけで、このモジュールが閉じることはありません。
"""

import re
from typing import Any, Dict, List, Tuple

import oracledb

_IDENTIFIER_PATTERN = re.compile(r'^[A-Za-z_][A-Za-z0-9_]*$')


def is_valid_identifier(identifier: str) -> bool:
    """
    SQL文に埋め込む識別子（スキーマ・テーブル・列名）を検証

    識別子はバインド変数にできないため、この検証が
    SQLインジェクション対策になります。

    Args:
        identifier: 検証する識別子

    Returns:
        英字またはアンダースコアで始まり、英数字とアンダースコアのみの場合True
    """
    if not isinstance(identifier, str):
        return False
    return _IDENTIFIER_PATTERN.fullmatch(identifier) is not None


def read_clob(value: Any) -> str:
    """
    CLOBの内容をチャンク単位で最後まで読み込む

    Args:
        value: oracledb.LOB、文字列、またはNone

    Returns:
        読み込んだ文字列（Noneの場合は空文字）
    """
    if value is None:
        return ''
    if not isinstance(value, oracledb.LOB):
        return value

    chunk_size = value.getchunksize()
    chunks = []
    offset = 1  # LOBのオフセットは1始まり
    while True:
        data = value.read(offset, chunk_size)
        if not data:
            break
        chunks.append(data)
        # CLOBのオフセットはUTF-16のコード単位で数える
        offset += len(data.encode('utf-16-le')) // 2
    return ''.join(chunks)


def fetch_tuples(connection: Any, sql: str, **binds: Any) -> Tuple[List[str], List[tuple]]:
    """
    クエリを実行し、列名のリストと行（タプル）のリストを返す

    列名が重複しても値は位置で取り出せます。
    カーソルを閉じる前に全てのLOBを読み切ります。

    Args:
        connection: oracledb接続オブジェクト
        sql: 実行するSQL
        **binds: バインド変数

    Returns:
        (列名のリスト, 行のリスト)
    """
    with connection.cursor() as cursor:
        cursor.execute(sql, **binds)
        columns = [desc[0] for desc in cursor.description or []]
        rows = [
            tuple(read_clob(value) if isinstance(value, oracledb.LOB) else value for value in row)
            for row in cursor.fetchall()
        ]
        return columns, rows


def fetch_rows(connection: Any, sql: str, **binds: Any) -> List[Dict[str, Any]]:
    """
    クエリを実行し、列名をキーとする辞書のリストで返す

    Args:
        connection: oracledb接続オブジェクト
        sql: 実行するSQL
        **binds: バインド変数

    Returns:
        行のリスト
    """
    columns, rows = fetch_tuples(connection, sql, **binds)
    return [dict(zip(columns, row)) for row in rows]


def get_session_user(connection: Any) -> str:
    """
    現在のセッションユーザー名を取得

    Args:
        connection: oracledb接続オブジェクト

    Returns:
        ユーザー名（取得できない場合は "unknown_user"）
    """
    rows = fetch_rows(connection, "SELECT USER FROM dual")
    if not rows:
        return 'unknown_user'
    return rows[0].get('USER') or 'unknown_user'
