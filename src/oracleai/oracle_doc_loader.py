"""
OracleDocLoader - Oracle Databaseからのドキュメント読み込み

テーブルの各行について、dbms_vector_chain.utl_to_text で
HTML形式のメタデータとプレーンテキストを取得し、LangChainの
Documentとして返します。
"""

import json
import logging
import re
from typing import Any, Dict, Iterator, List

from langchain_core.document_loaders import BaseLoader
from langchain_core.documents import Document

from .db_utils import fetch_rows, fetch_tuples, get_session_user, is_valid_identifier
from .exceptions import CatalogError, ConfigurationError
from .html_metadata import OracleDocMetadataParser, looks_like_html
from .object_id import generate_object_id
from .sources import DirectorySource, FileSource, LoadSource, TableSource

MAX_MDATA_COLS = 3

# ローダーが設定するメタデータキー（大文字小文字を区別しない）
RESERVED_METADATA_KEYS = ('_oid', '_rowid', '_file', 'title')

SUPPORTED_MDATA_TYPES = (
    'NUMBER',
    'BINARY_DOUBLE',
    'BINARY_FLOAT',
    'LONG',
    'DATE',
    'TIMESTAMP',
    'VARCHAR2',
)

METADATA_PARAMS = {'plaintext': 'false'}

COLUMN_INFO_SQL = """
    SELECT COLUMN_NAME, DATA_TYPE
    FROM ALL_TAB_COLUMNS
    WHERE OWNER = :ownername AND TABLE_NAME = :tablename
"""


class OracleDocLoader(BaseLoader):
    """
    Oracle Databaseからドキュメントを読み込むクラス

    責務:
    - ロード元（テーブル）の識別子・メタデータ列の検証
    - テキスト抽出クエリの組み立てと実行
    - HTMLメタデータの解析と _oid / _rowid の付与

    設計パターン:
    - Dependency Injection: DB接続を外部から注入（クローズは呼び出し側）
    - NOT Singleton: ロード元ごとに独立したインスタンス

    使用例:
        source = TableSource('SCOTT', 'DOCS', 'CONTENT', ('AUTHOR',))
        loader = OracleDocLoader(connection, source)
        documents = loader.load()
    """

    def __init__(self, connection: Any, source: LoadSource):
        """
        OracleDocLoaderを初期化

        Args:
            connection: oracledb接続オブジェクト
            source: ロード元（FileSource / DirectorySource / TableSource）

        Raises:
            ValueError: 必須パラメータが不足している場合
        """
        if connection is None:
            raise ValueError("connection is required")
        if source is None:
            raise ValueError("source is required")

        self.connection = connection
        self.source = source
        self.logger = logging.getLogger(__name__)

    def lazy_load(self) -> Iterator[Document]:
        """
        ロード元に応じてドキュメントを順に返す

        Raises:
            ConfigurationError: ロード元の設定が不正な場合
            CatalogError: 列情報を取得できなかった場合
        """
        if isinstance(self.source, TableSource):
            yield from self._load_from_table(self.source)
        elif isinstance(self.source, (FileSource, DirectorySource)):
            self.logger.info(
                f"Loading from {type(self.source).__name__} is not supported; "
                f"no documents returned for '{self.source.path}'"
            )
        else:
            raise ConfigurationError(
                f"Unsupported load source: {type(self.source).__name__}"
            )

    def _load_from_table(self, source: TableSource) -> List[Document]:
        """
        テーブルの全行をDocumentに変換

        Args:
            source: テーブルのロード元

        Returns:
            Documentのリスト（行が無い場合は空リスト）
        """
        self._validate_table_source(source)

        if source.mdata_cols:
            self._check_mdata_columns(source)

        mdata_cols_sql = ", t.ROWID"
        for col in source.mdata_cols:
            mdata_cols_sql += f", t.{col}"

        main_sql = f"""
            SELECT dbms_vector_chain.utl_to_text(t.{source.column}, json(:params)) AS MDATA,
                   dbms_vector_chain.utl_to_text(t.{source.column}) AS TEXT
                   {mdata_cols_sql}
            FROM {source.owner}.{source.table} t
        """

        _, rows = fetch_tuples(self.connection, main_sql, params=json.dumps(METADATA_PARAMS))
        username = get_session_user(self.connection)

        documents = []
        for row in rows:
            # MDATA, TEXT, ROWID の後にメタデータ列が指定順に並ぶ
            mdata, text, rowid = row[:3]
            extra_values = row[3:]

            metadata: Dict[str, Any] = {}
            if looks_like_html(mdata):
                parser = OracleDocMetadataParser()
                parser.parse(mdata)
                metadata = parser.get_metadata()

            metadata['_oid'] = generate_object_id(
                f"{username}${source.owner}${source.table}${source.column}${rowid}"
            )
            metadata['_rowid'] = rowid

            for col, value in zip(source.mdata_cols, extra_values):
                metadata[col] = value

            documents.append(Document(page_content=text or '', metadata=metadata))

        self.logger.info(
            f"Loaded {len(documents)} documents from {source.owner}.{source.table}"
        )
        return documents

    def _validate_table_source(self, source: TableSource) -> None:
        """
        テーブルのロード元設定を検証（クエリ実行前）

        Raises:
            ConfigurationError: 設定が不正な場合
        """
        if not source.owner or not source.column:
            raise ConfigurationError(
                "Owner and column name must be specified for loading from a table"
            )
        if not is_valid_identifier(source.owner):
            raise ConfigurationError("Invalid owner name")
        if not is_valid_identifier(source.table):
            raise ConfigurationError("Invalid table name")
        if not is_valid_identifier(source.column):
            raise ConfigurationError("Invalid column name")

        if len(source.mdata_cols) > MAX_MDATA_COLS:
            raise ConfigurationError("Exceeds max columns for metadata")
        for col in source.mdata_cols:
            if not is_valid_identifier(col):
                raise ConfigurationError(f"Invalid column name in mdata_cols: {col}")
            if col.lower() in RESERVED_METADATA_KEYS:
                raise ConfigurationError(
                    f"Reserved metadata key cannot be used in mdata_cols: {col}"
                )

    def _check_mdata_columns(self, source: TableSource) -> None:
        """
        メタデータ列が存在し、サポート対象の型であることを確認

        Raises:
            CatalogError: 列情報を取得できなかった場合
            ConfigurationError: 列が存在しない、または型が未サポートの場合
        """
        col_rows = fetch_rows(
            self.connection,
            COLUMN_INFO_SQL,
            ownername=source.owner.upper(),
            tablename=source.table.upper()
        )
        if not col_rows:
            raise CatalogError(
                f"Failed to retrieve column information for {source.owner}.{source.table}"
            )

        col_types = {row['COLUMN_NAME']: row['DATA_TYPE'] for row in col_rows}

        for col in source.mdata_cols:
            data_type = col_types.get(col.upper())
            if data_type is None:
                raise ConfigurationError(
                    f"Column {col} not found in table {source.table}"
                )
            if _base_type(data_type) not in SUPPORTED_MDATA_TYPES:
                raise ConfigurationError(
                    f"The datatype for the column {col} is not supported"
                )


def _base_type(data_type: str) -> str:
    """精度指定を除いたデータ型名（例: TIMESTAMP(6) → TIMESTAMP）"""
    return re.sub(r'\(\d+\)', '', data_type).strip()
