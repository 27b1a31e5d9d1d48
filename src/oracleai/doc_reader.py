"""
OracleDocReader - ファイルからのドキュメント読み込み

ファイルのバイト列をBLOBとしてDBに渡し、dbms_vector_chain.utl_to_text で
メタデータ（HTML形式）とプレーンテキストを取得します。
失敗したファイルはログを出力してスキップします。
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import oracledb
from langchain_core.documents import Document

from .db_utils import get_session_user, read_clob
from .exceptions import ExtractionError
from .html_metadata import OracleDocMetadataParser, looks_like_html
from .object_id import generate_object_id

UTL_TO_TEXT_BLOCK = """
    declare
        input blob;
    begin
        input := :blob;
        :mdata := dbms_vector_chain.utl_to_text(input, json(:pref));
        :text := dbms_vector_chain.utl_to_text(input);
    end;
"""


class OracleDocReader:
    """
    ファイルを読み込み、Oracle Database側でテキスト抽出するクラス

    設計:
    - Dependency Injection: DB接続を外部から注入（クローズは呼び出し側）
    - ファイル単位の失敗は例外にせず None を返す

    使用例:
        reader = OracleDocReader(connection)
        doc = reader.read_file('/data/manual.pdf', {'plaintext': 'false'})
    """

    def __init__(self, connection: Any):
        """
        OracleDocReaderを初期化

        Args:
            connection: oracledb接続オブジェクト

        Raises:
            ValueError: 接続がNoneの場合
        """
        if connection is None:
            raise ValueError("connection is required")

        self.connection = connection
        self.logger = logging.getLogger(__name__)

    def read_file(self, file_path: str, params: Dict[str, Any]) -> Optional[Document]:
        """
        ファイルを1件読み込み、Documentを返す

        Args:
            file_path: ファイルパス
            params: utl_to_textに渡すオプション（JSONにエンコードして渡す）

        Returns:
            Document（読み込み・抽出に失敗した場合は警告ログを出力してNone）
        """
        try:
            data = Path(file_path).read_bytes()
            mdata, text = self._extract(data, params)

            metadata: Dict[str, Any] = {}
            if looks_like_html(mdata):
                parser = OracleDocMetadataParser()
                parser.parse(mdata)
                metadata = parser.get_metadata()

            username = get_session_user(self.connection)
            metadata['_oid'] = generate_object_id(f"{username}${file_path}")
            metadata['_file'] = file_path

            return Document(page_content=text or '', metadata=metadata)

        except Exception as e:
            self.logger.warning(f"An exception occurred: {e}")
            self.logger.warning(f"Skip processing {file_path}")
            return None

    def _extract(self, data: bytes, params: Dict[str, Any]):
        """
        PL/SQLブロックを実行し、(メタデータ, テキスト) を返す

        Raises:
            ExtractionError: 抽出結果を読み込めなかった場合
        """
        with self.connection.cursor() as cursor:
            mdata_var = cursor.var(oracledb.DB_TYPE_CLOB)
            text_var = cursor.var(oracledb.DB_TYPE_CLOB)
            cursor.setinputsizes(blob=oracledb.DB_TYPE_BLOB)
            cursor.execute(
                UTL_TO_TEXT_BLOCK,
                blob=data,
                pref=json.dumps(params),
                mdata=mdata_var,
                text=text_var
            )
            try:
                return read_clob(mdata_var.getvalue()), read_clob(text_var.getvalue())
            except Exception as e:
                raise ExtractionError(f"Failed to read extracted text: {e}") from e
