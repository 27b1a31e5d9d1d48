"""
Oracle AIドキュメントローダー用のカスタム例外クラス

このモジュールは、テーブル・ファイルからのドキュメント読み込みにおける
エラーハンドリングを明確にするためのカスタム例外を定義します。

DB接続やクエリ実行時のエラー（oracledb.DatabaseError など）は
ラップせず、そのまま呼び出し側に伝播します。
"""


class OracleLoaderError(Exception):
    """ドキュメントローダー操作の基底例外クラス"""
    pass


class ConfigurationError(OracleLoaderError):
    """ロード元設定エラー

    owner/列名の未指定、不正な識別子、メタデータ列数の超過、
    存在しない列、未サポートのデータ型を表します。
    クエリ実行前に必ず送出されます。
    """
    pass


class CatalogError(OracleLoaderError):
    """カタログ参照エラー

    ALL_TAB_COLUMNSから列情報を取得できなかった場合のエラーを表します。
    """
    pass


class ExtractionError(OracleLoaderError):
    """ファイルからのテキスト抽出エラー

    ファイル単位で捕捉され、該当ファイルはスキップされます。
    """
    pass
