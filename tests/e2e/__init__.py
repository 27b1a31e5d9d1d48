"""
Oracle AIドキュメントローダーのエンドツーエンドテスト

これらのテストは、実際のOracle Databaseを使用して
テーブルからのドキュメント読み込みを検証します。

要件:
- DB認証情報を含む有効な.env設定
- dbms_vector_chain が利用可能なOracle Database（23ai以降）
- テーブル作成権限を持つユーザー
"""
