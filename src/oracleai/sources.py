"""
ロード元の定義

ファイル・ディレクトリ・テーブルの3種類のロード元を、
それぞれ必要なフィールドだけを持つデータクラスとして表現します。
"""

from dataclasses import dataclass, field
from typing import Tuple, Union


@dataclass(frozen=True)
class FileSource:
    """
    単一ファイルのロード元

    Attributes:
        path: ファイルパス
    """
    path: str


@dataclass(frozen=True)
class DirectorySource:
    """
    ディレクトリのロード元

    Attributes:
        path: ディレクトリパス
    """
    path: str


@dataclass(frozen=True)
class TableSource:
    """
    テーブルのロード元

    識別子の検証はOracleDocLoader.load()の実行時に行います。

    Attributes:
        owner: スキーマ名
        table: テーブル名
        column: テキスト抽出対象の列名
        mdata_cols: メタデータにそのままコピーする追加列（最大3列）
    """
    owner: str
    table: str
    column: str
    mdata_cols: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # list で渡されても不変にしておく
        object.__setattr__(self, 'mdata_cols', tuple(self.mdata_cols or ()))


LoadSource = Union[FileSource, DirectorySource, TableSource]
