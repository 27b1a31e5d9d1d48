"""
Oracle AIドキュメントローダーパッケージ

Oracle Databaseのテーブル（およびファイル）からテキストとメタデータを読み込み、
LangChainのDocumentとして提供します。
"""

from .doc_reader import OracleDocReader
from .html_metadata import OracleDocMetadataParser, looks_like_html
from .object_id import generate_object_id
from .oracle_doc_loader import OracleDocLoader
from .sources import DirectorySource, FileSource, LoadSource, TableSource
from .exceptions import (
    OracleLoaderError,
    ConfigurationError,
    CatalogError,
    ExtractionError
)

__all__ = [
    # Classes
    'OracleDocLoader',
    'OracleDocReader',
    'OracleDocMetadataParser',
    'FileSource',
    'DirectorySource',
    'TableSource',
    'LoadSource',
    # Functions
    'generate_object_id',
    'looks_like_html',
    # Exceptions
    'OracleLoaderError',
    'ConfigurationError',
    'CatalogError',
    'ExtractionError',
]
