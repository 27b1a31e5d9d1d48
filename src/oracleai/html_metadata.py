"""
HTMLメタデータ解析モジュール

dbms_vector_chain.utl_to_text がHTML形式で返すメタデータから、
<title> と <meta name=... content=...> をフラットな辞書に変換します。
DOMは構築せず、開始タグ・テキストのイベントを1回の走査で処理します。
"""

import logging
import re
from html.parser import HTMLParser
from typing import Dict, List, Optional, Tuple

logger = logging.getLogger(__name__)

_HTML_SIGNATURE = re.compile(r'<!DOCTYPE html|<html[\s>]', re.IGNORECASE)


def looks_like_html(text: Optional[str]) -> bool:
    """
    文字列がHTMLで始まっているか判定

    Args:
        text: 判定対象の文字列

    Returns:
        "<!DOCTYPE html" または "<html>" で始まる場合True（大文字小文字は区別しない）
    """
    if not text:
        return False
    return _HTML_SIGNATURE.match(text) is not None


class OracleDocMetadataParser(HTMLParser):
    """
    HTMLからメタデータを抽出するストリーミングパーサー

    ルール:
    - <meta name=X content=Y> → metadata[X] = Y（contentが無ければ "N/A"）
    - nameを持たない<meta>は無視
    - <title>の直後の最初のテキスト → metadata["title"]

    使用例:
        parser = OracleDocMetadataParser()
        parser.parse('<html><title>Report</title></html>')
        parser.get_metadata()  # {'title': 'Report'}
    """

    def __init__(self):
        super().__init__()
        self.metadata: Dict[str, str] = {}
        self.match = False

    def handle_starttag(self, tag: str, attrs: List[Tuple[str, Optional[str]]]) -> None:
        if tag == 'meta':
            entry = None
            content = None
            for name, value in attrs:
                if name == 'name':
                    entry = value or ''
                elif name == 'content':
                    content = value
            if entry:
                self.metadata[entry] = content if content is not None else 'N/A'
        elif tag == 'title':
            self.match = True

    def handle_data(self, data: str) -> None:
        if self.match:
            self.metadata['title'] = data
            self.match = False

    def get_metadata(self) -> Dict[str, str]:
        """これまでに抽出したメタデータを返す"""
        return self.metadata

    def parse(self, html: str) -> None:
        """
        HTML文字列全体を解析

        不正なマークアップで解析が中断しても例外は送出せず、
        それまでに抽出したメタデータを保持します。

        Args:
            html: 解析対象のHTML文字列
        """
        if not html:
            return

        self.reset()
        try:
            self.feed(html)
            self.close()
        except Exception as e:
            logger.warning(f"HTML metadata parsing stopped early: {e}")
