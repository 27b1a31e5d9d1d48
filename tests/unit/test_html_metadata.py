"""
OracleDocMetadataParserのユニットテスト
"""

import pytest
from src.oracleai.html_metadata import OracleDocMetadataParser, looks_like_html


class TestOracleDocMetadataParser:
    """<title> と <meta> の抽出"""

    @pytest.fixture
    def parser(self):
        return OracleDocMetadataParser()

    def test_parses_title_and_meta_tags(self, parser):
        """titleとmetaタグが正しく解析されることを確認"""
        parser.parse(
            "<html><title>Sample Title</title>"
            "<meta name='description' content='Sample Content'></html>"
        )

        assert parser.get_metadata() == {
            'title': 'Sample Title',
            'description': 'Sample Content',
        }

    def test_missing_meta_content_becomes_na(self, parser):
        """contentが無いmetaタグは "N/A" になることを確認"""
        parser.parse("<html><title>Sample Title</title><meta name='description'></html>")

        assert parser.get_metadata() == {
            'title': 'Sample Title',
            'description': 'N/A',
        }

    def test_multiple_meta_tags(self, parser):
        """複数のmetaタグを処理できることを確認"""
        parser.parse(
            "<html><title>Sample Title</title>"
            "<meta name='description' content='Sample Content'>"
            "<meta name='author' content='John Doe'></html>"
        )

        assert parser.get_metadata() == {
            'title': 'Sample Title',
            'description': 'Sample Content',
            'author': 'John Doe',
        }

    def test_no_title_tag(self, parser):
        """titleタグが無い場合"""
        parser.parse("<html><meta name='description' content='Sample Content'></html>")

        assert parser.get_metadata() == {'description': 'Sample Content'}

    def test_empty_html_string(self, parser):
        """空文字列では空の辞書になることを確認"""
        parser.parse("")

        assert parser.get_metadata() == {}

    def test_meta_without_name_is_ignored(self, parser):
        """nameを持たないmetaタグは無視されることを確認"""
        parser.parse("<html><meta charset='utf-8'><meta content='orphan'></html>")

        assert parser.get_metadata() == {}

    def test_last_meta_with_same_name_wins(self, parser):
        """同じnameのmetaタグは後勝ち"""
        parser.parse(
            "<meta name='author' content='First'>"
            "<meta name='author' content='Second'>"
        )

        assert parser.get_metadata() == {'author': 'Second'}

    def test_only_first_text_after_title_is_captured(self, parser):
        """titleの直後の最初のテキストのみ取り込まれることを確認"""
        parser.parse("<html><title>Heading</title><p>Body text</p></html>")

        assert parser.get_metadata() == {'title': 'Heading'}

    def test_other_open_tags_keep_title_capture_armed(self, parser):
        """空のtitleの後は、他のタグを挟んでも次のテキストがtitleになる"""
        parser.parse("<html><title></title><p>After</p></html>")

        assert parser.get_metadata() == {'title': 'After'}

    def test_entities_are_decoded(self, parser):
        """文字参照がデコードされることを確認"""
        parser.parse("<meta name='k' content='Q&amp;A &lt; b'>")

        assert parser.get_metadata() == {'k': 'Q&A < b'}

    def test_malformed_markup_does_not_raise(self, parser):
        """不正なマークアップでも例外にならないことを確認"""
        parser.parse("<html><title>Broken<meta name='x' content='y'<<</")

        assert isinstance(parser.get_metadata(), dict)

    def test_metadata_accumulates_across_parse_calls(self, parser):
        """同じインスタンスで複数回parseすると結果が蓄積されることを確認"""
        parser.parse("<meta name='a' content='1'>")
        parser.parse("<meta name='b' content='2'>")

        assert parser.get_metadata() == {'a': '1', 'b': '2'}


class TestLooksLikeHtml:
    """HTMLシグネチャ判定のテスト"""

    @pytest.mark.parametrize("text", [
        "<!DOCTYPE html><html></html>",
        "<!doctype html>",
        "<HTML><TITLE>x</TITLE></HTML>",
        "<html><title>x</title></html>",
        "<html lang='ja'><title>x</title></html>",
    ])
    def test_html_signatures(self, text):
        assert looks_like_html(text) is True

    @pytest.mark.parametrize("text", [
        None,
        "",
        "plain text document",
        "  <html>",
        "<htmlx>",
        "<?xml version='1.0'?>",
    ])
    def test_non_html(self, text):
        assert looks_like_html(text) is False
