"""Tests for token extraction from markup."""

import logging

from mingled.extract import extract_tokens


class TestExtractTokens:
    def test_double_and_single_quotes(self):
        html = """<div class="p:8 bold"><span class='c:red'></span></div>"""
        assert extract_tokens(html) == ["p:8", "bold", "c:red"]

    def test_class_name_attribute(self):
        jsx = '<Button className="flex:center gap:8" />'
        assert extract_tokens(jsx) == ["flex:center", "gap:8"]

    def test_first_seen_order_and_dedupe(self):
        html = '<a class="m:4 p:4"></a><b class="p:4 m:8 m:4"></b>'
        assert extract_tokens(html) == ["m:4", "p:4", "m:8"]

    def test_groups_expanded(self):
        html = '<div class="p:8 hover:(c:red bg:blue)"></div>'
        assert extract_tokens(html) == ["p:8", "hover:c:red", "hover:bg:blue"]

    def test_unbalanced_group_falls_back_to_split(self, caplog):
        html = '<div class="hover:(c:red bold"></div>'
        with caplog.at_level(logging.WARNING, logger="mingled"):
            tokens = extract_tokens(html)
        assert tokens == ["hover:(c:red", "bold"]
        assert "skipping group expansion" in caplog.text

    def test_no_transforms(self):
        html = '<div class="hover:(c:red)"></div>'
        assert extract_tokens(html, transforms=[]) == ["hover:(c:red)"]

    def test_ignores_text_outside_class_attributes(self):
        html = "<p>bold and p:8</p>"
        assert extract_tokens(html) == []
