# tests/research/test_extractor.py
import logging

import pytest

from src.research.errors import ParseError
from src.research.extractor import extract_json, find_fenced_block


class TestExtractJson:
    def test_json_fence_ignores_surrounding_prose(self):
        text = (
            "Here are today's picks:\n"
            "```json\n"
            '[{"symbol": "TCS", "changePercent": 1.2}]\n'
            "```\n"
            "Let me know if you need more."
        )

        assert extract_json(text) == [{"symbol": "TCS", "changePercent": 1.2}]

    def test_json_fence_preferred_over_earlier_plain_fence(self):
        text = "```\nnot json\n```\nand\n```json\n{\"a\": 1}\n```"
        assert extract_json(text) == {"a": 1}

    def test_plain_fence(self):
        text = 'Result:\n```\n{"targetPrice": "₹2,800"}\n```'
        assert extract_json(text) == {"targetPrice": "₹2,800"}

    def test_json_fence_without_newlines_uses_generic_fence(self):
        # Generic fence interior starts with the "json" tag, which is not JSON
        with pytest.raises(ParseError):
            extract_json('```json{"a": 1}```')

    def test_raw_json_without_fence(self):
        assert extract_json('  [{"symbol": "INFY"}]  ') == [{"symbol": "INFY"}]

    def test_no_json_raises(self):
        with pytest.raises(ParseError):
            extract_json("Sorry, I could not find any trending stocks today.")

    def test_invalid_json_in_fence_raises(self):
        with pytest.raises(ParseError):
            extract_json("```json\n[{broken\n```")

    def test_parse_failures_are_not_logged_as_errors(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="src.research.extractor"):
            with pytest.raises(ParseError):
                extract_json("```json\n{\"technicalAnalysis\": \n```")
            with pytest.raises(ParseError):
                extract_json("No analysis available.")

        assert caplog.records
        assert all(record.levelno == logging.DEBUG for record in caplog.records)

    @pytest.mark.parametrize("text", ["", None])
    def test_empty_response_raises(self, text):
        with pytest.raises(ParseError):
            extract_json(text)

    def test_empty_fence_falls_back_to_raw_text(self):
        with pytest.raises(ParseError):
            extract_json("``````")


class TestFindFencedBlock:
    def test_returns_none_without_fence(self):
        assert find_fenced_block('{"a": 1}') is None

    def test_returns_json_fence_interior(self):
        assert find_fenced_block("x\n```json\n[1, 2]\n```") == "[1, 2]"
