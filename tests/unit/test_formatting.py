#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for the value formatting and HTML string helpers."""
import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from cardkit.utils.formatting import (
    bytes_to_size,
    format_compact_number,
    format_duration,
    format_js_number,
    format_medium_date,
    format_short_date,
    format_simple_time,
    js_divide,
    js_round,
    rgb_to_hex,
    size_to_bytes,
)
from cardkit.utils.html import (
    clean_basic_html,
    escape_html,
    slugify,
    truncate_html,
    wrap_replacement_strings,
)
from cardkit.utils.images import round_half_up
from cardkit.utils.records import replace_data_url


@pytest.mark.unit
class TestNumbers:
    """Test numeric formatting helpers."""

    def test_round_half_up(self) -> None:
        assert round_half_up(0.5) == 1
        assert round_half_up(2.5) == 3
        assert round_half_up(-0.5) == 0
        assert round_half_up(1.49) == 1

    def test_bytes_to_size(self) -> None:
        assert bytes_to_size(0) == "0 Byte"
        assert bytes_to_size(None) == "0 Byte"
        assert bytes_to_size(512) == "512 Bytes"
        assert bytes_to_size(2 * 1024 * 1024) == "2 MB"
        assert bytes_to_size("1536") == "2 KB"

    def test_size_to_bytes(self) -> None:
        assert size_to_bytes("2 MB") == 2 * 1024 * 1024
        assert size_to_bytes("3 parsecs") == 0
        assert size_to_bytes("") == 0

    def test_format_duration(self) -> None:
        assert format_duration(125) == "2:05"
        assert format_duration(59.9) == "0:59"
        assert format_duration(None) == "3:20"

    def test_format_compact_number(self) -> None:
        assert format_compact_number(999) == "999"
        assert format_compact_number(1234) == "1.2K"
        assert format_compact_number(1_500_000) == "1.5M"
        assert format_compact_number(2_000_000_000) == "2B"
        assert format_compact_number(None) == "0"

    def test_js_divide_and_round(self) -> None:
        assert js_divide(1, 0) == math.inf
        assert math.isnan(js_divide(0, 0))
        assert math.isnan(js_divide(None, 2))
        assert js_round(337.5) == 338
        assert js_round(math.inf) == math.inf

    def test_format_js_number(self) -> None:
        assert format_js_number(2.0) == "2"
        assert format_js_number(1.5) == "1.5"
        assert format_js_number(math.nan) == "NaN"
        assert format_js_number(None) == "null"

    @given(value=st.integers(min_value=-1_000_000, max_value=1_000_000))
    def test_halves_round_up(self, value) -> None:
        assert round_half_up(value + 0.5) == value + 1
        assert round_half_up(value) == value


@pytest.mark.unit
class TestColoursAndDates:
    """Test colour and date formatting."""

    def test_rgb_to_hex(self) -> None:
        assert rgb_to_hex("rgb(255, 0, 16)") == "#ff0010"
        assert rgb_to_hex("transparent") == "transparent"
        assert rgb_to_hex("nope") is None

    def test_dates(self) -> None:
        assert format_short_date("2024-01-05T14:05:00.000Z") == "5 Jan 2024"
        assert format_medium_date("2024-01-05T14:05:00.000Z") == "Jan 5, 2024"
        assert format_simple_time("2024-01-05T14:05:00.000Z") == "2:05 PM"
        assert format_short_date("not a date") == ""


@pytest.mark.unit
class TestHtmlStrings:
    """Test HTML string helpers."""

    def test_escape_html(self) -> None:
        assert escape_html("<a href=\"x\">'&'</a>") == "&lt;a href=&quot;x&quot;&gt;&#039;&amp;&#039;&lt;/a&gt;"
        assert escape_html(None) == ""

    def test_slugify(self) -> None:
        assert slugify("Hello, <b>World</b>!") == "hello-world"

    def test_truncate_html(self) -> None:
        assert truncate_html("short", 8, 5) == "short"
        assert truncate_html("abcdefghij", 8, 5) == 'abcd<span class="desktop-only">efg</span>…'
        assert truncate_html("abcdefg", 8, 5) == (
            'abcd<span class="desktop-only">efg</span><span class="hide-desktop">…</span>'
        )

    def test_clean_basic_html(self) -> None:
        assert clean_basic_html("  <b></b>Hello&nbsp;  <i> </i> world ") == "Hello world"
        assert clean_basic_html("") == ""

    def test_wrap_replacement_strings(self) -> None:
        assert wrap_replacement_strings('Hi {first_name, "there"}!') == 'Hi %%{first_name, "there"}%%!'

    def test_replace_data_url(self) -> None:
        assert replace_data_url("data:image/png;base64,AAAA") == "<base64String>"
        assert replace_data_url("/a.png") == "/a.png"
