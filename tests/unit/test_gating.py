#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for gated-block member access."""
import pytest

from cardkit.constants import ALL_MEMBERS_SEGMENT
from cardkit.gating import (
    BLOCK_ACCESS,
    PERMIT_ACCESS,
    check_gated_block_access,
    member_matches_segment,
    parse_gated_block_params,
    strip_gated_blocks,
)
from cardkit.nodes.elements import ParagraphNode, RootNode, TextNode
from cardkit.nodes.html_card import HtmlNode
from cardkit.renderers.html import HtmlDocumentRenderer

FREE = {"status": "free"}
PAID = {"status": "paid", "products": [{"slug": "gold"}]}


@pytest.mark.unit
class TestSegments:
    """Test member segment evaluation."""

    def test_status_clause(self) -> None:
        assert member_matches_segment("status:free", FREE) is True
        assert member_matches_segment("status:free", PAID) is False

    def test_negated_status_clause(self) -> None:
        assert member_matches_segment("status:-free", PAID) is True
        assert member_matches_segment("status:-free", FREE) is False

    def test_comma_means_or(self) -> None:
        assert member_matches_segment(ALL_MEMBERS_SEGMENT, FREE) is True
        assert member_matches_segment(ALL_MEMBERS_SEGMENT, PAID) is True

    def test_product_clause(self) -> None:
        assert member_matches_segment("product:gold", PAID) is True
        assert member_matches_segment("product:'silver'", PAID) is False
        assert member_matches_segment("products:gold", {"status": "paid", "products": ["gold"]}) is True

    def test_unsupported_keys_only(self) -> None:
        assert member_matches_segment("label:vip", PAID) is None


@pytest.mark.unit
class TestGatedBlockAccess:
    """Test access decisions for gated block parameters."""

    def test_anonymous_visitor(self) -> None:
        assert check_gated_block_access({"nonMember": True, "memberSegment": ""}, None) is PERMIT_ACCESS
        assert check_gated_block_access({"nonMember": False, "memberSegment": "status:free"}, None) is BLOCK_ACCESS

    def test_member_with_empty_segment_is_blocked(self) -> None:
        assert check_gated_block_access({"nonMember": True, "memberSegment": ""}, FREE) is BLOCK_ACCESS

    def test_member_matching_segment(self) -> None:
        params = {"nonMember": False, "memberSegment": "status:-free"}
        assert check_gated_block_access(params, PAID) is PERMIT_ACCESS
        assert check_gated_block_access(params, FREE) is BLOCK_ACCESS

    def test_unsupported_segment_blocks(self) -> None:
        assert check_gated_block_access({"nonMember": False, "memberSegment": "label:vip"}, PAID) is BLOCK_ACCESS


@pytest.mark.unit
class TestStripGatedBlocks:
    """Test stripping gated blocks from rendered HTML."""

    def test_parse_params(self) -> None:
        assert parse_gated_block_params('nonMember:false memberSegment:"status:free,status:-free"') == {
            "nonMember": False,
            "memberSegment": "status:free,status:-free",
        }

    def test_strip_for_visitors_and_members(self) -> None:
        html = (
            '<p>a</p>\n<!--kg-gated-block:begin nonMember:false memberSegment:"status:-free" -->'
            "<p>b</p><!--kg-gated-block:end-->\n"
        )
        assert strip_gated_blocks(html, None) == "<p>a</p>"
        assert strip_gated_blocks(html, FREE) == "<p>a</p>"
        assert strip_gated_blocks(html, PAID) == "<p>a</p><p>b</p>"

    def test_rendered_document_round_trip(self) -> None:
        visibility = {"web": {"nonMember": False, "memberSegment": "status:-free"}, "email": {"memberSegment": ""}}
        root = RootNode(
            children=[
                ParagraphNode(children=[TextNode("Public")]),
                HtmlNode({"html": "<p>Paid only</p>", "visibility": visibility}),
            ]
        )
        html = HtmlDocumentRenderer().render(root)
        assert "kg-gated-block:begin" in html
        assert "Paid only" not in strip_gated_blocks(html, FREE)
        assert "Paid only" in strip_gated_blocks(html, PAID)
