"""Tests for the self-contained HTML page."""

import json
import re

from curriculum_graph import resolve_connections
from curriculum_graph.nodes import CurriculumNode
from curriculum_graph.tiers import NodeId, Tier
from curriculum_graph.viz.html_generator import generate_html, precompute_connections
from curriculum_graph.viz.view_state import ViewState


def _payload(html):
    match = re.search(r'<script type="application/json" id="graph-data">(.*?)</script>', html, re.S)
    assert match, "graph-data block missing"
    return json.loads(match.group(1))


class TestPrecomputeConnections:
    def test_entry_per_node(self, small_graph):
        data = precompute_connections(small_graph)
        assert set(data) == {str(n.id) for n in small_graph}

    def test_matches_resolved_edges(self, small_graph):
        data = precompute_connections(small_graph)
        expected = [e.id for e in resolve_connections(small_graph, "objective-2")]
        assert [e["id"] for e in data["objective-2"]["edges"]] == expected

    def test_visible_ids(self, small_graph):
        data = precompute_connections(small_graph)
        assert data["topic-2"]["visible"] == ["class-2", "topic-2"]

    def test_edges_carry_path_data(self, small_graph):
        edge = precompute_connections(small_graph)["objective-1"]["edges"][-1]
        assert edge["sameTier"] is True
        assert edge["d"].startswith("M ")


class TestGenerateHtml:
    def test_document_structure(self, small_graph):
        html = generate_html(small_graph)
        assert html.startswith("<!DOCTYPE html>")
        assert '<div id="network-container">' in html
        assert "<svg" in html
        assert "<title>Curriculum Map</title>" in html

    def test_payload_without_selection(self, small_graph):
        payload = _payload(generate_html(small_graph))
        assert payload["selected"] is None
        assert len(payload["connections"]) == len(small_graph)
        assert payload["style"]["dimmedOpacity"] == 0.3

    def test_initial_selection(self, small_graph):
        html = generate_html(small_graph, ViewState(selected="lecture-1"))
        assert _payload(html)["selected"] == "lecture-1"
        assert 'data-selected="lecture-1"' in html

    def test_title_escaped(self, small_graph):
        html = generate_html(small_graph, title="Maths & <Physics>")
        assert "<title>Maths &amp; &lt;Physics&gt;</title>" in html

    def test_script_end_tag_escaped_in_payload(self):
        from curriculum_graph import CurriculumGraph

        graph = CurriculumGraph.from_tiers(
            topics=[CurriculumNode(NodeId(Tier.TOPIC, 1), name="</script><b>")]
        ).with_layout(800, 600)
        html = generate_html(graph)
        assert html.count("</script>") == 2

    def test_click_handlers_present(self, small_graph):
        html = generate_html(small_graph)
        assert "addEventListener('click'" in html
        assert "selected === id ? null : id" in html
