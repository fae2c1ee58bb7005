"""Tests for SVG rendering."""

import xml.etree.ElementTree as ET

import pytest

from curriculum_graph.viz.scene import build_scene
from curriculum_graph.viz.svg import render_svg
from curriculum_graph.viz.view_state import ViewState

NS = {"svg": "http://www.w3.org/2000/svg"}


def _parse(svg):
    return ET.fromstring(svg)


def _node_groups(root):
    return {g.get("data-node-id"): g for g in root.iterfind(".//svg:g[@data-node-id]", NS)}


class TestRenderSvg:
    def test_well_formed_document(self, small_graph):
        root = _parse(render_svg(build_scene(small_graph, ViewState())))
        assert root.tag == "{http://www.w3.org/2000/svg}svg"
        assert root.get("viewBox") == "0 0 800 600"

    def test_one_group_per_node(self, small_graph):
        root = _parse(render_svg(build_scene(small_graph, ViewState())))
        assert len(_node_groups(root)) == len(small_graph)

    def test_node_markup(self, small_graph):
        root = _parse(render_svg(build_scene(small_graph, ViewState())))
        group = _node_groups(root)["objective-2"]
        assert "tier-objective" in group.get("class")
        circle = group.find("svg:circle", NS)
        assert circle.get("r") == "15"
        text = group.find("svg:text", NS)
        assert text.text == "CO 2"
        assert text.get("dy") == "30"

    def test_no_edges_without_selection(self, small_graph):
        root = _parse(render_svg(build_scene(small_graph, ViewState())))
        assert root.findall(".//svg:g[@data-edge-id]", NS) == []
        assert root.get("data-selected") is None

    def test_selection_dims_unrelated_nodes(self, small_graph):
        root = _parse(render_svg(build_scene(small_graph, ViewState(selected="lecture-1"))))
        groups = _node_groups(root)
        assert root.get("data-selected") == "lecture-1"
        assert "selected" in groups["lecture-1"].get("class").split()
        assert groups["topic-1"].get("opacity") == "1"
        assert groups["topic-2"].get("opacity") == "0.3"
        assert "dimmed" in groups["topic-2"].get("class").split()

    def test_edges_dashed_and_colored_by_kind(self, small_graph):
        root = _parse(render_svg(build_scene(small_graph, ViewState(selected="objective-2"))))
        paths = {
            g.get("data-edge-id"): g.find("svg:path[@class]", NS)
            for g in root.iterfind(".//svg:g[@data-edge-id]", NS)
        }
        assert len(paths) == 5
        lateral = paths["objective-2-objective-1"]
        assert "edge-same-tier" in lateral.get("class")
        assert lateral.get("stroke") == "#c084fc"
        assert lateral.get("stroke-dasharray") == "4"
        assert paths["objective-2-class-2"].get("stroke") == "#60a5fa"

    def test_hovered_edge_wider(self, small_graph):
        view = ViewState(selected="class-1").hover("class-1-topic-1")
        root = _parse(render_svg(build_scene(small_graph, view)))
        group = root.find(".//svg:g[@data-edge-id='class-1-topic-1']", NS)
        assert "hovered" in group.get("class")
        assert group.find("svg:path", NS).get("stroke-width") == "3"

    def test_edges_drawn_before_nodes(self, small_graph):
        svg = render_svg(build_scene(small_graph, ViewState(selected="class-1")))
        assert svg.index('class="connections"') < svg.index('class="nodes"')

    def test_dark_theme(self, small_graph):
        svg = render_svg(build_scene(small_graph, ViewState()), theme="dark")
        assert "#0f172a" in svg

    def test_unknown_theme(self, small_graph):
        with pytest.raises(ValueError, match="Invalid theme"):
            render_svg(build_scene(small_graph, ViewState()), theme="neon")
