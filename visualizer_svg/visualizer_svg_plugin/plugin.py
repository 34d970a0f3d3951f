import os
from typing import NamedTuple
from jinja2 import Environment, FileSystemLoader, select_autoescape
from api.diagram_api.services.visualizer_plugin import RenderOption, VisualizerPlugin
from api.diagram_api.model.graph import NetworkGraph

# Minimum drawing area of a rendered diagram
WIDTH = 800
HEIGHT = 600

NODE_RADIUS = 5.0
# Padding kept around the outermost drawn point
CANVAS_MARGIN = 20.0


class ViewBox(NamedTuple):
    min_x: float
    min_y: float
    width: float
    height: float


def _lower_bound(value: float) -> float:
    return value - CANVAS_MARGIN if value < 0 else 0


def get_view_box(graph: NetworkGraph, width: float = WIDTH, height: float = HEIGHT) -> ViewBox:
    """
    Visible region of the diagram.

    Starts as the width x height area anchored at the origin. It grows right and
    down until each node and each curve control point sits at least CANVAS_MARGIN
    inside it, and past the origin only for points at negative coordinates.
    """
    xs = [node.x for node in graph.nodes]
    ys = [node.y for node in graph.nodes]
    for node in graph.nodes:
        for conn in node.edges:
            if conn.is_curve:
                xs.append(conn.control.x)
                ys.append(conn.control.y)

    if not xs:
        return ViewBox(0, 0, width, height)

    min_x = _lower_bound(min(xs))
    min_y = _lower_bound(min(ys))
    max_x = max(width, max(xs) + CANVAS_MARGIN)
    max_y = max(height, max(ys) + CANVAS_MARGIN)
    return ViewBox(min_x, min_y, max_x - min_x, max_y - min_y)


def build_links(graph: NetworkGraph):
    """Flatten each link into the coordinates the template draws."""
    links = []
    for owner, conn in graph.edge_list():
        links.append({
            "x1": owner.x,
            "y1": owner.y,
            "x2": conn.destination.x,
            "y2": conn.destination.y,
            "control": conn.control,
        })
    return links


class SvgVisualizer(VisualizerPlugin):
    @property
    def plugin_id(self) -> str:
        return "svg-visualizer"

    @property
    def display_name(self) -> str:
        return "SVG Canvas View"

    def render_options_schema(self):
        return {
            "width": RenderOption((int, float), WIDTH),
            "height": RenderOption((int, float), HEIGHT),
            "show_labels": RenderOption((bool,), False),
        }

    def render(self, graph: NetworkGraph, **options) -> str:
        options = self.resolve_options(options)
        view_box = get_view_box(graph, options["width"], options["height"])

        # --- Template Rendering ---
        template_path = os.path.join(os.path.dirname(__file__), 'templates')
        env = Environment(
            loader=FileSystemLoader(template_path),
            autoescape=select_autoescape(['html']),
        )
        template = env.get_template('svg.html')

        return template.render(
            nodes=graph.nodes,
            links=build_links(graph),
            radius=NODE_RADIUS,
            view_box=view_box,
            show_labels=options["show_labels"],
        )
