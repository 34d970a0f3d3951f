import os
import logging
import webbrowser
from core.diagram_platform import DiagramEngine
from core.diagram_platform.config import OUTPUT_DIR
from core.diagram_platform.logging_config import setup_logging
from visualizer_svg.visualizer_svg_plugin.plugin import SvgVisualizer


def build_sample(engine: DiagramEngine):
    # Ring of straight links with one curved chord
    points = [(100.0, 100.0), (300.0, 80.0), (420.0, 240.0), (260.0, 380.0), (90.0, 300.0)]
    for point in points:
        engine.add_node(point)

    for start, end in zip(points, points[1:] + points[:1]):
        engine.add_edge(start, end)

    engine.add_curve(points[0], points[2], (330.0, 200.0))


def render_and_open(engine: DiagramEngine, out_filename: str):
    print(f"\nRendering... {SvgVisualizer().display_name}...")

    html = engine.render("svg", show_labels=True)

    os.makedirs(OUTPUT_DIR, exist_ok=True)
    out_path = os.path.join(OUTPUT_DIR, out_filename)

    with open(out_path, "w", encoding="utf-8") as f:
        f.write(html)

    # Open in browser
    abs_path = os.path.abspath(out_path)
    url = f"file:///{abs_path.replace(os.sep, '/')}"
    webbrowser.open(url)


if __name__ == "__main__":
    setup_logging(logging.DEBUG)

    engine = DiagramEngine()
    engine.registry.register_visualizer("svg", SvgVisualizer)
    build_sample(engine)

    print(f"  Nodes : {len(engine.list_nodes())}")
    print(f"  Links : {len(engine.list_edges())}")

    render_and_open(engine, "sample_diagram.html")
