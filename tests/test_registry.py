import pytest

from api.diagram_api.services import VisualizerPlugin
from core.diagram_platform import PluginRegistry
from visualizer_svg.visualizer_svg_plugin.plugin import SvgVisualizer


class PlainTextVisualizer(VisualizerPlugin):
    @property
    def plugin_id(self) -> str:
        return "plain-text"

    @property
    def display_name(self) -> str:
        return "Plain Text"

    def render(self, graph, **options) -> str:
        self.resolve_options(options)
        return "\n".join(node.name for node in graph.node_list())


def test_registry_is_shared():
    assert PluginRegistry() is PluginRegistry()


def test_register_and_create_visualizer():
    registry = PluginRegistry()
    registry.register_visualizer("svg", SvgVisualizer)
    registry.register_visualizer("plain", PlainTextVisualizer)

    assert isinstance(registry.create_visualizer("plain"), PlainTextVisualizer)
    assert registry.get_visualizer("svg") is SvgVisualizer
    assert {"plain", "svg"} <= set(registry.list_visualizers())


def test_register_rejects_non_plugins():
    with pytest.raises(TypeError, match="VisualizerPlugin"):
        PluginRegistry().register_visualizer("broken", object)


def test_create_unknown_visualizer_lists_available():
    PluginRegistry().register_visualizer("svg", SvgVisualizer)

    with pytest.raises(ValueError, match="Available: .*svg"):
        PluginRegistry().create_visualizer("missing")


def test_plugin_without_options_rejects_any():
    with pytest.raises(ValueError, match="Unknown render option"):
        PlainTextVisualizer().render(None, width=10)
