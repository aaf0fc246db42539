from .graph import DEFAULT_GRAPH_NAME, EdgeDefinition, Graph, GraphIndexError, GraphNode
from .traversal import breadth_first, depth_first, visited_guard
from .connectivity import connectivity_groups, group_count, is_connected
from .bridges import find_bridges
from .paths import frontier_distances, minimal_distance
from .reader import NelFormatError, load_graph_lines, parse_graph, read_graph
from .printer import format_graph, format_nodes, format_report, save_graph, write_report
from .layout import (
    DegenerateLayoutError,
    GraphLayout,
    LayoutMismatchError,
    LayoutOptions,
    compute_unscaled_layout,
    default_layout,
    default_padding,
    get_layout_options,
    initial_circle,
    iter_unscaled_layouts,
    layout_frames,
    scale_positions,
    set_layout_options,
)
from .tikz import generate_tikz_code, generate_tikz_document, latex_escape

__all__ = [
    'DEFAULT_GRAPH_NAME',
    'EdgeDefinition',
    'Graph',
    'GraphIndexError',
    'GraphNode',
    'breadth_first',
    'depth_first',
    'visited_guard',
    'connectivity_groups',
    'group_count',
    'is_connected',
    'find_bridges',
    'frontier_distances',
    'minimal_distance',
    'NelFormatError',
    'load_graph_lines',
    'parse_graph',
    'read_graph',
    'format_graph',
    'format_nodes',
    'format_report',
    'save_graph',
    'write_report',
    'DegenerateLayoutError',
    'GraphLayout',
    'LayoutMismatchError',
    'LayoutOptions',
    'compute_unscaled_layout',
    'default_layout',
    'default_padding',
    'get_layout_options',
    'initial_circle',
    'iter_unscaled_layouts',
    'layout_frames',
    'scale_positions',
    'set_layout_options',
    'generate_tikz_code',
    'generate_tikz_document',
    'latex_escape',
]
