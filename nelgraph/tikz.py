"""TikZ renderer for scaled graph layouts."""

from __future__ import annotations

import math
from typing import Dict, List, Optional, Tuple

from .layout.model import GraphLayout

PICTURE_SPAN_CM = 8.0
LABEL_OFFSET_PT = 4.0

standalone_tpl = r"""\documentclass[border=2pt]{standalone}
\usepackage[utf8]{inputenc}
\usepackage{tikz}
\usetikzlibrary{arrows.meta}
\tikzset{
  node/.style={circle,fill=black,inner sep=0pt,minimum size=4pt},
  nodelabel/.style={font=\footnotesize, inner sep=1pt},
  edge/.style={line width=0.8pt, -{Stealth[length=5pt]}, shorten >=3pt, shorten <=3pt},
  edgelabel/.style={font=\scriptsize, inner sep=1pt, fill=white},
}
\begin{document}
%s
\end{document}
"""

_LATEX_ESCAPES = {
    "\\": r"\textbackslash{}",
    "&": r"\&",
    "%": r"\%",
    "#": r"\#",
    "_": r"\_",
    "{": r"\{",
    "}": r"\}",
    "$": r"\$",
    "~": r"\textasciitilde{}",
    "^": r"\textasciicircum{}",
}


def latex_escape(text: str) -> str:
    return "".join(_LATEX_ESCAPES.get(ch, ch) for ch in text)


def _format_float(value: float) -> str:
    if math.isnan(value) or math.isinf(value):
        raise ValueError("Cannot format non-finite float for TikZ output")
    formatted = f"{value:.4f}"
    formatted = formatted.rstrip("0").rstrip(".")
    if formatted in ("", "-0"):
        return "0"
    return formatted


def _picture_coords(layout: GraphLayout) -> List[Tuple[float, float]]:
    # Pixel space has y growing downwards; TikZ has it growing upwards.
    width, height = layout.image_size
    unit = PICTURE_SPAN_CM / max(width, height, 1)
    return [(x * unit, (height - y) * unit) for x, y in layout.positions]


def generate_tikz_code(layout: GraphLayout, *, edge_labels: bool = True) -> str:
    """Emit a ``tikzpicture`` with one dot per node and one arrow per edge."""

    coords = _picture_coords(layout)
    lines: List[str] = [r"\begin{tikzpicture}"]

    for index, (x, y) in enumerate(coords):
        lines.append(f"  \\coordinate (n{index}) at ({_format_float(x)},{_format_float(y)});")

    drawn: Dict[Tuple[int, int], int] = {}
    for edge in layout.graph.edges:
        key = (edge.source_index, edge.destination_index)
        # Parallel edges and reciprocal pairs are bent apart so both stay visible.
        nth = drawn.get(key, 0)
        mirrored = (edge.destination_index, edge.source_index) in drawn
        drawn[key] = nth + 1
        if edge.source_index == edge.destination_index:
            bend = f", loop above, min distance={6 + 4 * nth}pt"
        elif nth or mirrored:
            bend = f", bend left={10 + 10 * nth}"
        else:
            bend = ""
        label: Optional[str] = None
        if edge_labels:
            label = f"node[edgelabel, midway] {{{latex_escape(edge.name)}}} "
        lines.append(
            f"  \\draw[edge{bend}] (n{edge.source_index}) to "
            f"{label or ''}(n{edge.destination_index});"
        )

    for index, node in enumerate(layout.graph.nodes):
        lines.append(f"  \\fill (n{index}) circle (2pt);")
        lines.append(
            f"  \\node[nodelabel, above right={_format_float(LABEL_OFFSET_PT)}pt] "
            f"at (n{index}) {{{latex_escape(node.name)}}};"
        )

    lines.append(r"\end{tikzpicture}")
    return "\n".join(lines)


def generate_tikz_document(layout: GraphLayout, *, edge_labels: bool = True) -> str:
    """Render a standalone LaTeX document containing the graph picture."""

    return standalone_tpl % generate_tikz_code(layout, edge_labels=edge_labels)


__all__ = ["generate_tikz_code", "generate_tikz_document", "latex_escape"]
