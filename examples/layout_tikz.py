"""Example pipeline: lay out a NEL graph and write it as a TikZ document."""

import argparse
import logging
from pathlib import Path
from typing import Optional, Sequence

from nelgraph import LayoutOptions, default_layout, generate_tikz_document, parse_graph

logger = logging.getLogger(__name__)

TEXT = """
n 0 hub
n 1 north
n 2 east
n 3 south
n 4 west
e 0 1 a
e 0 2 b
e 0 3 c
e 0 4 2 d
e 1 2 ne
e 3 4 sw
g star
"""


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Lay out the sample star graph")
    parser.add_argument("--iterations", type=int, default=50)
    parser.add_argument("--output", default="star.tex")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(levelname)s:%(name)s:%(message)s")

    graph = parse_graph(TEXT)
    layout = default_layout(graph, (800, 800), options=LayoutOptions(iterations=args.iterations))
    for node, (x, y) in layout.items():
        print(f"{node.name}: ({x}, {y})")

    output_path = Path(args.output)
    logger.info("Writing TikZ document to %s", output_path)
    output_path.write_text(generate_tikz_document(layout), encoding="utf-8")


if __name__ == "__main__":
    main()
