"""Example pipeline: load a NEL graph and report connectivity and bridges."""

from nelgraph import find_bridges, format_report, is_connected, parse_graph

TEXT = """
# Triangle B-C-D hanging off A
n 0 A
n 1 B
n 2 C
n 3 D
e 0 1 e1
e 1 2 e2
e 2 3 e3
e 3 1 e4
g pendant
"""


def main() -> None:
    graph = parse_graph(TEXT)
    print("Connected:", is_connected(graph))
    for edge in find_bridges(graph):
        print("Bridge:", edge)
    print()
    print(format_report(graph), end="")


if __name__ == "__main__":
    main()
