import pytest

from nelgraph.graph import DEFAULT_GRAPH_NAME
from nelgraph.reader import NelFormatError, parse_graph, read_graph


def _triples(graph):
    return [(e.source_index, e.destination_index, e.name, e.weight) for e in graph.edges]


def test_sparse_indices_are_compacted_in_appearance_order():
    text = '''
# a comment
n 10 A
n 3 B
N 7 C
e 10 7 ac
E 3 10 ba
g sparse
'''
    graph = parse_graph(text, oriented=True)

    assert graph.name == 'sparse'
    assert [node.name for node in graph.nodes] == ['A', 'B', 'C']
    assert _triples(graph) == [(0, 2, 'ac', 1.0), (1, 0, 'ba', 1.0)]


def test_unoriented_load_adds_mirror_after_each_edge():
    graph = parse_graph('n 0 A\nn 1 B\nn 2 C\ne 0 1 2.5 ab\ne 1 2 bc\n')

    assert _triples(graph) == [
        (0, 1, 'ab', 2.5),
        (1, 0, 'ab', 2.5),
        (1, 2, 'bc', 1.0),
        (2, 1, 'bc', 1.0),
    ]
    assert [e.name for e in graph[1].outgoing_edges] == ['ab', 'bc']


def test_weight_uses_invariant_decimal_point():
    graph = parse_graph('n 0 A\nn 1 B\ne 0 1 0.75 w\n', oriented=True)

    assert graph[0].outgoing_edges[0].weight == pytest.approx(0.75)


def test_graph_line_stops_parsing():
    graph = parse_graph('n 0 A\ng first\nthis is not valid\nn 1 B\n')

    assert graph.name == 'first'
    assert len(graph) == 1


def test_missing_graph_line_uses_default_name():
    graph = parse_graph('n 0 A\n\n   \nn 1 B\n')

    assert graph.name == DEFAULT_GRAPH_NAME
    assert len(graph) == 2


def test_bare_graph_line_keeps_default_name():
    assert parse_graph('n 0 A\ng\n').name == DEFAULT_GRAPH_NAME


@pytest.mark.parametrize(
    'text, message_part',
    [
        ('n 0 A\nn 1 B\ne 0 1\n', 'edge line needs'),
        ('n 0 A\nn 1 B\ne 0 1 2 3 x\n', 'edge line needs'),
        ('n 0 A\nx what\n', "unknown token 'x'"),
        ('n 0 A\ne 0 4 ghost\n', 'undeclared node 4'),
        ('n zero A\n', 'node index must be an integer'),
        ('n 0\n', 'node line needs'),
        ('n 0 A\nn 0 B\n', 'declared twice'),
        ('n 0 A\nn 1 B\ne 0 1 heavy x\n', 'edge weight must be a number'),
        ('n 0 A\nn 1 B\ne 0 1 -2 x\n', 'non-negative'),
    ],
)
def test_malformed_lines_abort_with_line_number(text, message_part):
    with pytest.raises(NelFormatError) as excinfo:
        parse_graph(text)

    message = str(excinfo.value)
    assert message_part in message
    assert message.startswith(f'[line {excinfo.value.line_no}]')


def test_error_reports_offending_line():
    with pytest.raises(NelFormatError) as excinfo:
        parse_graph('n 0 A\n# note\nq\n')

    assert excinfo.value.line_no == 3


def test_read_graph_from_file(tmp_path):
    path = tmp_path / 'graph.nel'
    path.write_text('n 0 A\r\nn 1 B\r\ne 0 1 ab\r\ng file\r\n', encoding='utf-8')

    graph = read_graph(path, oriented=True)

    assert graph.name == 'file'
    assert _triples(graph) == [(0, 1, 'ab', 1.0)]
