import pytest

import nelgraph.__main__ as cli
from nelgraph.reader import parse_graph

SCENARIO = 'n 0 A\nn 1 B\nn 2 C\nn 3 D\ne 0 1 e1\ne 1 2 e2\ne 2 3 e3\ne 3 1 e4\ng scenario\n'


def test_report_writes_analysis(tmp_path):
    source = tmp_path / 'graph.nel'
    source.write_text(SCENARIO, encoding='utf-8')
    output = tmp_path / 'out' / 'report.txt'

    cli.main(['report', str(source), '-o', str(output)])

    assert output.read_text(encoding='utf-8') == (
        'Graph connectivity: True\nGraph bridges: 1\ne1: 0-1\n'
    )


def test_no_command_falls_back_to_default_input(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / 'input.nel').write_text(SCENARIO, encoding='utf-8')

    cli.main([])

    assert (tmp_path / 'output.txt').read_text(encoding='utf-8').startswith(
        'Graph connectivity: True'
    )


def test_report_without_any_input_exits(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    with pytest.raises(SystemExit):
        cli.main(['report'])


def test_malformed_file_exits_with_error(tmp_path):
    source = tmp_path / 'bad.nel'
    source.write_text('n 0 A\nz\n', encoding='utf-8')

    with pytest.raises(SystemExit) as excinfo:
        cli.main(['print', str(source)])

    assert excinfo.value.code == 1


def test_print_lists_nodes(tmp_path, capsys):
    source = tmp_path / 'graph.nel'
    source.write_text(SCENARIO, encoding='utf-8')

    cli.main(['--oriented', 'print', str(source)])

    out = capsys.readouterr().out
    assert 'Graph scenario' in out
    assert 'B: [C]' in out


def test_layout_writes_tikz_document(tmp_path, monkeypatch):
    source = tmp_path / 'graph.nel'
    source.write_text(SCENARIO, encoding='utf-8')
    tikz_path = tmp_path / 'out' / 'graph.tex'
    rendered = []

    def _generate_document(layout):
        rendered.append(layout)
        return 'tikz document'

    monkeypatch.setattr(cli, 'generate_tikz_document', _generate_document)

    context = cli.run(
        ['layout', str(source), '--width', '200', '--height', '100', '--tikz-output-path', str(tikz_path)]
    )

    assert tikz_path.read_text(encoding='utf-8') == 'tikz document'
    assert len(rendered) == 1
    assert rendered[0].image_size == (200, 100)
    assert len(rendered[0]) == 4
    assert any(line.startswith('  0 A: (') for line in context.output)


def test_distance_reports_hops_and_weight(tmp_path):
    source = tmp_path / 'graph.nel'
    source.write_text('n 0 A\nn 1 B\nn 2 C\ne 0 1 2.5 ab\ne 1 2 0.5 bc\n', encoding='utf-8')

    context = cli.run(['--oriented', 'distance', str(source), '0', '2'])

    assert context.output == ['Hops 0->2: 2', 'Weighted distance 0->2: 3.0']


def test_distance_out_of_range_exits(tmp_path):
    source = tmp_path / 'graph.nel'
    source.write_text('n 0 A\n', encoding='utf-8')

    with pytest.raises(SystemExit):
        cli.main(['distance', str(source), '0', '3'])


def test_save_reemits_nel(tmp_path):
    source = tmp_path / 'graph.nel'
    source.write_text('n 5 A\nn 9 B\ne 5 9 ab\ng named\n', encoding='utf-8')

    cli.main(['--oriented', 'save', str(source), str(tmp_path / 'copy')])

    assert (tmp_path / 'copy.nel').read_text(encoding='utf-8') == 'n 0 A\nn 1 B\ne 0 1 ab\ng named\n'


def test_report_leaves_loaded_graph_in_file_order(tmp_path):
    source = tmp_path / 'graph.nel'
    source.write_text(SCENARIO, encoding='utf-8')

    context = cli.run(['report', str(source), '-o', str(tmp_path / 'report.txt')])

    assert [str(edge) for edge in context.graph.edges] == [
        str(edge) for edge in parse_graph(SCENARIO).edges
    ]


def test_strict_layout_of_single_node_exits(tmp_path):
    source = tmp_path / 'one.nel'
    source.write_text('n 0 A\n', encoding='utf-8')

    with pytest.raises(SystemExit) as excinfo:
        cli.run(['layout', str(source), '--strict'])

    assert excinfo.value.code == 1


def test_negative_iterations_exit(tmp_path):
    source = tmp_path / 'graph.nel'
    source.write_text(SCENARIO, encoding='utf-8')

    with pytest.raises(SystemExit) as excinfo:
        cli.run(['layout', str(source), '--iterations', '-1'])

    assert excinfo.value.code == 1


def test_frames_emit_one_block_per_frame_and_tikz(tmp_path):
    source = tmp_path / 'graph.nel'
    source.write_text(SCENARIO, encoding='utf-8')
    tikz_dir = tmp_path / 'frames'

    context = cli.run(
        ['frames', str(source), '--frames', '3', '--width', '64', '--height', '64',
         '--tikz-output-dir', str(tikz_dir)]
    )

    assert [line for line in context.output if line.startswith('Frame ')] == ['Frame 1:', 'Frame 2:']
    assert context.output[-1] == '2 frame(s) of graph scenario'
    assert sorted(path.name for path in tikz_dir.iterdir()) == ['frame_001.tex', 'frame_002.tex']


def test_create_writes_empty_graph(tmp_path):
    context = cli.run(['create', 'fresh', str(tmp_path / 'fresh')])

    assert (tmp_path / 'fresh.nel').read_text(encoding='utf-8') == 'g fresh\n'
    assert len(context.graph) == 0


def test_add_node_and_edge_edit_file_in_place(tmp_path):
    source = tmp_path / 'graph.nel'
    source.write_text('n 0 A\nn 1 B\ne 0 1 ab\ng edit\n', encoding='utf-8')

    cli.main(['add-node', str(source), 'C'])
    cli.main(['add-edge', str(source), 'b', 'c', '--name', 'bc'])

    assert source.read_text(encoding='utf-8') == (
        'n 0 A\nn 1 B\nn 2 C\ne 0 1 ab\ne 1 2 bc\ng edit\n'
    )


def test_remove_node_renumbers_and_writes_output(tmp_path):
    source = tmp_path / 'graph.nel'
    source.write_text('n 0 A\nn 1 B\nn 2 C\ne 0 1 ab\ne 2 0 ca\ng edit\n', encoding='utf-8')
    target = tmp_path / 'edited.nel'

    cli.main(['remove-node', str(source), 'B', '-o', str(target)])

    assert target.read_text(encoding='utf-8') == 'n 0 A\nn 1 C\ne 1 0 ca\ng edit\n'
    assert source.read_text(encoding='utf-8').startswith('n 0 A\nn 1 B\n')


def test_remove_edge_and_missing_edge(tmp_path):
    source = tmp_path / 'graph.nel'
    source.write_text('n 0 A\nn 1 B\ne 0 1 ab\ne 0 1 ab2\ng edit\n', encoding='utf-8')

    cli.main(['remove-edge', str(source), 'A', 'B'])

    assert source.read_text(encoding='utf-8') == 'n 0 A\nn 1 B\ne 0 1 ab2\ng edit\n'

    with pytest.raises(SystemExit) as excinfo:
        cli.main(['remove-edge', str(source), 'B', 'A'])

    assert excinfo.value.code == 1


def test_editing_unknown_node_exits(tmp_path):
    source = tmp_path / 'graph.nel'
    source.write_text('n 0 A\n', encoding='utf-8')

    with pytest.raises(SystemExit) as excinfo:
        cli.main(['remove-node', str(source), 'Z'])

    assert excinfo.value.code == 1
    assert source.read_text(encoding='utf-8') == 'n 0 A\n'
