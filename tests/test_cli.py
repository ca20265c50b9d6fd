"""
Tests for the Command-Line Interface
"""

import json

import pytest
from interval_algebra import __version__
from interval_algebra.cli import build_parser, main


def _run(capsys, *argv):
    code = main(list(argv))
    out, err = capsys.readouterr()
    return code, out.strip(), err.strip()


class TestParser:
    """Test argument parsing."""

    def test_subcommands(self):
        parser = build_parser()
        args = parser.parse_args(['setop', 'union', '[1, 2]', '[3, 4]'])
        assert args.command == 'setop'
        assert args.op == 'union'

    def test_sample_defaults(self):
        args = build_parser().parse_args(['sample', '[0, 1]'])
        assert args.size == 5
        assert args.seed == 42

    def test_rejects_unknown_op(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(['setop', 'xor', '[1, 2]', '[3, 4]'])


class TestCommands:
    """Test running commands end to end."""

    def test_show(self, capsys):
        assert _run(capsys, 'show', '[1, 5)') == (0, '[1, 5)', '')
        assert _run(capsys, 'show', '[5, 1]')[1] == '(Ø)'

    def test_intersect(self, capsys):
        assert _run(capsys, 'setop', 'intersect', '[1, 5]', '[3, 8]')[1] == '[3, 5]'

    def test_union(self, capsys):
        assert _run(capsys, 'setop', 'union', '[1, 5]', '[3, 8]')[1] == '[1, 8]'

    def test_complement(self, capsys):
        code, out, _ = _run(capsys, 'setop', 'complement', '[0, 5]')
        assert code == 0
        assert out.splitlines() == ['(-∞, 0)', '(5, ∞)']

    def test_difference_empty(self, capsys):
        assert _run(capsys, 'setop', 'difference', '[3]', '[1, 5]')[1] == '(none)'

    def test_split(self, capsys):
        out = _run(capsys, 'setop', 'split', '[0, 10]', '4')[1]
        assert out.splitlines() == ['[0, 4)', '(4, 10]']

    def test_arith(self, capsys):
        assert _run(capsys, 'arith', 'mul', '[-1, 1]', '[-1, 1]')[1] == '[-1, 1]'
        assert _run(capsys, 'arith', 'add', '[1, 2]', '(0, 1)')[1] == '(1, 3)'
        assert _run(capsys, 'arith', 'reciprocal', '[2, inf)')[1] == '(0, 1/2]'
        assert _run(capsys, 'arith', 'pow', '[-2, 3]', '2')[1] == '[0, 9]'
        assert _run(capsys, 'arith', 'nroot', '[4, 9]', '2')[1] == '[2, 3]'
        assert _run(capsys, 'arith', 'neg', '(1, 2]')[1] == '[-2, -1)'

    def test_json(self, capsys):
        code, out, _ = _run(capsys, '--json', 'show', '[1, 5)')
        assert code == 0
        data = json.loads(out)
        assert data['type'] == 'bounded'
        assert data['notation'] == '[1, 5)'
        assert data['lower'] == {'kind': 'closed', 'value': '1'}
        assert data['upper'] == {'kind': 'open', 'value': '5'}

    def test_json_list(self, capsys):
        out = _run(capsys, '--json', 'setop', 'complement', '(-inf, inf)')[1]
        assert json.loads(out) == []

    def test_sample(self, capsys):
        code, out, _ = _run(capsys, 'sample', '[0, 1]', '--size', '3', '--seed', '7')
        assert code == 0
        values = [float(v) for v in out.splitlines()]
        assert len(values) == 3
        assert all(0 <= v <= 1 for v in values)

    def test_version(self, capsys):
        assert _run(capsys, 'version')[1] == f'interval-algebra {__version__}'

    def test_no_command(self, capsys):
        code, out, _ = _run(capsys)
        assert code == 0
        assert 'usage' in out


class TestErrors:
    """Test error reporting."""

    def test_division_by_zero(self, capsys):
        code, _, err = _run(capsys, 'arith', 'reciprocal', '[-1, 1]')
        assert code == 1
        assert err.startswith('error:')

    def test_bad_notation(self, capsys):
        code, _, err = _run(capsys, 'show', 'nonsense')
        assert code == 1
        assert 'nonsense' in err

    def test_missing_operand(self, capsys):
        code, _, err = _run(capsys, 'setop', 'intersect', '[1, 5]')
        assert code == 1
        assert 'second operand' in err

    def test_even_root_of_negative(self, capsys):
        assert _run(capsys, 'arith', 'nroot', '[-4, 4]', '2')[0] == 1


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
