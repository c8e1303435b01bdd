import pytest

from aocsolutions.y2024_day07 import (
    Expression,
    Operator,
    equation_is_valid,
    main,
    operator_permutations,
    parse_calibration_equations,
    sum_valid_equations,
    sum_valid_equations_with_concatenation,
)

EQUATIONS = """\
190: 10 19
3267: 81 40 27
83: 17 5
156: 15 6
7290: 6 8 6 15
161011: 16 10 13
192: 17 8 14
21037: 9 7 18 13
292: 11 6 16 20
"""


def test_evaluates_expression():
    expression = Expression([81, 40, 27], [Operator.ADDITION, Operator.MULTIPLICATION])
    assert expression.evaluate() == 3267


def test_generates_operator_permutations():
    operators = [Operator.ADDITION, Operator.MULTIPLICATION]
    assert list(operator_permutations(operators, 2)) == [
        [Operator.ADDITION, Operator.ADDITION],
        [Operator.ADDITION, Operator.MULTIPLICATION],
        [Operator.MULTIPLICATION, Operator.ADDITION],
        [Operator.MULTIPLICATION, Operator.MULTIPLICATION],
    ]


def test_sums_valid_equations():
    assert sum_valid_equations(EQUATIONS) == 3749


def test_sums_valid_equations_with_concatenation():
    assert sum_valid_equations_with_concatenation(EQUATIONS) == 11387


def test_concatenation():
    assert Operator.CONCATENATION.execute(15, 6) == 156


def test_equation_validity():
    both = [Operator.ADDITION, Operator.MULTIPLICATION]
    assert equation_is_valid(190, [10, 19], both)
    assert not equation_is_valid(156, [15, 6], both)
    assert equation_is_valid(156, [15, 6], list(Operator))


def test_parses_equations():
    first = next(parse_calibration_equations(EQUATIONS))
    assert first == (190, [10, 19])


def test_malformed_equation_raises():
    with pytest.raises(ValueError):
        list(parse_calibration_equations("190 10 19"))


def test_main(tmp_path, capsys):
    path = tmp_path / "equations.txt"
    path.write_text(EQUATIONS)
    main([str(path)])
    assert capsys.readouterr().out == "Part 1: 3749\nPart 2: 11387\n"