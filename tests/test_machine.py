'''
Stack machine tests
'''

from pascaline import Machine, Operator, Token, TokenKind, parse
from pascaline import (ArityMismatch, DivisionByZero, DomainError,
                       EmptyStack, NoLastOperator, NotYetSupported,
                       StackOverflow, TypeMismatch)

from pytest import mark, raises


def op(symbol):
    return Token.new_operator(symbol)


def contents(machine):
    return [str(token) for token in machine]


def test_push_literals(machine):
    machine.push(Token.new_integer(1))
    machine.push(Token.new_float(2.5))
    machine.push(Token.new_boolean(True))
    assert machine.size() == 3
    assert str(machine) == '[1, 2.500000, TRUE]'
    assert machine.result() == Token.new_boolean(True)


def test_empty(machine):
    assert machine.result() is None
    assert machine.size() == 0
    assert str(machine) == '[]'


def test_add(run):
    machine = run('2 3 +')
    assert str(machine) == '[5]'
    assert machine.last_operator is Operator.ADD
    assert machine.last_operands == (Token.new_integer(2),
                                     Token.new_integer(3))


def test_longer_expression(run):
    assert str(run('1 2 + 4 * 3 /')) == '[4]'
    assert str(run('10 4 -')) == '[6]'
    assert str(run('1 3 /')) == '[0.333333]'


def test_arity_mismatch_leaves_stack(run):
    machine = run('2')
    with raises(ArityMismatch) as info:
        machine.push(op('/'))
    assert info.value.expected == 2
    assert info.value.found == 1
    assert contents(machine) == ['2']


def test_division_by_zero_rolls_back(run):
    machine = run('4 0')
    with raises(DivisionByZero):
        machine.push(op('/'))
    assert contents(machine) == ['4', '0']
    assert machine.last_operator is None


@mark.parametrize('text, symbol, error', [
    ('1 2 3 TRUE', '+', TypeMismatch),
    ('1 2 0', 'MOD', DivisionByZero),
    ('1 2 -1', 'SQRT', DomainError),
    ('1 2 0', 'LN', DomainError),
    ('1 FALSE 2', '<', TypeMismatch),
    ('1 2 3', 'UNDO', NotYetSupported),
    ('1 2 3', 'REDO', NotYetSupported),
])
def test_failed_operator_rolls_back(run, text, symbol, error):
    machine = run(text)
    before = list(machine)
    with raises(error):
        machine.push(op(symbol))
    assert list(machine) == before


def test_capacity_ceiling():
    machine = Machine(capacity=3)
    for n in range(3):
        machine.push(Token.new_integer(n))
    with raises(StackOverflow):
        machine.push(Token.new_integer(3))
    assert machine.size() == 3
    # Even operators are rejected on a full stack.
    with raises(StackOverflow):
        machine.push(op('+'))
    assert contents(machine) == ['0', '1', '2']


def test_default_capacity(machine):
    assert machine.capacity == 4096
    for n in range(4096):
        machine.push(Token.new_integer(n))
    with raises(StackOverflow):
        machine.push(Token.new_integer(0))
    assert machine.size() == 4096


def test_ignored_rejected(machine):
    with raises(TypeMismatch):
        machine.push(Token.new_ignored())
    assert machine.size() == 0


def test_drop_empty(machine):
    with raises(EmptyStack):
        machine.push(op('DROP'))


def test_drop(run):
    assert contents(run('1 2 DROP')) == ['1']


def test_dup_duplicates_top(run):
    assert contents(run('1 2 DUP')) == ['1', '2', '2']


def test_dup_empty(machine):
    with raises(EmptyStack):
        machine.push(op('DUP'))


def test_swap(run):
    assert contents(run('1 2 3 SWAP')) == ['1', '3', '2']
    assert contents(run('5 2 SWAP -')) == ['-3']


def test_swap_needs_two(run):
    machine = run('1')
    with raises(ArityMismatch) as info:
        machine.push(op('SWAP'))
    assert info.value.expected == 2
    assert info.value.found == 1
    assert contents(machine) == ['1']


def test_clear(run):
    machine = run('1 2 3 CLEAR')
    assert machine.size() == 0
    assert machine.last_operator is Operator.CLEAR
    # Never fails, even when empty
    machine.push(op('CLEAR'))


def test_lastop_replays_last_operator(run):
    machine = run('1 2 3 +')
    assert contents(machine) == ['1', '5']
    machine.push(op('LASTOP'))
    assert contents(machine) == ['6']
    assert machine.last_operator is Operator.ADD


def test_lastop_replays_structural(run):
    assert contents(run('7 DUP LASTOP')) == ['7', '7', '7']


def test_lastop_twice(run):
    assert contents(run('1 1 1 1 + LASTOP LASTOP')) == ['4']


def test_lastop_without_operator(run):
    machine = run('1 2')
    with raises(NoLastOperator):
        machine.push(op('LASTOP'))
    assert contents(machine) == ['1', '2']


def test_failed_operator_is_not_remembered(run):
    machine = run('2 3 * 0')
    with raises(DivisionByZero):
        machine.push(op('/'))
    assert machine.last_operator is Operator.MUL


def test_lastop_failure_rolls_back(run):
    machine = run('4 2 / 0')
    with raises(DivisionByZero):
        machine.push(op('LASTOP'))
    assert contents(machine) == ['2', '0']


def test_lastargs(run):
    machine = run('2 3 + LASTARGS')
    assert contents(machine) == ['5', '2', '3']
    assert machine.last_operator is Operator.LASTARGS


def test_lastargs_survives_structural(run):
    assert contents(run('4 NEG DUP LASTARGS')) == ['-4', '-4', '4']


def test_lastargs_without_operands(run):
    machine = run('1 DUP')
    with raises(NoLastOperator):
        machine.push(op('LASTARGS'))
    assert contents(machine) == ['1', '1']


def test_lastargs_overflow():
    machine = Machine(capacity=3)
    machine.feed('1 2 + 9')
    with raises(StackOverflow):
        machine.push(op('LASTARGS'))
    assert contents(machine) == ['3', '9']


def test_comparison_and_logic(run):
    assert contents(run('1 2 < 3 3 == AND')) == ['TRUE']
    assert contents(run('TRUE NOT 0 OR')) == ['FALSE']


def test_feed_stops_at_first_error(machine):
    with raises(DivisionByZero):
        machine.feed('1 0 / 5')
    assert contents(machine) == ['1', '0']


def test_feed_ignores_garbage(machine):
    machine.feed('1 2.0 + text 5.5 - 3+4')
    assert contents(machine) == ['-2.500000']


def test_clear_method(run):
    machine = run('1 2 +')
    machine.clear()
    assert machine.size() == 0
    assert machine.last_operator is Operator.ADD


def test_independent_machines():
    first, second = Machine(), Machine()
    for token in parse('1 2'):
        first.push(token)
    assert second.size() == 0
    assert len(first) == 2


def test_hand_built_operator_token_rejected(run):
    machine = run('1 2')
    with raises(TypeMismatch):
        machine.push(Token(TokenKind.OPERATOR, '+'))
    assert contents(machine) == ['1', '2']
