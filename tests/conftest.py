from pytest import Item, fixture

from pascaline import Machine, parse


def pytest_assertion_pass(item: Item,
                          lineno: int,
                          orig: str,
                          expl: str) -> None:
    '''
    Log every assertion, in case we later need to audit a run.

    Use with pytest -rP and enable_assertion_pass_hook.
    '''
    print('given', item.name + ':' + str(lineno), str(orig))  # no repr()!
    print('actual', item.name + ':' + str(lineno),
          '\n'.join(str(expl).splitlines()[:-2]))


@fixture
def machine() -> Machine:
    return Machine()


@fixture
def run():
    '''
    Feed text to a fresh machine, token by token, returning the machine.
    '''
    def run(text: str, capacity=None) -> Machine:
        m = Machine(capacity=capacity)
        for token in parse(text):
            m.push(token)
        return m
    return run
