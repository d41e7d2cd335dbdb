from pytest import Item, fixture

from safecalc.calculator import Calculator


@fixture
def calculator():
    return Calculator()


def pytest_assertion_pass(item: Item,
                          lineno: int,
                          orig: str,
                          expl: str) -> None:
    '''
    Print every passing assertion, to audit which expressions were checked.

    Needs enable_assertion_pass_hook=true; view with pytest -rP.
    '''
    print('checked', item.name + ':' + str(lineno), str(orig))
    print('got', item.name + ':' + str(lineno),
          # Drop the trailing full-diff hint lines.
          '\n'.join(str(expl).splitlines()[:-2]))
