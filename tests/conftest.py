from pytest import Item, fixture

from pocketcalc.controller import Controller
from pocketcalc.lexer import Lexer


def pytest_assertion_pass(item: Item,
                          lineno: int,
                          orig: str,
                          expl: str) -> None:
    '''
    Log every assertion, in case we later need to audit a run.

    Use with pytest -rP, and enable_assertion_pass_hook = true.
    '''
    print('given', item.name + ':' + str(lineno), str(orig))
    print('actual', item.name + ':' + str(lineno),
          '\n'.join(str(expl).splitlines()[:-2]))


@fixture
def controller() -> Controller:
    return Controller()


@fixture
def press(controller: Controller):
    '''
    Feed a string of keys, as typed at the command line, to the controller.
    '''
    lexer = Lexer()

    def pressing(keys: str) -> Controller:
        for event, argument in lexer.events(keys):
            controller.feed(event, argument)
        return controller
    return pressing
