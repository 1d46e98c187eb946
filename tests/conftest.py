from pytest import fixture

from mathcalc import Calculator


@fixture
def calc() -> Calculator:
    '''
    Fresh calculator, default stack selected and empty.
    '''
    return Calculator()
