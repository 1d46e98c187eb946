'''
Multi-stack calculator.

Keeps any number of named stacks of numbers, one of them current, with the
usual stack operators and arithmetic on top of a generic "pop n, apply,
push results" reducer. No parsing, no user interface: drive it from code.

    >>> from mathcalc import Calculator
    >>> calc = Calculator()
    >>> calc.push(10, 20, 30)
    >>> calc.add()
    50
    >>> calc.add()
    60
'''

# TODO: Arbitrary precision, through Decimal or Fraction values.

from .calculator import Calculator, StackView
from .util import (CalculatorError, EmptyStackError, InvalidStackNameError,
                   UnknownStackError)


__all__ = ('Calculator', 'StackView', 'CalculatorError', 'EmptyStackError',
           'InvalidStackNameError', 'UnknownStackError')
