from collections.abc import Sequence
from types import MappingProxyType
from typing import Callable, List, Union
import logging
import operator
import math

import regex

from .util import (CalculatorError, EmptyStackError, InvalidStackNameError,
                   UnknownStackError, wrap_user_errors)


logger = logging.getLogger(__name__)

Number = Union[int, float, complex]
Results = Union[Number, Sequence]


def _root(x, y):
    return x ** (1 / y)


def _quorem(x, y):
    if isinstance(x, int) and isinstance(y, int):
        # Exact for ints of any size; truncates toward zero.
        quotient = abs(x) // abs(y)
        if (x < 0) != (y < 0):
            quotient = -quotient
    else:
        quotient = math.trunc(x / y)
    return quotient, x % y


class StackView(Sequence):
    '''
    Read-only, live view of one stack, bottom first.
    '''

    def __init__(self, items):
        self._items = items

    def __getitem__(self, index):
        return self._items[index]

    def __len__(self):
        return len(self._items)

    def __eq__(self, other):
        if isinstance(other, (list, StackView)):
            return list(self) == list(other)
        return NotImplemented

    __hash__ = None

    def __repr__(self):
        return '{}({!r})'.format(type(self).__name__, self._items)


class Calculator:
    '''
    Multi-stack calculator.

    Holds any number of named stacks of numbers, one of which is current.
    Unqualified operations work on the current stack; the *_to/*_from
    variants name their stack explicitly.
    '''

    DEFAULT_STACK = 'default'
    # Word characters only; fullmatch, so no trailing newline either.
    STACK_NAME = r'\w+'
    FLAGS = regex.VERSION1
    SQRT_DEGREE = 2

    def __init__(self):
        '''
        Create calculator with one empty, selected, default stack.
        '''
        self._stacks = dict()
        self._views = dict()
        self._create(type(self).DEFAULT_STACK)
        self._current = type(self).DEFAULT_STACK

    def _create(self, name):
        logger.debug('creating stack %r', name)
        self._stacks[name] = []
        self._views[name] = StackView(self._stacks[name])

    def isvalidname(self, name):
        '''
        Return True if name can name a stack.
        '''
        return (isinstance(name, str) and
                regex.fullmatch(type(self).STACK_NAME, name,
                                flags=type(self).FLAGS) is not None)

    def _lookup(self, name=None):
        '''
        Return backing list of named stack, or current one. Never creates.
        '''
        if not name:
            name = self._current
        try:
            return self._stacks[name]
        except KeyError:
            raise UnknownStackError(
                'No such stack {!r}'.format(name)) from None

    def _writable(self, name):
        '''
        Return backing list of named stack, creating it if need be.
        '''
        if not self.isvalidname(name):
            raise InvalidStackNameError('Invalid stack name {!r}'.format(name))
        if name not in self._stacks:
            self._create(name)
        return self._stacks[name]

    @staticmethod
    def _splice(stack, count):
        '''
        Remove and return at most count elements off the end of stack.
        '''
        if count < 0:
            raise ValueError('Cannot pop {} elements'.format(count))
        if count == 0:
            return []
        popped = stack[-count:]
        del stack[-count:]
        return popped

    @property
    def current_stack(self):
        return self._current

    @property
    def stacks(self):
        '''
        Read-only mapping of every stack name to its view.
        '''
        return MappingProxyType(self._views)

    def select(self, name=None):
        '''
        Select named stack, creating it empty if it doesn't exist yet.

        A missing or invalid name leaves the selection alone. Either way,
        return the name of the selected stack.
        '''
        if not self.isvalidname(name):
            return self._current
        if name not in self._stacks:
            self._create(name)
        logger.debug('selecting stack %r', name)
        self._current = name
        return name

    def stack(self, name=None):
        '''
        Return view of named stack, or of the current stack.
        '''
        self._lookup(name)
        return self._views[name or self._current]

    @wrap_user_errors('Stack {0.current_stack!r} is empty', EmptyStackError,
                      IndexError)
    def top(self):
        '''
        Return element at top of current stack, leaving it there.
        '''
        return self._lookup()[-1]

    def clear(self):
        '''
        Clear everything from the current stack.
        '''
        self._lookup().clear()

    def push(self, *values):
        '''
        Push all values onto current stack, leftmost at the bottom.
        '''
        self._lookup().extend(values)

    def push_to(self, name, *values):
        '''
        Push all values onto named stack, leftmost at the bottom.
        '''
        self._writable(name).extend(values)

    def pop(self, count=1):
        '''
        Pop count elements off current stack, returned bottommost first.

        Asking for more than there is pops everything.
        '''
        return self._splice(self._lookup(), count)

    def pop_from(self, name, count=1):
        '''
        Pop count elements off named stack, returned bottommost first.
        '''
        return self._splice(self._lookup(name), count)

    def move(self, from_stack, to_stack, count=1):
        '''
        Move count elements from one stack to another, keeping their order.
        '''
        source = self._lookup(from_stack)
        moved = self._splice(source, count)
        try:
            destination = self._writable(to_stack)
        except InvalidStackNameError:
            source.extend(moved)
            raise
        destination.extend(moved)
        return moved

    from_to = move

    def dupe(self):
        '''
        Duplicate element at top of current stack.
        '''
        self.push(self.top())

    def apply_n(self, n: int,
                fn: Callable[..., Results]) -> List[Number]:
        '''
        Pop n elements, call fn on them in stack order, push what it returns.

        A tuple or list result is pushed element by element. Return the list
        of pushed results. If fn raises, its operands go back on the stack.
        '''
        stack = self._lookup()
        if len(stack) < n:
            raise EmptyStackError(
                'Less than {} element(s) on stack {!r}'.format(n,
                                                               self._current))
        operands = self._splice(stack, n)
        try:
            results = fn(*operands)
        except Exception:
            logger.debug('restoring %r after failed %r', operands, fn)
            stack.extend(operands)
            raise
        if not isinstance(results, (tuple, list)):
            results = [results]
        results = list(results)
        logger.debug('%r%r -> %r', fn, tuple(operands), results)
        stack.extend(results)
        return results

    def apply_two(self, fn: Callable[[Number, Number], Results]) -> Number:
        '''
        Pop two elements, push fn of them, and return the new top of stack.
        '''
        def checked(x, y):
            results = fn(x, y)
            if isinstance(results, (tuple, list)) and not results:
                raise CalculatorError('{!r} returned nothing'.format(fn))
            return results

        return self.apply_n(2, checked)[-1]

    def twiddle(self):
        '''
        Swap two elements at top of stack.
        '''
        return self.apply_two(lambda x, y: (y, x))

    def add(self):
        return self.apply_two(operator.__add__)

    def subtract(self):
        '''
        Subtract top of stack from the element below it.
        '''
        return self.apply_two(operator.__sub__)

    def multiply(self):
        return self.apply_two(operator.__mul__)

    def divide(self):
        '''
        Divide the element below top of stack by top of stack.
        '''
        return self.apply_two(operator.__truediv__)

    def modulo(self):
        return self.apply_two(operator.__mod__)

    def raise_to(self):
        '''
        Raise the element below top of stack to the power of top of stack.
        '''
        return self.apply_two(operator.__pow__)

    def root(self):
        '''
        Take the y-th root of x, y being top of stack and x the one below.

        Roots of negative numbers come out complex.
        '''
        return self.apply_two(_root)

    def sqrt(self):
        '''
        Push 2, then take the root.
        '''
        # Fail before pushing the degree.
        self.top()
        self.push(type(self).SQRT_DEGREE)
        return self.root()

    def quorem(self):
        '''
        Push truncated quotient, then remainder, of x and y. Return both.
        '''
        return self.apply_n(2, _quorem)

    divmod = quorem
