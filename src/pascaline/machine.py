from collections import deque
import logging

from .lexer import parse
from .operators import Operator, evaluate
from .util import (ArityMismatch, EmptyStack, NoLastOperator,
                   NotYetSupported, StackOverflow, TypeMismatch)


log = logging.getLogger(__name__)


class Machine:
    '''
    Arithmetic stack machine (RPN calculator).

    Takes tokens and runs them, one at a time. Each push either completes or
    leaves the stack exactly as it found it.

    Not thread safe: give each evaluation context its own machine.
    '''

    CAPACITY = 4096

    def __init__(self, capacity=None):
        '''
        Create empty stack machine.

        :param capacity: Maximum number of elements on the stack.
        '''
        self.capacity = type(self).CAPACITY if capacity is None else capacity
        self.stack = deque()
        # Last operator applied successfully, never LASTOP
        self.last_operator = None
        # Operands consumed by the last successful pure operator
        self.last_operands = None

    def feed(self, text):
        '''
        Parse and push every token of text.

        Stops at the first error, keeping whatever was pushed before it.
        '''
        for token in parse(text):
            self.push(token)

    def push(self, token):
        '''
        Stack literal token or run operator token on the machine.
        '''
        if len(self.stack) >= self.capacity:
            raise StackOverflow(self.capacity)
        if token.is_operator():
            # Tokens built by hand may bypass Token.new_operator()
            if not isinstance(token.value, Operator):
                raise TypeMismatch('Not an operator: {!r}'.format(token.value))
            self._apply(self._resolve(token.value))
        elif token.is_legitimate():
            self.stack.append(token)
        else:
            raise TypeMismatch('Cannot push an ignored token')

    def _resolve(self, op):
        '''
        Return the operator to actually run for op, unwrapping LASTOP.
        '''
        if op is not Operator.LASTOP:
            return op
        if self.last_operator is None:
            raise NoLastOperator()
        # LASTOP is never remembered, so this can't replay itself.
        assert self.last_operator is not Operator.LASTOP
        return self.last_operator

    def _apply(self, op):
        if op in type(self).STRUCTURAL:
            type(self).STRUCTURAL[op](self)
        elif op.is_structural():
            # UNDO and REDO, no history is kept
            raise NotYetSupported(op)
        else:
            self._operate(op)
        self.last_operator = op
        log.debug('Applied %s, stack size %d', op, len(self.stack))

    def _operate(self, op):
        '''
        Pop operands for pure operator, run it, and push the result.

        Operands are put back as they were if anything goes wrong.
        '''
        if len(self.stack) < op.arity:
            raise ArityMismatch(op, op.arity, len(self.stack))
        operands = self._popstack(op.arity)
        try:
            result = evaluate(op, operands)
        except Exception:
            self.stack.extend(operands)
            log.debug('Rolled back %s', op)
            raise
        self.stack.append(result)
        self.last_operands = tuple(operands)

    def _popstack(self, n):
        '''
        Pop n elements from the stack, bottommost first.
        '''
        popped = [self.stack.pop() for _ in range(n)]
        popped.reverse()
        return popped

    def dupstack(self):
        '''
        Duplicate element at top of stack.
        '''
        if not self.stack:
            raise EmptyStack()
        self.stack.append(self.stack[-1])

    def dropstack(self):
        '''
        Discard element at top of stack.
        '''
        if not self.stack:
            raise EmptyStack()
        self.stack.pop()

    def revstack(self):
        '''
        Swap two elements at top of stack.
        '''
        if len(self.stack) < 2:
            raise ArityMismatch(Operator.SWAP, 2, len(self.stack))
        self.stack[-1], self.stack[-2] = self.stack[-2], self.stack[-1]

    def clrstack(self):
        '''
        Clear everything from the stack.
        '''
        self.stack.clear()

    def lastargs(self):
        '''
        Push back the operands the last pure operator consumed.
        '''
        if self.last_operands is None:
            raise NoLastOperator('No operands to recall')
        if len(self.stack) + len(self.last_operands) > self.capacity:
            raise StackOverflow(self.capacity)
        self.stack.extend(self.last_operands)

    # Operators acting on the stack itself rather than on popped operands
    STRUCTURAL = {
        Operator.DUP: dupstack,
        Operator.DROP: dropstack,
        Operator.SWAP: revstack,
        Operator.CLEAR: clrstack,
        Operator.LASTARGS: lastargs,
    }

    def result(self):
        '''
        Return the top of the stack, or None if empty.
        '''
        return self.stack[-1] if self.stack else None

    def size(self):
        return len(self.stack)

    def clear(self):
        self.clrstack()

    def __len__(self):
        return len(self.stack)

    def __iter__(self):
        return iter(self.stack)

    def __str__(self):
        return '[' + ', '.join(map(str, self.stack)) + ']'

    def __repr__(self):
        return '<Machine {}>'.format(self)
