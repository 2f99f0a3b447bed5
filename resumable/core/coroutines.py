"""
Coroutine related boilerplate and wrappers.
"""
__all__ = [
    'Getter', 'Coroutine', 'CoroutineFunction', 'coro', 'coroutine',
    'debug_coro', 'debug_coroutine', 'CoroutineException',
    'ResumeOnCompletedComputation'
]

import functools
import sys
import traceback

from resumable.core.util import fmt_value


class CoroutineException(Exception):
    """Base class for the errors raised by a coroutine wrapper. Errors raised
    by the producer itself are never wrapped in this."""

class ResumeOnCompletedComputation(CoroutineException):
    """Raised when `Coroutine.resume` is called after the coroutine died.
    Nothing runs and nothing changes in the coroutine when this is raised."""


class Getter(object):
    """The input cell. The producer gets this object when it's created and
    reads ``cell.value`` after each yield; `Coroutine.resume` is the only
    writer."""
    __slots__ = ('value',)

    def __init__(self, value=None):
        self.value = value

    def __repr__(self):
        return "<%s at 0x%X value:%s>" % (
            self.__class__.__name__, id(self), fmt_value(self.value))


class Coroutine(object):
    '''
    Wraps a producer factory into something that can be resumed step by step.

    Usage:

    .. sourcecode:: python

        co = Coroutine(factory, args=(), kwargs=None,
                initial=None, default=None, debug=False)

    * factory: a callable receiving the `Getter` cell (and *args*, *kwargs*)
      and returning an iterable, usually a generator function. It is called
      right away but the iterator is not advanced until the first `resume`.

    * initial: the value the cell holds before the first resume.

    * default: what `resume` returns if the producer finishes without ever
      yielding anything.

    * debug: trace every resume on stderr.

    Termination is noticed lazily: the call that finds the producer exhausted
    returns the last yielded value (or *default*) and sets `alive` to False.
    If the producer raises, the exception goes to the caller unchanged and
    the coroutine is dead too.
    '''
    STATE_NOTSTARTED, STATE_RUNNING, STATE_COMPLETED, STATE_FAILED = range(4)
    _state_names = "NOTSTARTED", "RUNNING", "COMPLETED", "FAILED"
    __slots__ = (
        'name', 'state', 'cell', 'producer', 'current', 'result',
        'exception', 'debug', 'executing', '__weakref__',
    )
    alive = property(lambda self: self.state < self.STATE_COMPLETED,
                     doc="True while the coroutine can be resumed.")

    def __init__(self, factory, args=(), kwargs=None,
            initial=None, default=None, debug=False):
        if not callable(factory):
            raise TypeError("Bad producer factory: %r" % (factory,))
        self.name = getattr(factory, '__name__', factory.__class__.__name__)
        self.debug = debug
        self.cell = Getter(initial)
        self.producer = iter(factory(self.cell, *args, **(kwargs or {})))
        self.current = default
        self.result = None
        self.exception = None
        self.executing = False
        self.state = self.STATE_NOTSTARTED

    def resume(self, value=None):
        """
        Put *value* in the cell and run the producer to its next yield.

        * if the producer yields, return that value.

        * if the producer is exhausted, set STATE_COMPLETED, keep the
          generator's return value in `result` and return `current`, the
          last value yielded before.

        * if the producer raises, set STATE_FAILED, keep the exc_info in
          `exception` and let the exception through.

        Resuming from inside the producer raises CoroutineException.
        """
        if self.state >= self.STATE_COMPLETED:
            raise ResumeOnCompletedComputation(
                "Cannot resume dead coroutine %r" % self)
        if self.executing:
            raise CoroutineException(
                "Coroutine %r is already executing" % self)
        if self.debug:
            print(file=sys.stderr)
            print('Resuming %r with: %s' % (self, fmt_value(value)),
                  file=sys.stderr)
        self.cell.value = value
        self.executing = True
        try:
            self.current = next(self.producer)
        except StopIteration as e:
            self.state = self.STATE_COMPLETED
            self.result = e.value
            if hasattr(self.producer, 'close'):
                self.producer.close()
            if self.debug:
                print("Completed, result %s. Returns %s." % (
                    fmt_value(self.result), fmt_value(self.current)),
                    file=sys.stderr)
        except BaseException:
            self.state = self.STATE_FAILED
            self.exception = sys.exc_info()
            if self.debug:
                self.handle_error(value)
            raise
        else:
            self.state = self.STATE_RUNNING
            if self.debug:
                print("Yields %s." % fmt_value(self.current), file=sys.stderr)
        finally:
            self.executing = False
        return self.current

    def handle_error(self, value):
        print('-'*40, file=sys.stderr)
        print('Exception happened during processing of coroutine.',
              file=sys.stderr)
        traceback.print_exception(*self.exception)
        print("Coroutine %s killed. Last input: %s" % (
            self, fmt_value(value)), file=sys.stderr)
        print('-'*40, file=sys.stderr)

    def __repr__(self):
        return "<%s %s instance at 0x%08X, state: %s, current: %s>" % (
            self.name,
            self.__class__.__name__,
            id(self),
            self._state_names[self.state],
            fmt_value(self.current)
        )
    __str__ = __repr__


class CoroutineFunction(object):
    """
    A decorator for producer factories. Calling the decorated function
    returns a fresh `Coroutine`; the call arguments are passed to the
    factory after the cell.
    Example::

        @coroutine
        def echo(cell, step):
            while True:
                yield cell.value + step

        co = echo(1)
        co.resume(5) # -> 6

    Coroutine options go in the decorator call: ``@coroutine(initial=0)``.
    The instance takes the name and docstring of the wrapped function.
    """
    def __init__(self, func, **options):
        self.wrapped_func = func
        self.options = options
        functools.update_wrapper(self, func)

    def __repr__(self):
        return "<%s constructor at 0x%08X wrapping %r>" % (
            self.__class__.__name__,
            id(self),
            self.wrapped_func,
        )
    __str__ = __repr__

    def __get__(self, instance, owner):
        """
        Decorating methods with a class needs that class to be a descriptor
        as __call__ doesn't get automaticaly binded to the instance as
        functions do.
        """
        if instance is None:
            return self
        return self.__class__(
            self.wrapped_func.__get__(instance, owner), **self.options)

    def __call__(self, *args, **kwargs):
        "Return a Coroutine instance"
        return Coroutine(self.wrapped_func, args=args, kwargs=kwargs,
                         **self.options)


def coroutine(func=None, **options):
    """Use as ``@coroutine`` or ``@coroutine(initial=..., default=...)``."""
    if func is None:
        return lambda func: CoroutineFunction(func, **options)
    return CoroutineFunction(func, **options)

coro = coroutine

def debug_coroutine(func=None, **options):
    "Like `coroutine` but all the instances trace their steps on stderr."
    options['debug'] = True
    return coroutine(func, **options)

debug_coro = debug_coroutine
