"""
A module for quick importing the essential core stuff.
(Coroutine, coroutine, Getter and the exceptions)
"""
from .core.coroutines import (
    Getter, Coroutine, CoroutineFunction, coroutine, coro,
    debug_coroutine, debug_coro,
    CoroutineException, ResumeOnCompletedComputation
)
__doc_all__ = []
