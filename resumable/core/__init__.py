'''
The core of resumable: a generator driven one step at a time by its caller.

The producer is a plain function that takes an input cell and returns an
iterable. Usually it's a generator function:

Example::

    def running_total(cell):
        total = 0
        while cell.value is not None:
            total += cell.value
            yield total

    co = Coroutine(running_total)
    co.resume(1)    # -> 1
    co.resume(2)    # -> 3
    co.resume(None) # -> 3, co.alive is now False

* the cell is a `Getter`; `resume` writes the new input in `cell.value`
  before running the producer, so after a ``yield`` the producer always sees
  the value passed to the call that resumed it.

* nothing runs in the background: the producer body executes inside
  `resume`, on the caller's thread, from the last ``yield`` to the next one.

* when the producer stops, the call that noticed it returns the last yielded
  value and flips `alive` to False. Resuming after that raises
  `ResumeOnCompletedComputation`.

* exceptions raised in the producer go straight to the caller of `resume`
  and leave the coroutine dead.
'''
