# -*- coding: utf-8 -*-
'''
A tiny library for stepping a generator like a coroutine.

resumable wraps a generator (or anything iterable) in a `Coroutine` object
that the caller drives by hand. Every `resume(value)` call puts *value* in a
shared input cell, runs the generator up to its next ``yield`` and hands back
what was yielded. The generator reads the input through the cell it got when
it was created, so values go in through the cell and come out through yield.

::

    Roughly a resume step works like this:

    caller                            producer (generator)
    ------                            --------------------
    co = Coroutine(producer)  ------> producer(cell) created, not started
       |
    co.resume(x)
       |  cell.value = x
       +--- next(iterator) ---------> runs until the next yield
       |                                 |
       +<-------- produced value --------+
       |
    returns value, co.alive stays True

    co.resume(y)  ------------------> producer falls off the end
       |
    returns the last value, co.alive becomes False

    co.resume(z)  ------------------> ResumeOnCompletedComputation
'''

__license__ = u'''
Copyright (c) 2007, Mărieş Ionel Cristian

Permission is hereby granted, free of charge, to any person obtaining a copy
of this software and associated documentation files (the "Software"), to deal
in the Software without restriction, including without limitation the rights
to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
copies of the Software, and to permit persons to whom the Software is
furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in
all copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN
THE SOFTWARE.
'''

__version__ = '0.1.0'

from resumable import core
from resumable import common
