"""
Mischelaneous or common.
"""
__all__ = ['fmt_value']


def fmt_value(value, lim=60):
    """Return a repr of *value* cut to *lim* characters."""
    ret = repr(value)
    if len(ret) > lim:
        return "%s ... (%s more)" % (ret[:lim], len(ret) - lim)
    return ret
