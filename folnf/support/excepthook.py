import sys
from typing import Optional
from types import TracebackType

import IPython


class NoTraceException(Exception):
    """An exception that is reported by its message only, without a
    traceback. We use it for failures caused by the input text of a user,
    e.g., unknown commands or misplaced connectives. Those are normal
    situations during interactive use, and inspection of our code would not
    help the user.
    """
    pass


def handler(exc: NoTraceException, tb: Optional[TracebackType]) -> None:
    print(f'{exc.__class__.__name__}: {exc}', file=sys.stderr, flush=True)


# Python shell

def excepthook(exc_type: type[BaseException], exc: BaseException,
               tb: Optional[TracebackType]) -> None:
    if isinstance(exc, NoTraceException):
        handler(exc, tb)
    else:
        sys_excepthook(exc_type, exc, tb)


# To be executed at import:

sys_excepthook = sys.excepthook
sys.excepthook = excepthook


# IPython, which also hosts the pretty printing of formulas:

def ipy_custom_exec(shell: IPython.InteractiveShell, exc_type: type[NoTraceException],
                    exc: NoTraceException, tb: TracebackType,
                    tb_offset: Optional[int] = None) -> None:
    handler(exc, tb)


# To be executed at import:

ipy = IPython.get_ipython()
if ipy is not None:
    ipy.set_custom_exc((NoTraceException,), ipy_custom_exec)
