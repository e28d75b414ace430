import datetime
import logging
import time
from typing import Optional


class DeltaTimeFormatter(logging.Formatter):
    """Adds an attribute `delta` to each :class:`logging.LogRecord`, which is
    the time elapsed since a reference time. The reference time is the
    creation time of the formatter until it is reset with
    :meth:`set_reference_time`. The pipeline resets it at the beginning of
    each run so that the log shows the time spent within that run.

    >>> import logging, sys
    >>> logger = logging.getLogger('folnf.demo')
    >>> handler = logging.StreamHandler(stream=sys.stdout)
    >>> formatter = DeltaTimeFormatter('%(delta)s: %(message)s')
    >>> handler.setFormatter(formatter)
    >>> logger.addHandler(handler)
    >>> formatter.set_reference_time()
    >>> logger.warning('parsed')  # doctest: +SKIP
    0:00:00.001: parsed
    """

    def __init__(self, fmt: Optional[str] = None, datefmt: Optional[str] = None) -> None:
        super().__init__(fmt, datefmt)
        self._reference_time = time.time()

    def format(self, record: logging.LogRecord) -> str:
        delta = datetime.timedelta(seconds=max(0.0, record.created - self._reference_time))
        record.delta = str(delta)[:-3]
        return super().format(record)

    def get_reference_time(self) -> float:
        """Get the reference time in seconds since the :ref:`epoch <epoch>`.
        This is compatible with the output of :func:`time.time`.
        """
        return self._reference_time

    def set_reference_time(self, reference_time: Optional[float] = None) -> None:
        """Set the reference time to `reference_time` seconds since the
        :ref:`epoch <epoch>`, or to the current time if `reference_time` is
        :obj:`None`.
        """
        self._reference_time = time.time() if reference_time is None else reference_time


class Timer:
    """A simple timer measuring the wall time in seconds relative to the last
    :meth:`.reset`. Instances are implicitly reset when they are created.

    >>> timer = Timer()
    >>> timer.get() >= 0.0
    True
    """

    def __init__(self) -> None:
        self.reset()

    def get(self) -> float:
        """Get the wall time since last :meth:`.reset` in seconds.
        """
        return time.time() - self._reference_time

    def reset(self) -> None:
        """Reset the timer to 0.0 seconds.
        """
        self._reference_time = time.time()
