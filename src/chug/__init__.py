"""chug - estimate the time remaining for unit-counted work.

The caller declares how many units of work there are, calls ``tick()`` after
each one, and asks ``eta()`` for the time remaining whenever it wants to
display it::

    from chug import ProgressEstimator, format_eta

    estimator = ProgressEstimator(10, 100)
    for item in items:
        process(item)
        estimator.tick()
        print(format_eta(estimator.eta()))
"""

from chug.core.progress import (
    Chug,
    EtaReport,
    EtaStatus,
    ProgressEstimator,
    TimestampWindow,
)
from chug.utils.formatting import format_duration, format_eta

__all__ = [
    "Chug",
    "EtaReport",
    "EtaStatus",
    "ProgressEstimator",
    "TimestampWindow",
    "format_duration",
    "format_eta",
]
