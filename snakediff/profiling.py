"""Tools for profiling edit script computation and replay.

For long sequences the wavefront search can become slow, and these
tools help to see where the time is spent. For a more rigorous
profiling, consider using cProfile, but for initial considerations
these should be helpful.

Typical profiling usage:
Add some statements like
from snakediff.profiling import timer
with timer.time('Key to identify this segment'):
    <code to time>

Then, launch `python -m snakediff.profiling old.txt new.txt`, or pass
`--profile` to `snakediff diff`. The output looks like:

    Key                    Calls        Time    Time/Call
    -------------------  -------  ----------  -----------
    compute_edit_script        1  0.00512      0.00512
    apply_edit_script          1  4.6e-05      4.6e-05

"""

import time
import contextlib
from tabulate import tabulate
from functools import wraps


def _sort_time(value):
    time = value[1]['time']
    return -time


class TimePaths(object):
    def __init__(self, enabled=True):
        self.map = {}
        self.enabled = enabled

    @contextlib.contextmanager
    def time(self, key):
        if not self.enabled:
            yield
            return
        start = time.perf_counter()
        yield
        end = time.perf_counter()
        secs = end - start
        if key in self.map:
            self.map[key]['time'] += secs
            self.map[key]['calls'] += 1
        else:
            self.map[key] = dict(time=secs, calls=1)

    def profile(self, key=None):
        def decorator(function):
            nonlocal key
            if key is None:
                key = function.__name__ or 'unknown'
            @wraps(function)
            def inner(*args, **kwargs):
                with self.time(key):
                    return function(*args, **kwargs)
            return inner
        return decorator

    @contextlib.contextmanager
    def enable(self):
        old = self.enabled
        self.enabled = True
        yield
        self.enabled = old

    @contextlib.contextmanager
    def disable(self):
        old = self.enabled
        self.enabled = False
        yield
        self.enabled = old

    def reset(self):
        self.map = {}

    def __str__(self):
        items = sorted(self.map.items(), key=_sort_time)
        lines = []
        for key, data in items:
            time = data['time']
            calls = data['calls']
            lines.append((key, calls, time, time / calls))
        return tabulate(lines, headers=['Key', 'Calls', 'Time', 'Time/Call'])


timer = TimePaths(enabled=False)


def profile_diff_paths(args=None):
    import snakediff.sdiffapp
    import snakediff.profiling
    try:
        with snakediff.profiling.timer.enable():
            snakediff.sdiffapp.main(args)
    finally:
        data = str(snakediff.profiling.timer)
        print(data)


if __name__ == "__main__":
    profile_diff_paths()
