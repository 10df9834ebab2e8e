"""
This module provides a few utility decorators
"""

import time
import logging

logger = logging.getLogger(__name__)


def timeit(method):
    '''A decorator for timing the executing of certain methods

    Pass log_time=<dict> to store the duration in seconds under
    log_name (default: the upper case method name) instead of logging it.
    '''
    def timed(*args, **kw):
        log_time = kw.pop('log_time', None)
        name = kw.pop('log_name', method.__name__.upper())
        ts = time.perf_counter()
        result = method(*args, **kw)
        te = time.perf_counter()
        if log_time is not None:
            log_time[name] = te - ts
        else:
            logger.info('%r  %2.4f s' % (method.__name__, (te - ts)))
        return result
    timed.__name__ = method.__name__
    timed.__doc__ = method.__doc__
    return timed
