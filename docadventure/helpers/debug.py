import functools
import logging


def log_call(fn):
    @functools.wraps(fn)
    def __wrapped(*args, **kwargs):
        logging.getLogger(fn.__module__).debug(f"Calling {fn.__qualname__} ({len(args)} args, {len(kwargs)} kwargs)")
        return fn(*args, **kwargs)
    return __wrapped
