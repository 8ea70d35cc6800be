"""
Functions for configuring how the library reports on itself.
"""

from logging import INFO


def init_logging(level=INFO):
    """
    Convenience method to enable logging to standard output.

    The library never installs handlers itself (Python's `logging` module
    recommends that libraries should not install any event handlers on the
    root logger). A script that is not particular about how logging should
    take place, but does want to see what the portion iterators are doing,
    can call this function; pass `level=logging.DEBUG` to see every divide.
    """
    from sys import stdout
    from logging import StreamHandler, Formatter, getLogger

    class RunFormatter(Formatter):
        def format(self, record):
            name = record.name.replace("portions.", "")

            if record.levelno <= INFO:
                return f"[{name}] {record.getMessage()}"
            else:
                return f"[{name}:{record.levelname.lower()}] {record.getMessage()}"

    handler = StreamHandler(stdout)
    handler.setFormatter(RunFormatter())

    root_logger = getLogger()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)
    return handler
