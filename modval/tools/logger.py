import sys

from funcy import decorator


class Logger(object):
    """
    Logger class used as an intermediate step before outputting messages.
    Allows controlling the output through filters.

    The categories used by modval are:
    - "hole": a slot was emptied for a modification, or filled again.
    - "restore": a slot was filled again while an exception was propagating.
    - "trace": a public modify operation was entered or left.
    """
    def __init__(self, filters):
        """
        :param dict[str, file] filters: The keys describe the categories that
            are "allowed". Their corresponding value indicates where the
            messages belonging to that category will be printed.
        """
        self.filters = filters

    @staticmethod
    def with_std_output(filters):
        """
        Creates a Logger from a list of allowed categories, redirecting each
        of them to the standard output.

        :param list[str] filters: The categories to allow.
        :rtype: Logger
        """
        return Logger({f: sys.stdout for f in filters})

    def enabled(self, category):
        """
        Returns True if messages of the given category are output somewhere.

        :param str category: The category to test.
        :rtype: bool
        """
        return category in self.filters

    def log(self, category, msg):
        """
        Outputs the message according to its category.
        :param str category: Category of the message.
        :param str msg: Message content.
        """
        output = self.filters.get(category)
        if output is not None:
            output.write(msg)
            output.flush()


# default logger outputs nothing
_global_logger = Logger({})


def set_logger(logger):
    """
    Sets the global logger object to the given Logger instance.
    :param Logger logger: The logger instance to use.
    """
    global _global_logger
    _global_logger = logger


def get_logger():
    """
    Returns the global logger instance.
    :rtype: Logger
    """
    return _global_logger


def enabled(category):
    """
    Returns True if the global logger outputs the given category.

    :param str category: The category to test.
    :rtype: bool
    """
    return _global_logger.enabled(category)


def log(category, msg):
    """
    Logs the given message using the global logger instance, if defined.
    Note: adds a newline at the end of the message.

    :param str category: The category of the message.
    :param str msg: The content of the message.
    """
    return _global_logger.log(category, msg + '\n')


@decorator
def logged(call, category):
    """
    Decorator which logs the entry and the exit of each call to the decorated
    function in the given category. The exit message tells whether the call
    returned or raised.

    Usage:

    @logged('trace')
    def fun(...):
        ...

    :param funcy.Call call: The intercepted call.
    :param str category: The category of the messages.
    """
    name = call._func.__name__
    if not enabled(category):
        return call()

    log(category, 'enter {}'.format(name))
    try:
        res = call()
    except Exception as e:
        log(category, 'exit {} (raised {})'.format(name, type(e).__name__))
        raise
    log(category, 'exit {}'.format(name))
    return res
