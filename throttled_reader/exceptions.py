import errno


class ReadThrottled(BlockingIOError):
    """
    The read budget is spent.

    Behaves like a would-block: try again later or move to another stream.
    """

    def __init__(self, *args):
        super().__init__(*(args or (errno.EWOULDBLOCK, "read throttled")))
