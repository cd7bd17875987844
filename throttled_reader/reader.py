import io
import logging
from typing import Generic, Optional

from throttled_reader.budget import UNLIMITED, Budget, limited
from throttled_reader.exceptions import ReadThrottled
from throttled_reader.io_typing import S, SourceFactory, WritableBuffer


logger = logging.getLogger("throttled_reader.reader")


class ThrottledReader(io.RawIOBase, Generic[S]):
    """
    Proxies a readable source, but caps how many readinto-calls reach it.

    Once the budget is spent every attempt raises ReadThrottled (a BlockingIOError)
    without touching the source, until set_limit or unthrottle is called again.
    Use it from a poll loop to give each stream a fixed number of turns.

    Closing the reader closes the source. Use detach to get the source back untouched.
    """

    def __init__(self, source: S):
        self._parent: Optional[S] = source
        self._detached = False
        self._budget: Budget = UNLIMITED

    @classmethod
    def default(cls, factory: SourceFactory) -> 'ThrottledReader[S]':
        """
        Wrap a freshly constructed source.

        :param factory: Called without arguments, e.g. io.BytesIO.
        """
        return cls(factory())

    def __repr__(self):
        if self._detached:
            return "<ThrottledReader (detached)>"
        return f"<ThrottledReader at {self._budget!r} over {self._parent!r}>"

    def _check_attached(self):
        if self._detached:
            raise ValueError("raw stream has been detached")

    @property
    def raw(self) -> S:
        """
        The wrapped source. Reads done through it are not counted.
        """
        self._check_attached()
        return self._parent

    @property
    def budget(self) -> Budget:
        return self._budget

    def set_limit(self, limit: int) -> None:
        """
        Allow exactly `limit` more reads to reach the source.

        Replaces whatever budget was there before, an exhausted one included.
        """
        self._check_attached()
        self._budget = limited(limit)
        logger.debug(f"Read limit of {self._parent!r} set to {limit}")

    def unthrottle(self) -> None:
        self._check_attached()
        self._budget = UNLIMITED
        logger.debug(f"Read limit of {self._parent!r} removed")

    def remaining(self) -> Optional[int]:
        """
        :return: None if not throttled, otherwise how many reads may still reach the source.
        """
        if self._budget is UNLIMITED:
            return None
        return self._budget.remaining

    def detach(self) -> S:
        """
        Hand the source back and leave this reader unusable.

        The source is not closed and sees no further calls from this reader.
        """
        self._check_attached()
        source = self._parent
        self._parent = None
        self._detached = True
        self._budget = UNLIMITED
        io.RawIOBase.close(self)
        return source

    def close(self) -> None:
        if self.closed:
            return

        try:
            if not self._detached and hasattr(self._parent, "close"):
                self._parent.close()
        finally:
            super().close()

    def fileno(self) -> int:
        fileno = getattr(self.raw, "fileno", None)
        if fileno is None:
            raise io.UnsupportedOperation("fileno")
        return fileno()

    def seekable(self) -> bool:
        return False

    def readable(self) -> bool:
        readable = getattr(self.raw, "readable", None)
        if readable is None:
            return True
        return readable()

    def writable(self) -> bool:
        return False

    def readinto(self, b: WritableBuffer) -> Optional[int]:
        self._check_attached()
        if self.closed:
            raise ValueError("I/O operation on closed file.")

        budget = self._budget
        if budget is not UNLIMITED:
            if budget.exhausted:
                logger.debug(f"Read from {self._parent!r} throttled")
                raise ReadThrottled()

            # Spent before forwarding, so a failing read still costs a turn.
            self._budget = budget.spend()

        return self._parent.readinto(b)

    def readall(self) -> Optional[bytes]:
        """
        Read until the end of the source or until the budget runs out.

        Data collected before the budget ran out is returned; ReadThrottled is
        only raised if nothing could be read at all.
        """
        data = bytearray()
        while True:
            try:
                chunk = self.read(io.DEFAULT_BUFFER_SIZE)
            except ReadThrottled:
                if data:
                    break
                raise

            if chunk is None:
                if data:
                    break
                return None

            if not chunk:
                break
            data += chunk

        return bytes(data)

    def readline(self, size: Optional[int] = -1) -> Optional[bytes]:
        """
        Read one line, one byte per read attempt.

        Like readall, a line cut short by the budget is returned as far as it got.
        """
        if size is None:
            size = -1

        line = bytearray()
        while size < 0 or len(line) < size:
            try:
                byte = self.read(1)
            except ReadThrottled:
                if line:
                    break
                raise

            if byte is None:
                if line:
                    break
                return None

            if not byte:
                break
            line += byte
            if byte == b"\n":
                break

        return bytes(line)

    def readlines(self, hint: Optional[int] = -1) -> list:
        lines = []
        total = 0
        while hint is None or hint <= 0 or total < hint:
            try:
                line = self.readline()
            except ReadThrottled:
                if lines:
                    break
                raise

            if not line:
                break
            lines.append(line)
            total += len(line)

        return lines


def wrap(source) -> ThrottledReader:
    """
    Convert a source into a ThrottledReader without a limit.

    Readers that are already throttled are returned as they are.
    """
    if isinstance(source, ThrottledReader):
        return source
    return ThrottledReader(source)
