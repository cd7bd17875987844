from typing import Callable, Optional, Protocol, TypeVar, Union, runtime_checkable

WritableBuffer = Union[bytearray, memoryview]


@runtime_checkable
class ReadableSource(Protocol):

    def readinto(self, b: WritableBuffer) -> Optional[int]:
        ...


S = TypeVar("S", bound=ReadableSource)
SourceFactory = Callable[[], S]
