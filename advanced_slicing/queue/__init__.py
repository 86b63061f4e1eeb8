from ._src.abc_queue import AbstractQueue
from ._src.bounded_fifo import BoundedFifo
from ._src.queue_protocol import QueueProtocol

__all__ = [
    "AbstractQueue",
    "BoundedFifo",
    "QueueProtocol",
]
