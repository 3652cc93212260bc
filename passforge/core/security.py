"""
passforge Security - Best-effort wiping of secret material.
"""

from typing import List, Union
import numpy as np


def secure_zero(data: Union[np.ndarray, bytearray, bytes, List[str]]) -> None:
    """
    Attempt to erase sensitive data from memory (best-effort).

    Python gives no guarantee that memory is actually cleared: str objects
    are immutable and the allocator may have copied buffers elsewhere.
    This only removes the references we control.

    Args:
        data: A writable numpy array, a bytearray, or a list of characters
              (the working buffer of a generator). bytes are ignored.
    """
    try:
        if isinstance(data, np.ndarray):
            if data.flags.writeable:
                data[:] = 0
        elif isinstance(data, bytearray):
            for i in range(len(data)):
                data[i] = 0
        elif isinstance(data, list):
            data.clear()
        # bytes objects are immutable, cannot be zeroed
    except (TypeError, ValueError):
        pass
