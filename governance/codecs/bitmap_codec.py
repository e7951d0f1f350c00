from typing import List

from utils.exceptions import SizeMismatchError

MAX_BITMAP_SIZE = 256


def bool_array_to_bitmap(flags: List[bool]) -> int:
    """Bit i of the result is set when flags[i] is True."""
    if len(flags) > MAX_BITMAP_SIZE:
        raise SizeMismatchError(MAX_BITMAP_SIZE, len(flags))
    bitmap = 0
    for index, flag in enumerate(flags):
        if flag:
            bitmap |= 1 << index
    return bitmap


def bitmap_to_bool_array(bitmap: int, size: int = MAX_BITMAP_SIZE) -> List[bool]:
    if bitmap < 0 or bitmap >= 1 << MAX_BITMAP_SIZE:
        raise ValueError(f"Bitmap out of uint256 range: {bitmap}")
    return [bool(bitmap >> index & 1) for index in range(min(size, MAX_BITMAP_SIZE))]
