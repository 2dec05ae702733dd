import math, re
MAX_SAFE_INTEGER = 2**53 - 1
BASE32_DIGIT = re.compile(r"[0-9a-vA-V]")
def is_safe_integer(value) -> bool:
    if isinstance(value, bool): return False
    if isinstance(value, int): return abs(value) <= MAX_SAFE_INTEGER
    if isinstance(value, float):
        return math.isfinite(value) and value.is_integer() and abs(value) <= MAX_SAFE_INTEGER
    return False
def is_base32_digit(ch: str) -> bool:
    return BASE32_DIGIT.fullmatch(ch) is not None
def split_columns(data: str) -> list[str]:
    # one line per column; line length is the column height
    return data.split("\n")
def block_size(data: str) -> tuple[int, int]:
    lines = split_columns(data)
    return len(lines), len(lines[0])
