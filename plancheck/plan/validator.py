from .. import config
from ..utils.logger import debug
from .digits import is_safe_integer, is_base32_digit, split_columns
from .schema import Plan
NOT_INTEGER = "coordinate is not integer"
OUT_OF_RANGE = "coordinate out of range"
X_RANGE = "image out of x range"
Y_RANGE = "image out of y range"
UNEVEN_HEIGHT = "data has different height in each column"
INVALID_CHAR = "data contains invalid character"
OVERLAP = "overlaps with another task"
def _fail(name: str, kind: str) -> str:
    msg = f"task [{name}]: {kind}"
    debug(f"plan rejected: {msg}")
    return msg
def validate_plan(plan: Plan, width: int|None=None, height: int|None=None) -> bool|str:
    """Return True if every task fits the grid without overlapping, else the first failure.

    Tasks are scanned in mapping order, each column left to right and each
    column top to bottom. Cells are numbered ``i * height + j``; the set of
    occupied cells lives only for this call.
    """
    W = config.WIDTH if width is None else width
    H = config.HEIGHT if height is None else height
    occupied: set[int] = set()
    for name, task in plan.items():
        x, y, data = task["x"], task["y"], task["data"]
        if not is_safe_integer(x) or not is_safe_integer(y): return _fail(name, NOT_INTEGER)
        x, y = int(x), int(y)
        if not 0 <= x < W or not 0 <= y < H: return _fail(name, OUT_OF_RANGE)
        lines = split_columns(data)
        w = len(lines)
        if w == 0 or x + w > W: return _fail(name, X_RANGE)
        h = len(lines[0])
        if h == 0 or y + h > H: return _fail(name, Y_RANGE)
        for i in range(x, x + w):
            column = lines[i - x]
            if len(column) != h: return _fail(name, UNEVEN_HEIGHT)
            for j in range(y, y + h):
                if not is_base32_digit(column[j - y]): return _fail(name, INVALID_CHAR)
                index = i * H + j
                if index in occupied: return _fail(name, OVERLAP)
                occupied.add(index)
    debug(f"plan accepted: {len(plan)} task(s) on {W}x{H} grid")
    return True
