import os
from dotenv import load_dotenv
load_dotenv()
def _dimension(name: str, default: int) -> int:
    raw = os.getenv(name, str(default))
    try: value = int(raw)
    except ValueError: raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if value <= 0: raise ValueError(f"{name} must be positive, got {value}")
    return value
WIDTH = _dimension("PLAN_WIDTH", 1000)
HEIGHT = _dimension("PLAN_HEIGHT", 600)
DEBUG = os.getenv("PLANCHECK_DEBUG", "false").lower() == "true"
