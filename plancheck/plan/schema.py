from typing import TypedDict
from jsonschema import Draft7Validator
class Task(TypedDict):
    x: int
    y: int
    data: str
Plan = dict[str, Task]
TASK_SCHEMA = {
  "type": "object",
  "properties": {
    "x": {"type": "number"},
    "y": {"type": "number"},
    "data": {"type": "string"}
  },
  "required": ["x", "y", "data"]
}
PLAN_SCHEMA = {
  "type": "object",
  "additionalProperties": TASK_SCHEMA
}
_validator = Draft7Validator(PLAN_SCHEMA)
def is_plan(obj) -> bool:
    """Structural check only: numeric x/y and string data on every value."""
    return _validator.is_valid(obj)
def shape_errors(obj) -> list[str]:
    errors = sorted(_validator.iter_errors(obj), key=lambda e: [str(p) for p in e.absolute_path])
    out = []
    for e in errors:
        where = "/".join(str(p) for p in e.absolute_path) or "<root>"
        out.append(f"{where}: {e.message}")
    return out
