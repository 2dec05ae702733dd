import json, sys
from .schema import Plan, is_plan, shape_errors
class PlanFormatError(ValueError):
    """Document is not JSON or does not have the shape of a plan."""
def parse_plan(text: str) -> Plan:
    try: obj = json.loads(text)
    except json.JSONDecodeError as e: raise PlanFormatError(f"invalid JSON: {e}") from e
    if not is_plan(obj):
        raise PlanFormatError("not a plan: " + "; ".join(shape_errors(obj)))
    return obj
def load_plan(path: str) -> Plan:
    if path == "-": return parse_plan(sys.stdin.read())
    with open(path, encoding="utf-8") as f: return parse_plan(f.read())
