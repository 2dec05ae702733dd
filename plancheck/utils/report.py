import time, os
from jinja2 import Template
from ..plan.digits import block_size
REPORT_TMPL = Template("""
# Plan Validation Report

**Grid:** {{ width }} x {{ height }}
**Tasks:** {{ tasks|length }}
**Checked:** {{ checked }}
**Verdict:** {{ verdict }}

## Tasks
| task | x | y | width | height |
|------|---|---|-------|--------|
{% for t in tasks -%}
| {{ t.name }} | {{ t.x }} | {{ t.y }} | {{ t.width }} | {{ t.height }} |
{% endfor %}
""")
def task_rows(plan: dict) -> list[dict]:
    rows = []
    for name, task in plan.items():
        w, h = block_size(task["data"])
        rows.append({"name": name, "x": task["x"], "y": task["y"], "width": w, "height": h})
    return rows
def _cell(text: str) -> str:
    # table cells are one line and split on unescaped pipes
    return " ".join(str(text).splitlines()).replace("|", "\\|")
def write_report(path: str, plan: dict, verdict: bool|str, width: int, height: int):
    if os.path.dirname(path): os.makedirs(os.path.dirname(path), exist_ok=True)
    content = REPORT_TMPL.render(
        width=width,
        height=height,
        tasks=[dict(r, name=_cell(r["name"])) for r in task_rows(plan)],
        checked=time.strftime("%Y-%m-%d %H:%M:%S"),
        verdict="OK" if verdict is True else f"FAILED ({verdict})",
    )
    with open(path, "w", encoding="utf-8") as f: f.write(content)
