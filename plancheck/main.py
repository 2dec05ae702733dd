import argparse, sys
from . import config
from .plan.loader import load_plan, PlanFormatError
from .plan.validator import validate_plan
from .utils.logger import panel, task_table, info, warn, error
from .utils.report import task_rows, write_report
def main(argv: list[str]|None=None) -> int:
    ap = argparse.ArgumentParser(prog="plancheck", description="Validate a paint board plan.")
    ap.add_argument('plan', help="plan JSON file, or - for stdin")
    ap.add_argument('--width', type=int, default=config.WIDTH)
    ap.add_argument('--height', type=int, default=config.HEIGHT)
    ap.add_argument('--report', default=None)
    ap.add_argument('--quiet', action='store_true')
    args = ap.parse_args(argv)
    if args.width <= 0 or args.height <= 0: ap.error("grid size must be positive")
    try: pl = load_plan(args.plan)
    except (OSError, PlanFormatError) as e: error(f"Cannot read plan: {e}"); return 2
    if not pl: warn("Plan has no tasks")
    if not args.quiet: panel(f"Plan ({args.width}x{args.height})", task_table(task_rows(pl)))
    verdict = validate_plan(pl, args.width, args.height)
    if args.report: write_report(args.report, pl, verdict, args.width, args.height)
    if verdict is not True: error(f"Plan invalid: {verdict}"); return 1
    info(f"Plan valid: {len(pl)} task(s)")
    return 0
def main_cli(): sys.exit(main())
if __name__ == '__main__': main_cli()
