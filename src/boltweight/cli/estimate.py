"""
Command-line interface for bolt weight estimation.
"""

import argparse
import logging
import sys

from ..calculator import (
    build_report,
    estimate_from_spec,
    estimate_nut_weight,
    material_name,
    to_json,
    to_markdown,
    to_summary,
    validate_bolt_spec,
)
from ..calculator.dimensions import resolve_standard
from ..enums import StandardFamily
from ..errors import BoltWeightError
from ..io import EstimateOptions, FastenerSpec, load_batch_json, save_report_json

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="boltweight",
        description="Estimate the weight of bolts and nuts from catalogue dimensions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # ISO M10 x 50 mm steel bolt
  boltweight M10 50

  # ASME 1/2" x 3" bolt as JSON
  boltweight 1/2 3 --standard ASME --format json

  # DIN 933 full-thread stainless bolt, property class 10.9
  boltweight M12 60 --material stainless_steel --grade 10.9 --full-thread

  # Warn about sizes/lengths outside catalogue ranges
  boltweight M10 600 --validate

  # Bolt list with project total
  boltweight --batch bolts.json --format markdown --save-json report.json

  # ASME B18.2.2 hex nut
  boltweight --nut 1/2 --material brass
        """
    )

    parser.add_argument('size', nargs='?', help='Nominal size, e.g. M10 or 1/2')
    parser.add_argument('length', nargs='?', type=float,
                        help='Length under head (mm for metric, inches for ASME)')
    parser.add_argument('--standard', default=None,
                        help='Standard family: metric, inch, metric_carriage (or ISO, DIN, ASME, ANSI, DIN603). Default: metric')
    parser.add_argument('--material', default=None,
                        help='Material: STEEL, STAINLESS_STEEL, ALUMINIUM, BRASS. Unknown values use STEEL')
    parser.add_argument('--grade', default=None,
                        help='Property class for grade correction, e.g. 8.8, 10.9')
    parser.add_argument('--full-thread', action='store_true',
                        help='Apply the full-thread (DIN 933) correction')
    parser.add_argument('--format', choices=['summary', 'json', 'markdown'], default='summary',
                        help='Output format (default: summary)')
    parser.add_argument('--validate', action='store_true',
                        help='Check size format and length range before estimating')
    parser.add_argument('--batch', metavar='FILE', default=None,
                        help='JSON bolt list to calculate instead of a single bolt')
    parser.add_argument('--save-json', metavar='FILE', default=None,
                        help='Save the batch report to a JSON file')
    parser.add_argument('--nut', metavar='SIZE', default=None,
                        help='Estimate an ASME hex nut of this inch size instead of a bolt')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Log calculation details to stderr')

    return parser


def _run_nut(args) -> int:
    result = estimate_nut_weight(args.nut, args.material)
    if args.format == 'json':
        print(to_json(result))
    else:
        print(f"Hex nut {args.nut} ({material_name(args.material)})")
        print(to_summary(result))
    return 0


def _run_batch(args) -> int:
    request = load_batch_json(args.batch)
    logger.debug(f"Loaded {len(request.items)} items from {args.batch}")
    standard = resolve_standard(args.standard) if args.standard else request.standard
    options = EstimateOptions(
        grade=args.grade or request.grade,
        full_thread=args.full_thread or request.full_thread,
    )
    report = build_report(request.items, standard, args.material or request.material, options)

    if args.format == 'json':
        print(to_json(report))
    else:
        print(to_markdown(report))

    if args.save_json:
        save_report_json(report, args.save_json)
        print(f"\nSaved report: {args.save_json}", file=sys.stderr)
    return 0


def _run_single(args, parser) -> int:
    if args.size is None or args.length is None:
        parser.error("size and length are required unless --batch or --nut is given")

    standard = resolve_standard(args.standard) if args.standard else StandardFamily.METRIC
    spec = FastenerSpec(
        size=args.size,
        length=args.length,
        standard=standard,
        material=args.material,
        grade=args.grade,
        full_thread=args.full_thread,
    )

    validation = None
    if args.validate:
        validation = validate_bolt_spec(spec.size, spec.length, spec.standard)
        if args.format != 'json':
            for msg in validation.messages:
                print(f"  {msg.severity.value.upper()}: {msg.message}", file=sys.stderr)

    if args.format == 'markdown':
        options = EstimateOptions(grade=spec.grade, full_thread=spec.full_thread)
        report = build_report(
            [{'size': spec.size, 'length': spec.length, 'quantity': 1}],
            spec.standard, spec.material, options
        )
        print(to_markdown(report, validation))
        return 0

    result = estimate_from_spec(spec)
    if args.format == 'json':
        print(to_json(result, spec=spec, validation=validation))
    else:
        print(to_summary(result, spec))
    return 0


def main(argv=None) -> int:
    """Main CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        if args.nut:
            return _run_nut(args)
        if args.batch:
            return _run_batch(args)
        return _run_single(args, parser)
    except (BoltWeightError, FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
