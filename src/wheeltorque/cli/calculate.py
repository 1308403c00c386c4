"""
Command-line interface for drive motor sizing.
"""

import argparse
import logging
import sys

from ..enums import WheelType
from ..calculator.constants import DEFAULT_CONSTANTS
from ..calculator.core import evaluate
from ..calculator.inputs import parse_inputs
from ..calculator.output import to_json, to_markdown, to_summary
from ..io.loaders import ConstantsError, load_constants_json

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wheeltorque",
        description="Calculate drive motor torque and speed for Mecanum, Omni and Kiwi robots",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # 10 kg Mecanum robot, 1 m/s, 100 mm wheels, 2 s to full speed, 4 motors
  wheeltorque --mass 10 --vmax 1 --wheel-diameter 100 --accel-time 2 --motors 4

  # Omni wheels with rollers at 45°
  wheeltorque --wheel-type omni --alignment 45 --mass 10 --vmax 1 \\
      --wheel-diameter 100 --accel-time 2 --motors 4

  # Kiwi drive (always 3 motors)
  wheeltorque --wheel-type kiwi --mass 5 --vmax 0.8 --wheel-diameter 60 \\
      --accel-time 1 --motors 3

  # Custom physics and JSON output
  wheeltorque --constants my_floor.json --format json ...
        """
    )

    parser.add_argument(
        '--wheel-type',
        choices=[t.value for t in WheelType],
        default=WheelType.MECANUM.value,
        help='Wheel layout (default: mecanum)'
    )
    parser.add_argument('--mass', help='Robot mass (kg)')
    parser.add_argument('--vmax', help='Target top speed (m/s)')
    parser.add_argument('--wheel-diameter', help='Wheel diameter (mm)')
    parser.add_argument('--accel-time', help='Time to reach top speed (s)')
    parser.add_argument('--motors', help='Number of drive motors')
    parser.add_argument(
        '--alignment',
        help='Omni roller alignment angle in degrees (omni/kiwi only, default 0)'
    )
    parser.add_argument(
        '--kiwi',
        action='store_true',
        help='Kiwi drive layout (same as --wheel-type kiwi)'
    )
    parser.add_argument(
        '--constants',
        metavar='FILE',
        help='JSON file overriding g, mu, eta, safetyFactor'
    )
    parser.add_argument(
        '--format',
        choices=['summary', 'json', 'markdown'],
        default='summary',
        help='Output format (default: summary)'
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable debug logging'
    )
    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    wheel_type = WheelType(args.wheel_type)
    if args.kiwi:
        if not wheel_type.is_omni:
            logger.info(f"--kiwi implies omni wheels (was {wheel_type.value})")
        wheel_type = WheelType.KIWI

    constants = DEFAULT_CONSTANTS
    if args.constants:
        try:
            constants = load_constants_json(args.constants)
        except ConstantsError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

    inputs = parse_inputs({
        "mass": args.mass,
        "vmax": args.vmax,
        "wheelDiameter": args.wheel_diameter,
        "accelTime": args.accel_time,
        "numMotors": args.motors,
        "alignment": args.alignment,
        "kiwiDrive": wheel_type is WheelType.KIWI,
    })

    validation, result = evaluate(inputs, wheel_type, constants)
    if result is None:
        print("Invalid inputs:", file=sys.stderr)
        for field, message in validation.errors.items():
            print(f"  {field}: {message}", file=sys.stderr)
        return 1

    if args.format == 'json':
        print(to_json(result))
    elif args.format == 'markdown':
        print(to_markdown(result, inputs))
    else:
        print(to_summary(result))
    return 0


if __name__ == '__main__':
    sys.exit(main())
