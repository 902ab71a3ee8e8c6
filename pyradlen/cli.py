"""
Command-line interface of pyRadLen.

Usage examples::

    pyradlen --atomicid 82,207.2 --density 11.35
    pyradlen --element Pb
    pyradlen --material pbwo4 --breakdown
    pyradlen --file plastic.dat --density 1.05
    pyradlen --dictionary
"""

import argparse
import logging
import sys
from typing import List, Optional, Tuple

from tabulate import tabulate

from pyradlen.errors import RadiationLengthError
from pyradlen.io.materials import MaterialDictionary
from pyradlen.physics.radiation_length import contributions
from pyradlen.request import RadiationLengthRequest

logger = logging.getLogger(__name__)

FILE_FORMAT_HELP = """\
If --file is chosen, the program reads the input data file and calculates the
radiation length of the composite material it describes. The data file is an
ASCII file formatted in three columns, respectively containing the atomic
number (Z), the atomic mass (A) and the mass fraction (%). For example:

        1        1.008        30
        6       12.012        60
        8       16.002        10

describes a material composed of H, C and O with mass fractions of 30%, 60%
and 10%, respectively. Blank lines and lines starting with '#' are ignored.
"""

UNDEFINED_MATERIAL_MESSAGE = """
ERROR:
\t- Use one of the options --file, --material, --atomicid or --element to specify a material.
\t- Or use option --dictionary to print a list of pre-defined materials.
"""


def parse_atomic_id(values: List[str]) -> Tuple[float, float]:
    """
    Parse the ``--atomicid`` values, given as ``Z A`` or ``Z,A``.

    :param values: Raw command-line tokens.
    :returns: (Z, A) as floats; Z is validated later.
    :raises argparse.ArgumentTypeError: If there are not exactly two numbers.
    """
    tokens = " ".join(values).replace(",", " ").split()
    if len(tokens) != 2:
        raise argparse.ArgumentTypeError(f"--atomicid expects Z and A, got: {' '.join(values)}")
    try:
        return float(tokens[0]), float(tokens[1])
    except ValueError:
        raise argparse.ArgumentTypeError(f"--atomicid expects two numbers, got: {' '.join(values)}") from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pyradlen",
        description="A radiation length calculator for materials (Tsai parameterization).",
        epilog=FILE_FORMAT_HELP,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--file", metavar="FILE",
                        help="Material composition data file; --material, --atomicid and --element are ignored.")
    parser.add_argument("--material", metavar="MATERIAL_NAME",
                        help="A pre-defined material in the software's dictionary.")
    parser.add_argument("--atomicid", metavar="Z,A", nargs="+",
                        help="Atomic number and atomic mass of a mono-nucleus material.")
    parser.add_argument("--element", metavar="ELEMENT",
                        help="Element name, symbol or atomic number, with its standard atomic mass.")
    parser.add_argument("--density", type=float, metavar="DENSITY",
                        help="Density of the material in g/cm3.")
    parser.add_argument("--dictionary", action="store_true",
                        help="Print the software's dictionary of pre-defined materials.")
    parser.add_argument("--breakdown", action="store_true",
                        help="Print the per-element contributions to the inverse radiation length.")
    parser.add_argument("--normalize", action="store_true",
                        help="Rescale the mass fractions so that they sum to 1.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return parser


def request_from_args(args: argparse.Namespace) -> RadiationLengthRequest:
    """
    Build a :class:`~pyradlen.request.RadiationLengthRequest` from parsed arguments.

    :raises argparse.ArgumentTypeError: If --atomicid is malformed.
    """
    atomic_number = atomic_mass = None
    if args.atomicid is not None:
        atomic_number, atomic_mass = parse_atomic_id(args.atomicid)
    return RadiationLengthRequest(
        atomic_number=atomic_number,
        atomic_mass=atomic_mass,
        element=args.element,
        material=args.material,
        composition_file=args.file,
        density=args.density,
        print_dictionary=args.dictionary,
        normalize=args.normalize,
    )


def main(argv: Optional[List[str]] = None) -> int:
    """
    Entry point of the ``pyradlen`` command.

    :param argv: Arguments, defaults to ``sys.argv[1:]``.
    :returns: Process exit code (0 on success, 1 on error).
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        request = request_from_args(args)
        try:
            mode = request.mode
        except ValueError:
            print(UNDEFINED_MATERIAL_MESSAGE, file=sys.stderr)
            parser.print_usage(sys.stderr)
            return 1

        if mode == "dictionary":
            MaterialDictionary().display()
            return 0

        if mode == "composition":
            print(f"\nInput material composition data file: {request.composition_file}.")
        result = request.compute()
        print()
        print(result.summary())

        if args.breakdown:
            table = result.composition if result.composition is not None else request.composition()
            df = contributions(table)
            print(tabulate(
                df,
                headers=["Z", "A", "w", "X0 [g/cm2]", "w/X0 [cm2/g]", "share"],
                tablefmt="fancy_grid",
                showindex=False,
                floatfmt=("g", "g", ".4g", ".4g", ".4g", ".3f"),
            ))
        return 0

    except (RadiationLengthError, ValueError, argparse.ArgumentTypeError, OSError) as e:
        logger.debug("Computation failed", exc_info=True)
        print(f"ERROR: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
