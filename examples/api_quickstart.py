"""
API quickstart for gctk.
- Parses a small rectangle program
- Prints its extent, mirrors it about X=5, shifts it up by 20mm
- Prints the new extent and the rewritten program

Run from the repository root:
    python examples/api_quickstart.py
"""

from gctk import GcodeParser, MirrorAxis, Point3, compute_extent, format_program, mirror, translate

PROGRAM = """
G21 G90
G0 X0 Y0 Z5
G1 Z-1 F300
G1 X10 Y0
G1 X10 Y5
G1 X0 Y5
G0 Z5
M30
"""


def main() -> None:
    lines = GcodeParser().parse_program(PROGRAM)
    print("extent:", compute_extent(lines))

    mirror(lines, MirrorAxis.X, 5.0)
    translate(lines, Point3(y=20.0))
    print("extent after transform:", compute_extent(lines))
    for text in format_program(lines):
        print(text)


if __name__ == "__main__":
    main()
