"""
vecangle — rank every pair of vectors in a file by the angle between them.

    vecangle                  Read test.txt from the current directory
    vecangle vectors.txt      Read vectors.txt

Input: one vector per line, whitespace-separated floats, all lines the
same length. Output: one line per pair, smallest angle first:

    𝜃([7, 8, 9], [13, 14, 15]) = 0.015836
"""

import argparse
import sys

from vecangle.config import CONFIG
from vecangle.errors import VecAngleError


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog='vecangle',
        description='Rank all unique pairs of vectors in a file by angle.',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
examples:
  vecangle                 Read test.txt
  vecangle vectors.txt     Read vectors.txt
""",
    )
    parser.add_argument('path', nargs='?', default=CONFIG['input']['default_file'],
                        help=f"Vector file (default: {CONFIG['input']['default_file']})")

    args = parser.parse_args(argv)

    from vecangle.pipeline import run_pipeline
    try:
        run_pipeline(args.path)
    except VecAngleError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
