import argparse
import csv
import sys

from jarvis_hull.jarvis_march import (
    FirstAvailableSampler, HullError, Point, RandomSampler, find_convex_hull)


def read_points(lines):
    """Reads x,y rows; blank lines and a non-numeric header row are skipped."""
    points = []
    first_row = True
    for line_no, row in enumerate(csv.reader(lines), start=1):
        if not row or all(not cell.strip() for cell in row):
            continue
        header_allowed, first_row = first_row, False
        if len(row) != 2:
            raise ValueError(f"line {line_no}: expected 2 columns, got {len(row)}")
        try:
            x, y = float(row[0]), float(row[1])
        except ValueError:
            if header_allowed:
                continue
            raise ValueError(f"line {line_no}: not a pair of numbers: {','.join(row)}") from None
        points.append(Point(x, y))
    return points


def format_coordinate(value):
    # Exact round trip, integral values without the trailing .0
    if value.is_integer():
        return str(int(value))
    return repr(value)


def main(argv=None):
    ap = argparse.ArgumentParser(prog="jarvis-hull",
                                 description="Convex hull of 2D points by gift wrapping (Jarvis march).")
    ap.add_argument("path", help="CSV file of x,y rows, or - for stdin")
    ap.add_argument("--seed", type=int, default=10, help="Seed of the candidate sampler")
    ap.add_argument("--deterministic", action="store_true",
                    help="Start every round from the first available candidate instead of a random one")
    ap.add_argument("--animate", action="store_true", help="Show the wrap as a matplotlib animation")
    ap.add_argument("--interval", type=int, default=700, help="Milliseconds between animation frames")
    args = ap.parse_args(argv)

    sampler = FirstAvailableSampler() if args.deterministic else RandomSampler(args.seed)

    try:
        if args.path == "-":
            points = read_points(sys.stdin)
        else:
            with open(args.path, newline="") as f:
                points = read_points(f)
        hull = find_convex_hull(points, sampler)
    except (OSError, ValueError, HullError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    for p in hull:
        print(f"{format_coordinate(p.x)},{format_coordinate(p.y)}")

    if args.animate:
        from jarvis_hull.jarvis_march_vis_animator import show_hull_animation
        # Fresh sampler so the animation replays the same wrap
        sampler = FirstAvailableSampler() if args.deterministic else RandomSampler(args.seed)
        show_hull_animation(points, args.interval, sampler)
    return 0
