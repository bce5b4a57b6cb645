import random
import sys
from typing import NamedTuple


class HullError(Exception):
    """Base class for failures of a single hull computation."""


class EmptyPointsError(HullError, ValueError):
    pass


class NoCandidateError(HullError):
    pass


class MismatchedCoordinatesError(HullError, ValueError):
    pass


class Point(NamedTuple):
    x: float
    y: float


class Triplet(NamedTuple):
    right_turn: bool
    collinear: bool
    determinant: float
    dot_product: float


def orientation(p1, p2, p3):
    """
    Classifies the walk p1 -> p2 -> p3, with p2 as the pivot.

    a = p1 - p2 and b = p3 - p2 are the two edges leaving the pivot.
    Returns a Triplet:
        det > 0             right turn
        det == 0, dot < 0   right turn, collinear (straight line through p2)
        det == 0, dot > 0   left turn, collinear (the walk folds back)
        det < 0             left turn
    When p2 coincides with p1 or p3 (det == 0, dot == 0) the triplet is
    reported like a fold back: left turn, collinear.
    """
    x1, y1 = p1
    x2, y2 = p2
    x3, y3 = p3
    ax, ay = x1 - x2, y1 - y2
    bx, by = x3 - x2, y3 - y2
    det = ax * by - bx * ay
    dot = ax * bx + ay * by
    if det > 0:
        return Triplet(True, False, det, dot)
    elif det < 0:
        return Triplet(False, False, det, dot)
    elif dot < 0:
        return Triplet(True, True, det, dot)
    else:
        return Triplet(False, True, det, dot)


def find_leftmost(points):
    # First occurrence wins ties on x
    if len(points) == 0:
        raise EmptyPointsError("cannot find the leftmost point of an empty point set")
    leftmost = 0
    for i in range(1, len(points)):
        if points[i][0] < points[leftmost][0]:
            leftmost = i
    return leftmost


class FirstAvailableSampler:
    """Proposes the lowest index that is not excluded."""

    def sample_excluding(self, size, exclusions):
        for index in range(size):
            if index not in exclusions:
                return index
        raise NoCandidateError(f"no candidate available among {size} points")


class RandomSampler:
    """Proposes a uniformly random index that is not excluded."""

    def __init__(self, seed=None):
        self.rng = random.Random(seed)

    def sample_excluding(self, size, exclusions):
        allowed = [index for index in range(size) if index not in exclusions]
        if not allowed:
            raise NoCandidateError(f"no candidate available among {size} points")
        return self.rng.choice(allowed)


def _state(points, hull, anchor, candidate, checking, all_collinear, complete, status):
    return {
        'all_points': points,
        'hull_indices': list(hull),
        'anchor': anchor,
        'candidate': candidate,
        'checking': checking,
        'all_collinear': all_collinear,
        'complete': complete,
        'status': status,
    }


def jarvis_march_trace(points, sampler=None, detailed=False):
    """
    Wraps the points starting at the leftmost one and yields states.

    points: a list of distinct (x, y) points, at least two of them.
    sampler: chooses the candidate each round starts from
             (FirstAvailableSampler when omitted).
    detailed: also yield a state after every orientation test, for animation.

    Every state is a dict; the last one has 'complete' set and carries the
    closed 'hull_indices' together with the 'all_collinear' flag that
    finalize_hull needs.
    """
    if sampler is None:
        sampler = FirstAvailableSampler()
    n = len(points)
    start = find_leftmost(points)
    hull = [start]
    visited = {start}
    all_collinear = True

    # Points straight below the start lie behind the first edge of the wrap
    start_x, start_y = points[start]
    behind_start = {i for i, (x, y) in enumerate(points) if x == start_x and y < start_y}

    yield _state(points, hull, start, None, None, all_collinear, False,
                 f"Start at leftmost point {points[start]}.")

    while True:
        anchor = hull[-1]
        candidate = sampler.sample_excluding(n, {anchor})
        wrapped = visited | behind_start if len(hull) == 1 else visited

        if detailed:
            yield _state(points, hull, anchor, candidate, None, all_collinear, False,
                         f"Initial candidate for next: {points[candidate]}")

        for test_point in range(n):
            if test_point == candidate or test_point == anchor:
                continue
            triplet = orientation(points[anchor], points[test_point], points[candidate])
            previous = candidate

            if triplet.right_turn:
                candidate = test_point
            # Do not settle on an already wrapped point when a collinear one
            # further along is still open (the start stays open for closure)
            elif (triplet.collinear and candidate in wrapped
                  and (test_point not in visited or test_point == hull[0])):
                candidate = test_point

            if not triplet.collinear:
                all_collinear = False

            if detailed:
                if candidate != previous:
                    status = f"New best candidate: {points[candidate]} (was {points[previous]})"
                else:
                    status = f"{points[test_point]} does not beat candidate {points[candidate]}"
                yield _state(points, hull, anchor, candidate, test_point, all_collinear, False, status)

        hull.append(candidate)

        if candidate in visited:
            if candidate == hull[0]:
                hull.pop()
            yield _state(points, hull, anchor, None, None, all_collinear, True,
                         f"Hull complete! Found {len(hull)} points.")
            return

        visited.add(candidate)
        yield _state(points, hull, candidate, None, None, all_collinear, False,
                     f"Point {points[candidate]} added to hull. Searching next...")


def finalize_hull(points, hull_indices, all_collinear):
    """
    Turns the wrapped index sequence into the hull boundary.

    For a fully collinear set the wrap walks out to the far end and back,
    and the order of that walk depends on where the start sits on the line.
    Every point of such a set lies on the hull, so the boundary is rebuilt
    as the walk along the line: from the start when the start is an end of
    the segment, otherwise from the end with the lowest (x, y).
    """
    if not all_collinear:
        return list(hull_indices)

    sx, sy = points[hull_indices[0]]
    fx, fy = max(points, key=lambda p: (p[0] - sx) ** 2 + (p[1] - sy) ** 2)
    dx, dy = fx - sx, fy - sy

    def along(i):
        return (points[i][0] - sx) * dx + (points[i][1] - sy) * dy

    indices = range(len(points))
    if min(along(i) for i in indices) < 0:
        # start lies inside the segment
        return sorted(indices, key=lambda i: (points[i][0], points[i][1]))
    return sorted(indices, key=along)


def find_convex_hull(points, sampler=None):
    """
    Returns the convex hull of points as a list of Point, in wrap order
    starting at the leftmost point. Coincident points count once.
    """
    distinct = list(dict.fromkeys(Point(*p) for p in points))

    if len(distinct) == 0:
        print("No data points to analyse", file=sys.stderr)
        return []
    if len(distinct) == 1:
        print("Only one data point to analyse", file=sys.stderr)
        return [distinct[0]]
    if len(distinct) == 2:
        print("Only two data points to analyse", file=sys.stderr)
        leftmost = find_leftmost(distinct)
        return [distinct[leftmost], distinct[1 - leftmost]]

    for state in jarvis_march_trace(distinct, sampler):
        pass
    indices = finalize_hull(distinct, state['hull_indices'], state['all_collinear'])
    return [distinct[i] for i in indices]


def jarvis_march(x, y, seed=10, return_y=False):
    """
    Convex hull of the points (x[i], y[i]).

    Returns the x coordinates of the hull points in hull order, or the pair
    (hull_x, hull_y) when return_y is set. The candidate sampler is seeded
    with seed for this call only.
    """
    x = list(x)
    y = list(y)
    if len(x) != len(y):
        raise MismatchedCoordinatesError(
            f"x and y must have the same length, got {len(x)} and {len(y)}")

    points = [Point(float(px), float(py)) for px, py in zip(x, y)]
    hull = find_convex_hull(points, RandomSampler(seed))

    hull_x = [p.x for p in hull]
    if return_y:
        return hull_x, [p.y for p in hull]
    return hull_x
