from jarvis_hull.jarvis_march import (
    EmptyPointsError,
    FirstAvailableSampler,
    HullError,
    MismatchedCoordinatesError,
    NoCandidateError,
    Point,
    RandomSampler,
    Triplet,
    finalize_hull,
    find_convex_hull,
    find_leftmost,
    jarvis_march,
    jarvis_march_trace,
    orientation,
)

__version__ = "0.1.0"
