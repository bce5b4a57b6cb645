import matplotlib.pyplot as plt
import matplotlib.animation as animation

from jarvis_hull.jarvis_march import Point, finalize_hull, find_leftmost, jarvis_march_trace


def collect_frames(points, sampler=None):
    """
    Runs the detailed wrap over points and returns the list of frames.
    Coincident points are collapsed first. Each frame is a trace state with
    two extra keys for drawing:
        'hull_points': hull points found so far
        'final_hull_path': the closed, finalized hull (last frame only)
    """
    distinct = list(dict.fromkeys(Point(*p) for p in points))

    if len(distinct) < 3:
        # No wrap for fewer than three points, the points are the hull
        if len(distinct) == 2:
            leftmost = find_leftmost(distinct)
            distinct = [distinct[leftmost], distinct[1 - leftmost]]
        return [{
            'all_points': distinct,
            'hull_indices': list(range(len(distinct))),
            'anchor': None,
            'candidate': None,
            'checking': None,
            'all_collinear': True,
            'complete': True,
            'status': f"Hull is points themselves (n={len(distinct)}<3)." if distinct else "No points.",
            'hull_points': distinct[:],
            'final_hull_path': distinct[:] + ([distinct[0]] if len(distinct) == 2 else []),
        }]

    frames = []
    for state in jarvis_march_trace(distinct, sampler, detailed=True):
        frame = dict(state)
        frame['hull_points'] = [distinct[i] for i in state['hull_indices']]
        frame['final_hull_path'] = None
        if state['complete']:
            final = [distinct[i] for i in finalize_hull(distinct, state['hull_indices'], state['all_collinear'])]
            frame['hull_points'] = final
            frame['final_hull_path'] = final + [final[0]]
        frames.append(frame)
    return frames


def animate_hull(points, interval=700, sampler=None):
    """
    Builds a matplotlib animation of the Jarvis march over points.
    Returns (fig, ani); keep a reference to ani or it stops playing.
    """
    frames = collect_frames(points, sampler)
    all_points = frames[0]['all_points']

    fig, ax = plt.subplots(figsize=(8, 8))

    scatter_all_points = ax.scatter([], [], c='blue', s=50, label="All Points")
    hull_line_plot, = ax.plot([], [], 'r-', lw=2, label="Convex Hull")
    candidate_line_plot, = ax.plot([], [], 'g--', lw=1.5, label="Anchor-to-Candidate")
    checking_line_plot, = ax.plot([], [], 'k:', lw=1, label="Anchor-to-Checking")
    anchor_marker, = ax.plot([], [], 'o', ms=12, mec='orange', mfc='None', mew=2, label="Anchor")
    candidate_marker, = ax.plot([], [], '*', ms=12, mec='green', mfc='None', mew=2, label="Candidate Next")
    checking_marker, = ax.plot([], [], 'x', ms=10, color='gray', mew=2, label="Checking Point")

    status_text_ax = ax.text(0.02, 0.98, "", transform=ax.transAxes, ha="left", va="top", fontsize=9,
                             bbox=dict(boxstyle="round,pad=0.3", fc="wheat", alpha=0.7))

    artists = (scatter_all_points, hull_line_plot, candidate_line_plot, checking_line_plot,
               anchor_marker, candidate_marker, checking_marker, status_text_ax)

    def init_animation():
        if all_points:
            ax.set_xlim(min(p[0] for p in all_points) - 1, max(p[0] for p in all_points) + 1)
            ax.set_ylim(min(p[1] for p in all_points) - 1, max(p[1] for p in all_points) + 1)
            scatter_all_points.set_offsets([(p[0], p[1]) for p in all_points])
        ax.set_aspect('equal', adjustable='box')
        ax.legend(fontsize='small', loc='lower right')
        ax.set_title("Jarvis March (Gift Wrapping) Visualization")

        for line in artists[1:-1]:
            line.set_data([], [])
        status_text_ax.set_text("Initializing...")
        return artists

    def update_animation(frame):
        hull_pts = frame['hull_points']
        final_hull_path = frame['final_hull_path']

        if final_hull_path:
            hull_line_plot.set_data([p[0] for p in final_hull_path], [p[1] for p in final_hull_path])
            hull_line_plot.set_color('purple')
            hull_line_plot.set_linewidth(3)
        else:
            hull_line_plot.set_data([p[0] for p in hull_pts], [p[1] for p in hull_pts])
            hull_line_plot.set_color('red')
            hull_line_plot.set_linewidth(2)

        anchor = frame['all_points'][frame['anchor']] if frame['anchor'] is not None else None
        candidate = frame['all_points'][frame['candidate']] if frame['candidate'] is not None else None
        checking = frame['all_points'][frame['checking']] if frame['checking'] is not None else None

        if anchor:
            anchor_marker.set_data([anchor[0]], [anchor[1]])
        else:
            anchor_marker.set_data([], [])

        if anchor and candidate:
            candidate_line_plot.set_data([anchor[0], candidate[0]], [anchor[1], candidate[1]])
            candidate_marker.set_data([candidate[0]], [candidate[1]])
        else:
            candidate_line_plot.set_data([], [])
            candidate_marker.set_data([], [])

        if anchor and checking:
            checking_line_plot.set_data([anchor[0], checking[0]], [anchor[1], checking[1]])
            checking_marker.set_data([checking[0]], [checking[1]])
        else:
            checking_line_plot.set_data([], [])
            checking_marker.set_data([], [])

        status_text_ax.set_text(frame['status'])
        return artists

    ani = animation.FuncAnimation(fig,
                                  update_animation,
                                  frames=frames,
                                  init_func=init_animation,
                                  blit=True,
                                  interval=interval,
                                  repeat=False)
    return fig, ani


def show_hull_animation(points, interval=700, sampler=None):
    fig, ani = animate_hull(points, interval, sampler)
    plt.tight_layout()
    plt.show()
    return ani
