import os

import numpy as np
import plotly.graph_objs as go

from kmeans_parallel.Geometry.point import Point


def load_dataset(file_path, replication_factor=1, delimiter=","):
    """
    Read one ``x<delimiter>y`` pair per line. Each parsed point is appended
    ``replication_factor`` times, all copies sharing the same instance.
    """
    if replication_factor < 1:
        raise ValueError(f"replication_factor must be at least 1, got {replication_factor}")
    if not os.path.isfile(file_path):
        raise FileNotFoundError(f"No dataset file at {file_path}")

    dataset = []
    with open(file_path) as f:
        for line_no, line in enumerate(f, start=1):
            line = line.strip()
            if not line:
                continue
            tokens = line.split(delimiter)
            try:
                point = Point(float(tokens[0]), float(tokens[1]))
            except (IndexError, ValueError) as e:
                raise ValueError(f"{file_path}:{line_no}: expected 'x{delimiter}y', got {line!r}") from e
            dataset.extend([point] * replication_factor)
    return dataset


def initialize_random_centers(k, lower_bound=0, upper_bound=1_000_000, seed=None):
    """Draw ``k`` centers uniformly in ``[lower_bound, upper_bound)`` on both axes."""
    if k <= 0:
        raise ValueError(f"k must be positive, got {k}")
    rng = np.random.default_rng(seed)
    coords = rng.uniform(lower_bound, upper_bound, size=(k, 2))
    return [Point(float(x), float(y)) for x, y in coords]


def plot_clusters(dataset, centers, file_name):
    # Replicated datasets repeat each point many times, only draw it once
    unique = np.array(list(dict.fromkeys(dataset)), dtype=np.float64).reshape(-1, 2)
    center_arr = np.array(centers, dtype=np.float64).reshape(-1, 2)

    fig = go.Figure()
    fig.add_trace(
        go.Scatter(x=unique[:, 0], y=unique[:, 1], mode="markers", name="points", marker=dict(size=4))
    )
    fig.add_trace(
        go.Scatter(
            x=center_arr[:, 0],
            y=center_arr[:, 1],
            mode="markers",
            name="centers",
            marker=dict(size=12, symbol="x", color="red"),
        )
    )
    fig.update_xaxes(title_text="x")
    fig.update_yaxes(title_text="y")
    fig.update_layout(height=600, width=800)
    fig.write_html(file_name)


def print_centers(centers, indent=0):
    for i, center in enumerate(centers):
        t = "\t" * indent
        print(f"{t}{i}: ({center.x}, {center.y})")
