from kmeans_parallel.version import __version__
from kmeans_parallel.config import ClusterConfig
from kmeans_parallel.Geometry.point import Point
from kmeans_parallel.Clustering.engine import (
    ClusterEngine,
    ConvergenceError,
    ExecutionMode,
    cluster,
)
