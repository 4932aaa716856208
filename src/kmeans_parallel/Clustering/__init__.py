from kmeans_parallel.Clustering.partition import partition
from kmeans_parallel.Clustering.engine import (
    ClusterEngine,
    ConvergenceError,
    ExecutionMode,
    cluster,
    total_shift,
)
