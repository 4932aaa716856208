import os

# Defaults of the original benchmark setup, overridable from the environment
TASK_COUNT = int(os.environ.get("KMEANS_TASK_COUNT", 30))
WORKER_COUNT = int(os.environ.get("KMEANS_WORKER_COUNT", os.cpu_count() or 1))
REPLICATION_FACTOR = int(os.environ.get("KMEANS_REPLICATION_FACTOR", 200))


class ClusterConfig:
    """
    Run configuration of the cluster engine.

    :param task_count: Number of classification tasks (dataset partitions) per iteration.
    :param worker_count: Size of the worker pool executing those tasks.
    :param replication_factor: Copies of each input record made by the dataset loader.
    :param max_iterations: Optional cap on iterations, ``None`` loops until converged.
    :param tolerance: Total center shift at or below which the run counts as converged.
        ``0.0`` requires the centers to be exactly unchanged.
    """

    def __init__(
        self,
        task_count: int = None,
        worker_count: int = None,
        replication_factor: int = None,
        max_iterations: int = None,
        tolerance: float = 0.0,
    ):
        self.task_count = TASK_COUNT if task_count is None else task_count
        self.worker_count = WORKER_COUNT if worker_count is None else worker_count
        self.replication_factor = (
            REPLICATION_FACTOR if replication_factor is None else replication_factor
        )
        self.max_iterations = max_iterations
        self.tolerance = tolerance
        self._validate()

    def _validate(self):
        if self.task_count < 1:
            raise ValueError(f"task_count must be at least 1, got {self.task_count}")
        if self.worker_count < 1:
            raise ValueError(f"worker_count must be at least 1, got {self.worker_count}")
        if self.replication_factor < 1:
            raise ValueError(
                f"replication_factor must be at least 1, got {self.replication_factor}"
            )
        if self.max_iterations is not None and self.max_iterations < 1:
            raise ValueError(
                f"max_iterations must be at least 1, got {self.max_iterations}"
            )
        if self.tolerance < 0:
            raise ValueError(f"tolerance must not be negative, got {self.tolerance}")

    def __repr__(self):
        return (
            f"ClusterConfig(task_count={self.task_count}, worker_count={self.worker_count}, "
            f"replication_factor={self.replication_factor}, "
            f"max_iterations={self.max_iterations}, tolerance={self.tolerance})"
        )
