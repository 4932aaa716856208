import logging
import threading
from concurrent.futures import FIRST_EXCEPTION, ThreadPoolExecutor, wait
from enum import Enum
from typing import Callable, List, Optional, Sequence

import numpy as np

from kmeans_parallel.Clustering.partition import partition
from kmeans_parallel.config import ClusterConfig
from kmeans_parallel.Geometry.point import Point, distance, mean, nearest_index

# Rows classified per numpy distance matrix, bounds memory at CHUNK_SIZE * k
CHUNK_SIZE = 65536


class ExecutionMode(Enum):
    SEQUENTIAL = "sequential"
    CONCURRENT = "concurrent"


class ConvergenceError(RuntimeError):
    """Raised when a configured iteration cap is reached before convergence."""

    def __init__(self, message: str, centers: List[Point], iterations: int):
        super().__init__(message)
        self.centers = centers
        self.iterations = iterations


def total_shift(old_centers: Sequence[Point], new_centers: Sequence[Point]) -> float:
    """Sum of the distances each center moved between two iterations."""
    accum_dist = 0.0
    for old, new in zip(old_centers, new_centers):
        accum_dist += distance(old, new)
    return accum_dist


def classify(points: Sequence[Point], center_array: np.ndarray) -> np.ndarray:
    """
    Nearest center index for every point, vectorized over ``center_array``
    (shape ``(k, 2)``). ``argmin`` returns the first minimum, the same
    tie-break as :func:`nearest_index`.
    """
    indexes = np.empty(len(points), dtype=np.intp)
    for start in range(0, len(points), CHUNK_SIZE):
        coords = np.array(points[start : start + CHUNK_SIZE], dtype=np.float64)
        diff = coords[:, np.newaxis, :] - center_array[np.newaxis, :, :]
        sq = diff * diff
        dists = np.sqrt(sq[:, :, 0] + sq[:, :, 1])
        indexes[start : start + len(coords)] = np.argmin(dists, axis=1)
    return indexes


class ClusterEngine:
    """
    Iterates nearest-center assignment and mean reduction until the centers
    stop moving.

    Two strategies compute an iteration: a sequential scan over the dataset,
    and a concurrent one that deals the dataset into ``config.task_count``
    partitions classified on a pool of ``config.worker_count`` threads. Both
    yield the same centers on inputs without distance ties.
    """

    def __init__(self, config: Optional[ClusterConfig] = None):
        self.config = config if config is not None else ClusterConfig()
        self.iterations = 0
        self.shifts = []
        self._merge_lock = threading.Lock()

    def sequential_step(self, dataset: Sequence[Point], centers: Sequence[Point]) -> List[Point]:
        clusters = [[] for _ in range(len(centers))]
        for point in dataset:
            clusters[nearest_index(point, centers)].append(point)
        return [mean(cluster) for cluster in clusters]

    def _classify_and_merge(self, bucket, center_array, clusters):
        # Classification only reads shared state, the merge is the critical section
        indexes = classify(bucket, center_array).tolist()
        with self._merge_lock:
            for point, index in zip(bucket, indexes):
                clusters[index].append(point)

    def concurrent_step(
        self,
        dataset: Sequence[Point],
        centers: Sequence[Point],
        executor: ThreadPoolExecutor,
    ) -> List[Point]:
        clusters = [[] for _ in range(len(centers))]
        center_array = np.array(centers, dtype=np.float64).reshape(-1, 2)
        center_array.setflags(write=False)

        futures = [
            executor.submit(self._classify_and_merge, bucket, center_array, clusters)
            for bucket in partition(dataset, self.config.task_count)
        ]
        done, pending = wait(futures, return_when=FIRST_EXCEPTION)
        for future in pending:
            future.cancel()
        wait(pending)
        for future in done:
            error = future.exception()
            if error is not None:
                logging.error(f"Classification task failed, aborting run: {error!r}")
                raise error

        return [mean(cluster) for cluster in clusters]

    def run(
        self,
        dataset: Sequence[Point],
        initial_centers: Sequence[Point],
        k: int,
        mode=ExecutionMode.CONCURRENT,
        callback: Optional[Callable[[int, List[Point], float], None]] = None,
    ) -> List[Point]:
        """
        Run the convergence loop and return the final center set.

        :param dataset: Points to cluster, not modified.
        :param initial_centers: Exactly ``k`` starting centers.
        :param k: Number of clusters.
        :param mode: :class:`ExecutionMode` or its string value.
        :param callback: Called as ``callback(iteration, centers, shift)`` after each iteration.
        :return: List of ``k`` centers.
        """
        if k <= 0:
            raise ValueError(f"k must be positive, got {k}")
        if len(initial_centers) != k:
            raise ValueError(f"Expected {k} initial centers, got {len(initial_centers)}")
        if len(dataset) == 0:
            raise ValueError("Cannot cluster an empty dataset")
        mode = ExecutionMode(mode)

        self.iterations = 0
        self.shifts = []
        centers = list(initial_centers)
        logging.info(
            f"Clustering {len(dataset)} points into {k} clusters ({mode.value}, "
            f"tasks={self.config.task_count}, workers={self.config.worker_count})"
        )

        if mode is ExecutionMode.SEQUENTIAL:
            return self._converge(lambda c: self.sequential_step(dataset, c), centers, callback)

        with ThreadPoolExecutor(
            max_workers=self.config.worker_count, thread_name_prefix="kmeans-worker"
        ) as executor:
            return self._converge(
                lambda c: self.concurrent_step(dataset, c, executor), centers, callback
            )

    def _converge(self, step, centers, callback):
        while True:
            new_centers = step(centers)
            shift = total_shift(centers, new_centers)
            centers = new_centers
            self.iterations += 1
            self.shifts.append(shift)
            logging.debug(f"Iteration {self.iterations}: total shift {shift}")
            if callback is not None:
                callback(self.iterations, centers, shift)

            if shift <= self.config.tolerance:
                logging.info(f"Converged after {self.iterations} iterations")
                return centers
            if (
                self.config.max_iterations is not None
                and self.iterations >= self.config.max_iterations
            ):
                raise ConvergenceError(
                    f"No convergence after {self.iterations} iterations (last shift {shift})",
                    centers,
                    self.iterations,
                )


def cluster(
    dataset: Sequence[Point],
    initial_centers: Sequence[Point],
    k: int,
    mode=ExecutionMode.CONCURRENT,
    config: Optional[ClusterConfig] = None,
) -> List[Point]:
    return ClusterEngine(config).run(dataset, initial_centers, k, mode)
