from typing import List, Sequence, TypeVar

V = TypeVar("V")


def partition(dataset: Sequence[V], parts: int) -> List[List[V]]:
    """
    Deal ``dataset`` round-robin into ``parts`` buckets: element ``i`` lands in
    bucket ``i % parts``. Always returns exactly ``parts`` buckets, trailing ones
    are empty when the dataset is shorter than ``parts``.

    Round-robin rather than contiguous slices gives every worker a similar
    cross-section of the data even when the input is sorted or replicated.
    """
    if parts < 1:
        raise ValueError(f"Number of parts must be at least 1, got {parts}")
    buckets = [[] for _ in range(parts)]
    for i, item in enumerate(dataset):
        buckets[i % parts].append(item)
    return buckets
