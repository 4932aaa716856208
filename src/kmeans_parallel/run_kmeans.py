import argparse
import logging
import sys
import time

from tqdm import tqdm

from kmeans_parallel.Clustering.engine import ClusterEngine, ConvergenceError, ExecutionMode
from kmeans_parallel.config import REPLICATION_FACTOR, TASK_COUNT, WORKER_COUNT, ClusterConfig
from kmeans_parallel.Utils.data_utils import (
    initialize_random_centers,
    load_dataset,
    plot_clusters,
    print_centers,
)

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Parallel K-Means over 2-D points")
    parser.add_argument("input_file", type=str, help="File with one 'x,y' pair per line")
    parser.add_argument("k", type=int, help="Number of clusters")
    parser.add_argument(
        "--mode",
        type=str,
        default="concurrent",
        choices=["sequential", "concurrent", "both"],
        help="Execution strategy to run",
    )
    parser.add_argument(
        "--task_count",
        type=int,
        default=TASK_COUNT,
        help="Number of classification tasks per iteration",
    )
    parser.add_argument(
        "--worker_count",
        type=int,
        default=WORKER_COUNT,
        help="Number of worker threads",
    )
    parser.add_argument(
        "--replication_factor",
        type=int,
        default=REPLICATION_FACTOR,
        help="Copies made of every input record",
    )
    parser.add_argument(
        "--lower_bound", type=float, default=0, help="Lower bound of random centers"
    )
    parser.add_argument(
        "--upper_bound", type=float, default=1000000, help="Upper bound of random centers"
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for random centers")
    parser.add_argument(
        "--max_iterations",
        type=int,
        default=None,
        help="Stop with an error after this many iterations (default: unbounded)",
    )
    parser.add_argument(
        "--tolerance",
        type=float,
        default=0.0,
        help="Total center shift counted as converged (default: exact)",
    )
    parser.add_argument(
        "--plot", type=str, default=None, help="Write an HTML scatter of the result here"
    )
    parser.add_argument("--log_level", type=str, default="INFO", help="Logging level")
    return parser.parse_args(argv)


def run_mode(engine, dataset, centers, k, mode):
    with tqdm(desc=f"{mode.value} iterations", unit="it") as pbar:

        def on_iteration(iteration, new_centers, shift):
            pbar.update(1)
            pbar.set_postfix(shift=f"{shift:.6g}")

        start = time.time()
        final_centers = engine.run(dataset, centers, k, mode, callback=on_iteration)
    elapsed_ms = (time.time() - start) * 1000
    print(f"{mode.value.capitalize()} version")
    print(f"Time elapsed: {elapsed_ms:.0f} ms over {engine.iterations} iterations")
    print_centers(final_centers, indent=1)
    return final_centers


def main(args):
    logging.getLogger().setLevel(args.log_level.upper())
    try:
        config = ClusterConfig(
            task_count=args.task_count,
            worker_count=args.worker_count,
            replication_factor=args.replication_factor,
            max_iterations=args.max_iterations,
            tolerance=args.tolerance,
        )
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        return 1
    logger.info(f"Config: {config}")

    start = time.time()
    try:
        dataset = load_dataset(args.input_file, config.replication_factor)
    except (OSError, ValueError) as e:
        logger.error(f"Could not read file {args.input_file}: {e}")
        return 1
    print(
        f"Load Data time elapsed: {(time.time() - start) * 1000:.0f} ms with {len(dataset)} records"
    )

    try:
        centers = initialize_random_centers(args.k, args.lower_bound, args.upper_bound, args.seed)
    except ValueError as e:
        logger.error(str(e))
        return 1
    if not dataset:
        logger.error(f"No records in {args.input_file}")
        return 1

    modes = (
        [ExecutionMode.SEQUENTIAL, ExecutionMode.CONCURRENT]
        if args.mode == "both"
        else [ExecutionMode(args.mode)]
    )
    engine = ClusterEngine(config)
    final_centers = None
    for mode in modes:
        try:
            final_centers = run_mode(engine, dataset, centers, args.k, mode)
        except ConvergenceError as e:
            logger.error(str(e))
            return 1

    if args.plot:
        plot_clusters(dataset, final_centers, args.plot)
        logger.info(f"Saved plot to {args.plot}")
    return 0


def cli():
    sys.exit(main(parse_args()))


if __name__ == "__main__":
    cli()
