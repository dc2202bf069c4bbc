"""Pipeline orchestration — parallel per-file aggregation, ranking, report writing."""

import argparse
import itertools
import sys
import time
from concurrent.futures import ThreadPoolExecutor, wait, FIRST_COMPLETED

from killstats.aggregation import aggregate_rows, merge_aggregates, new_aggregate
from killstats.constants import report_id
from killstats.errors import KillStatsError, UsageError
from killstats.io_helpers import list_input_files, read_kill_rows, write_json
from killstats.ranking import build_report


def aggregate_file(path):
    """Read one kill-event file and return its partial aggregate."""
    return aggregate_rows(read_kill_rows(path), source=path)


def aggregate_files(paths, workers):
    """Aggregate every file on a pool of `workers` threads and merge the results.

    At most `workers` files are in flight; the next file is submitted only
    after one finishes cleanly. Partials are merged as they complete, and the
    order does not affect the result. The first failure stops submission,
    cancels anything queued and is re-raised without waiting for the workers
    still running.
    """
    if workers < 1:
        raise UsageError(f"worker count must be at least 1, got {workers}")

    result = new_aggregate()
    remaining = iter(paths)

    executor = ThreadPoolExecutor(max_workers=workers)
    try:
        pending = set()
        for path in itertools.islice(remaining, workers):
            pending.add(executor.submit(aggregate_file, path))

        while pending:
            done, pending = wait(pending, return_when=FIRST_COMPLETED)
            for future in done:
                result = merge_aggregates(result, future.result())
                for path in itertools.islice(remaining, 1):
                    pending.add(executor.submit(aggregate_file, path))
    except BaseException:
        executor.shutdown(wait=False, cancel_futures=True)
        raise
    executor.shutdown(wait=True)
    return result


def run(input_dir, workers, output_name):
    """Run the whole pipeline and write the report. Returns the report dict."""
    start = time.perf_counter()
    rid = report_id()

    print("Kill Stats Pipeline")
    print("=" * 50)

    print("\n[1/4] Listing input files...")
    paths = list_input_files(input_dir)
    print(f"  Found {len(paths)} files in {input_dir}")

    print(f"\n[2/4] Aggregating with {workers} workers...")
    aggregate = aggregate_files(paths, workers)
    print(f"  {aggregate['record_count']} kills, "
          f"{len(aggregate['weapons'])} weapons, {len(aggregate['killers'])} killers")

    print("\n[3/4] Ranking...")
    report = build_report(aggregate, rid)
    print(f"  Top weapons: {len(report['top_weapons'])}, top killers: {len(report['top_killers'])}")

    print("\n[4/4] Writing report...")
    size = write_json(output_name, report)
    print(f"  JSON written to {output_name} ({size / 1024:.1f} KB)")

    print(f"\nDone! {len(paths)} files processed in {time.perf_counter() - start:.3f}s")
    return report


def worker_count(value):
    """argparse type for the worker count: a positive integer."""
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"<num-threads> must be a valid integer, got {value!r}")
    if n < 1:
        raise argparse.ArgumentTypeError(f"<num-threads> must be at least 1, got {n}")
    return n


def main(argv=None):
    parser = argparse.ArgumentParser(description="Top weapons and killers from kill-event CSV logs")
    parser.add_argument("input_path", help="Directory of kill-event CSV files")
    parser.add_argument("num_threads", type=worker_count, help="Number of worker threads")
    parser.add_argument("output_file_name", help="Path of the JSON report to write")
    args = parser.parse_args(argv)

    try:
        run(args.input_path, args.num_threads, args.output_file_name)
    except KillStatsError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
