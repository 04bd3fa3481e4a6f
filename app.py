"""Test-center allocation: batch runner entry point.

Allocate a batch of applicants to test centers from CSV/XLSX inputs:

    python app.py --centers sample_files/centers.csv --applicants sample_files/applicants.csv --seed 7

Sample inputs can be generated with `python -m data.sample_data`.
"""

import argparse
import sys
import os

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from data.loader import load_file, parse_applicants, parse_centers
from data.validator import validate_applicants, validate_centers, validate_cross_file
from data.exporter import export_allocations_csv
from engine.allocation_engine import run_batch, get_unallocated_applicants
from engine.distribution import get_distribution_stats, stats_to_frame
from utils.logger import configure_logging, get_logger


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="app.py",
        description="Assign applicants to medical test centers under regional quotas.",
    )
    p.add_argument("--centers", required=True, help="CSV/XLSX file of test centers")
    p.add_argument("--applicants", required=True, help="CSV/XLSX file of applicants")
    p.add_argument("--seed", type=int, default=None, help="Seed for the processing-order shuffle")
    p.add_argument("--output", default=None, help="Optional CSV path for the allocation list")
    p.add_argument("--log-level", default=None, help="Override the log level (default: INFO)")
    return p


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)
    logger = get_logger("app")

    centers_df = load_file(args.centers)
    applicants_df = load_file(args.applicants)

    results = [validate_centers(centers_df), validate_applicants(applicants_df)]
    if all(r.is_valid for r in results):
        results.append(validate_cross_file(applicants_df, centers_df))
    for r in results:
        for warning in r.warnings:
            logger.warning(warning)
        for error in r.errors:
            logger.error(error)
    if not all(r.is_valid for r in results):
        return 1

    centers = parse_centers(centers_df)
    applicants = parse_applicants(applicants_df)

    result = run_batch(applicants, centers, seed=args.seed)
    stats = get_distribution_stats(result.centers)

    print(stats_to_frame(stats).to_string(index=False))
    print(f"\nBalance score (std-dev of center load): {stats.balance_score:.2f}")

    unallocated = get_unallocated_applicants(applicants, result.allocations)
    if unallocated:
        print(f"\nUnallocated applicants ({len(unallocated)}): "
              f"{', '.join(a.applicant_id for a in unallocated)}")

    if args.output:
        path = export_allocations_csv(result.allocations, args.output)
        logger.info("Allocations written | path=%s | rows=%s", path, len(result.allocations))
    return 0


if __name__ == "__main__":
    sys.exit(main())
