#!/usr/bin/env python3
"""
Demo script for the statistics teaching helpers.
"""

# Walkthrough:
# 1) Generate a reproducible synthetic sample.
# 2) Summarize it and build a confidence interval for its mean.
# 3) Test the sample mean against a hypothesised value, then compare it with a
#    second sample drawn from a shifted distribution.
# 4) Render a histogram and export every result to CSV.

import argparse
import logging
import os
import sys
import time

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from statprimer import (
    confidence_interval,
    descriptive_stats,
    format_confidence_interval,
    format_descriptive_stats,
    format_ttest,
    generate_synthetic_data,
    plot_histogram,
    save_results_to_csv,
    simple_ttest,
)
from statprimer.synthetic import DISTRIBUTION_TYPES


def _configure_logging(log_file=None):
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="w"))
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )


def _build_arg_parser():
    """Build command-line parser for the demo."""
    parser = argparse.ArgumentParser(
        description="Walk through the statistics helpers on synthetic data."
    )
    parser.add_argument(
        "--n", type=int, default=100, help="Sample size (default: 100)."
    )
    parser.add_argument(
        "--distribution",
        choices=DISTRIBUTION_TYPES,
        default="normal",
        help="Distribution to sample from (default: normal).",
    )
    parser.add_argument(
        "--seed", type=int, default=123, help="Random seed (default: 123)."
    )
    parser.add_argument(
        "--confidence-level",
        type=float,
        default=0.95,
        help="Confidence level for intervals and tests (default: 0.95).",
    )
    parser.add_argument(
        "--mu",
        type=float,
        default=None,
        help="Hypothesised mean for the one-sample test "
        "(default: the distribution's true mean).",
    )
    parser.add_argument(
        "--outdir", default="output", help="Output directory (default: output)."
    )
    parser.add_argument(
        "--log-file", default=None, help="Optional log file, e.g. statprimer_demo.log."
    )
    return parser


def main(argv=None):
    """Main execution function with step-by-step logging."""
    args = _build_arg_parser().parse_args(argv)
    _configure_logging(args.log_file)

    start_time = time.time()
    logging.info("Initializing statistics demo")

    data = generate_synthetic_data(n=args.n, type=args.distribution, seed=args.seed)
    logging.info(
        "Generated %d values from %s distribution (true mean %.3f, true SD %.3f)",
        len(data.sample),
        data.distribution_name,
        data.true_mean,
        data.true_sd,
    )

    summary = descriptive_stats(data.sample)
    print(format_descriptive_stats(summary))

    if summary.n < 2:
        logging.error(
            "At least 2 observations are needed for intervals and tests. "
            "Terminating execution."
        )
        return 1

    ci = confidence_interval(data.sample, confidence_level=args.confidence_level)
    print(format_confidence_interval(ci))
    logging.info(
        "Interval [%.3f, %.3f] %s the true mean",
        ci.lower,
        ci.upper,
        "covers" if ci.lower <= data.true_mean <= ci.upper else "misses",
    )

    mu = data.true_mean if args.mu is None else args.mu
    one_sample = simple_ttest(
        data.sample, mu=mu, confidence_level=args.confidence_level
    )
    print(format_ttest(one_sample))

    shifted = generate_synthetic_data(
        n=args.n, type=args.distribution, seed=args.seed + 1
    )
    comparison_sample = shifted.sample + 0.5 * shifted.true_sd
    two_sample = simple_ttest(
        data.sample, comparison_sample, confidence_level=args.confidence_level
    )
    print(format_ttest(two_sample))
    logging.info(
        "Two-sample comparison p-value %.4g (significant: %s)",
        two_sample.p_value,
        two_sample.significant,
    )

    os.makedirs(args.outdir, exist_ok=True)
    logging.info("Output directory ensured: %s", args.outdir)

    step_start = time.time()
    hist_path = os.path.join(args.outdir, "histogram.png")
    fig = plot_histogram(
        data.sample,
        title=f"{data.distribution_name} sample (n = {len(data.sample)})",
        overlay_normal=True,
        output_path=hist_path,
    )
    plt.close(fig)
    logging.info("Histogram rendered in %.2f seconds", time.time() - step_start)

    csv_path = save_results_to_csv(
        {
            "descriptive": summary,
            "confidence_interval": ci,
            "one_sample_ttest": one_sample,
            "two_sample_ttest": two_sample,
        },
        args.outdir,
    )

    logging.info("Total execution time: %.2f seconds", time.time() - start_time)
    logging.info("Generated output files:")
    logging.info("  - Histogram: %s", hist_path)
    logging.info("  - Results CSV: %s", csv_path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
