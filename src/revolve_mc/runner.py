"""Command line runner for the volume-of-revolution Monte Carlo estimate."""

import argparse
import json
import sys

from .simulation import InvalidSampleCount, Simulation, TrialLimitExceeded
from .statistics import repeated_estimates, summarize_runs
from .types import DEFAULT_MAX_TRIALS, DEFAULT_SEED

DEFAULT_PLOT_PATH = 'ErrorVsSamples.png'


def _positive_int(value: str) -> int:
    """argparse type: a strictly positive integer."""
    try:
        number = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Expected an integer, received '{value}'.") from exc
    if number <= 0:
        raise argparse.ArgumentTypeError(f"Expected a positive integer, received {number}.")
    return number


def _seed(value: str) -> int:
    """argparse type: generator seed, decimal or 0x-prefixed hex."""
    try:
        return int(value, 0)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Expected an integer seed, received '{value}'.") from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Estimate the volume of y = cos(x) revolved about the x axis '
                    'by rejection sampling from the enclosing cylinder')

    mode = parser.add_mutually_exclusive_group()
    mode.add_argument('-c', dest='mode', action='store_const', const='calculator',
                      help='Calculator mode: only output the approximation and error (default)')
    mode.add_argument('-e', dest='mode', action='store_const', const='error',
                      help='Error mode: sweep the number of samples and plot the error')
    parser.set_defaults(mode='calculator')

    parser.add_argument('--samples', type=_positive_int, default=1000,
                        help='Number of accepted sample points (default: 1000)')
    parser.add_argument('--min', dest='min_samples', type=_positive_int, default=100,
                        help='Minimum number of sample points in error mode (default: 100)')
    parser.add_argument('--max', dest='max_samples', type=_positive_int, default=100_000,
                        help='Maximum (exclusive) number of sample points in error mode (default: 100000)')
    parser.add_argument('--step', type=_positive_int, default=1,
                        help='Step between numbers of sample points in error mode (default: 1)')
    parser.add_argument('--seed', type=_seed, default=DEFAULT_SEED,
                        help=f'Generator seed, decimal or 0x-prefixed hex (default: {DEFAULT_SEED})')
    parser.add_argument('--repeat', type=_positive_int, default=None,
                        help='Calculator mode: also run this many independent seeds '
                             '(seed, seed+1, ...) and report the mean with a 95% CI')
    parser.add_argument('--max-trials', type=_positive_int, default=DEFAULT_MAX_TRIALS,
                        help='Abort a run after this many proposals (default: 10^9)')
    parser.add_argument('--json', type=str, default=None,
                        help='Write results to this JSON file')
    parser.add_argument('--plot', type=str, default=DEFAULT_PLOT_PATH,
                        help=f'Error mode chart path (default: {DEFAULT_PLOT_PATH})')
    parser.add_argument('--report', type=str, default=None,
                        help='Write a PDF report to this path')
    parser.add_argument('--verbose', action='store_true',
                        help='Print every run of the sweep')
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    sim = Simulation(seed=args.seed, max_trials=args.max_trials)
    results = {
        'mode': args.mode,
        'seed': sim.seed,
        'analytical': sim.analytical,
    }

    try:
        if args.mode == 'calculator':
            result = sim.run(args.samples, verbose=args.verbose)
            result.print_summary()
            results['results'] = result.to_dict()
            if args.repeat:
                seeds = [sim.seed + i for i in range(args.repeat)]
                runs = repeated_estimates(seeds, args.samples, max_trials=args.max_trials)
                summary = summarize_runs(runs)
                summary.print_summary()
                results['repeat'] = summary.to_dict()
                results['repeat']['seeds'] = [run.seed for run in runs]
        else:
            sweep = sim.sweep(args.min_samples, args.max_samples, args.step,
                              verbose=args.verbose)
            results['results'] = sweep.to_dict()
            print(f"Completed {len(sweep)} runs in {sweep.wall_time:.2f} sec")
    except (InvalidSampleCount, TrialLimitExceeded) as e:
        print(f"Error: {e}")
        return 1

    if args.mode == 'error':
        try:
            from .report.charts import error_vs_samples_chart
            error_vs_samples_chart(sweep, args.plot)
            print(f"Chart saved to {args.plot}")
        except Exception as e:
            print(f"Warning: chart generation failed: {e}")

    if args.json:
        with open(args.json, 'w') as f:
            json.dump(results, f, indent=2, default=str)
        print(f"Results saved to {args.json}")

    if args.report:
        try:
            from .report.pdf_report import generate_report
            generate_report(results, args.report)
        except Exception as e:
            print(f"Warning: PDF report generation failed: {e}")

    return 0


if __name__ == '__main__':
    sys.exit(main())
