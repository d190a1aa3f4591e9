"""Matplotlib chart generators for sweep results."""

import matplotlib
matplotlib.use('Agg')  # Non-interactive backend for PNG/PDF output
import matplotlib.pyplot as plt
import numpy as np

from ..statistics import fit_power_law
from ..types import SweepResult


FIGURE_DPI = 150
LINE_COLOR = '#1f9bd6'


def error_vs_samples_chart(sweep: SweepResult, output_path: str, fit: bool = True) -> str:
    """Line chart: relative error vs samples per integral, log x axis.

    When `fit` is set and the sweep has at least two non-zero errors, the
    fitted power law error ~ a * n**b is overlaid.
    """
    if len(sweep) == 0:
        return _empty_chart(output_path, "No sweep data")

    counts = np.asarray(sweep.sample_counts(), dtype=np.float64)
    errors = np.asarray(sweep.errors(), dtype=np.float64)

    fig, ax = plt.subplots(figsize=(8, 8))
    fig.subplots_adjust(left=0.15, right=0.95, bottom=0.1, top=0.9)
    ax.plot(counts, errors, color=LINE_COLOR, linewidth=2, label='Relative error')

    if fit:
        try:
            amplitude, exponent = fit_power_law(counts, errors)
        except ValueError:
            pass
        else:
            ax.plot(counts, amplitude * counts ** exponent, 'r--', linewidth=1.5,
                    label=f'Fit: {amplitude:.3g} n^{exponent:.3f}')

    ax.set_xscale('log')
    ax.set_xlabel('samples/integral', fontsize=12)
    ax.set_ylabel('Relative error from analytical result', fontsize=12)
    ax.set_title('Error vs samples', fontsize=14, fontweight='bold')
    ax.legend(fontsize=10)
    ax.grid(alpha=0.3)
    plt.savefig(output_path, dpi=FIGURE_DPI, bbox_inches='tight')
    plt.close(fig)
    return output_path


def estimate_convergence_chart(sweep: SweepResult, output_path: str) -> str:
    """Line chart: volume estimate vs samples with the analytical reference line."""
    if len(sweep) == 0:
        return _empty_chart(output_path, "No sweep data")

    counts = sweep.sample_counts()
    estimates = sweep.estimates()
    reference = sweep.analytical

    fig, ax = plt.subplots(figsize=(10, 5))
    ax.plot(counts, estimates, 'b-', linewidth=1, alpha=0.7, label='Estimate')
    ax.axhline(y=reference, color='r', linestyle='--', linewidth=1.5,
               label=f'Analytical ({reference:.5f})')

    ax.set_xscale('log')
    ax.set_xlabel('samples/integral', fontsize=12)
    ax.set_ylabel('Volume', fontsize=12)
    ax.set_title('Volume Estimate Convergence', fontsize=14, fontweight='bold')
    ax.legend(fontsize=10)
    ax.grid(alpha=0.3)
    plt.tight_layout()
    plt.savefig(output_path, dpi=FIGURE_DPI, bbox_inches='tight')
    plt.close(fig)
    return output_path


def _empty_chart(output_path: str, message: str) -> str:
    """Generate a placeholder chart with a message."""
    fig, ax = plt.subplots(figsize=(8, 5))
    ax.text(0.5, 0.5, message, ha='center', va='center', fontsize=14, color='gray')
    ax.set_axis_off()
    plt.savefig(output_path, dpi=FIGURE_DPI, bbox_inches='tight')
    plt.close(fig)
    return output_path
