"""PDF report generator using reportlab."""

import os
import tempfile

from reportlab.lib import colors
from reportlab.lib.pagesizes import letter
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.units import inch
from reportlab.platypus import (
    SimpleDocTemplate, Paragraph, Spacer, Image, Table, TableStyle,
)

from . import charts
from ..statistics import fit_power_law
from ..types import SweepResult

# Longer sweeps are summarized by their first and last rows in the table
MAX_TABLE_ROWS = 20

TABLE_STYLE = TableStyle([
    ('BACKGROUND', (0, 0), (-1, 0), colors.Color(0.2, 0.3, 0.5)),
    ('TEXTCOLOR', (0, 0), (-1, 0), colors.white),
    ('FONTSIZE', (0, 0), (-1, -1), 9),
    ('GRID', (0, 0), (-1, -1), 0.5, colors.grey),
    ('ROWBACKGROUNDS', (0, 1), (-1, -1), [colors.Color(0.95, 0.95, 0.95), colors.white]),
])


def _single_table(single: dict) -> Table:
    data = [
        ['Parameter', 'Value'],
        ['Accepted samples', f"{single.get('successes', 0):,}"],
        ['Trials', f"{single.get('trials', 0):,}"],
        ['Efficiency', f"{single.get('efficiency_percent', 0):.1f}%"],
        ['Estimate', f"{single.get('estimate', 0):.6f}"],
        ['Analytical', f"{single.get('analytical', 0):.6f}"],
        ['Relative error', f"{single.get('error', 0):.4%}"],
        ['Wall time (sec)', f"{single.get('wall_time_sec', 0):.3f}"],
        ['Throughput', f"{single.get('samples_per_sec', 0):,.0f} samples/sec"],
        ['Figure of merit', f"{single.get('figure_of_merit', 0):.4g}"],
    ]
    t = Table(data, colWidths=[2.5*inch, 3*inch])
    t.setStyle(TABLE_STYLE)
    return t


def _repeat_table(repeat: dict) -> Table:
    lo, hi = repeat.get('ci95', [0.0, 0.0])
    data = [
        ['Parameter', 'Value'],
        ['Independent runs', str(repeat.get('count', 0))],
        ['Mean estimate', f"{repeat.get('mean', 0):.6f}"],
        ['Std dev of mean', f"{repeat.get('std_dev', 0):.6f}"],
        ['95% CI', f"[{lo:.6f}, {hi:.6f}]"],
        ['Relative error of mean', f"{repeat.get('error', 0):.4%}"],
    ]
    t = Table(data, colWidths=[2.5*inch, 3*inch])
    t.setStyle(TABLE_STYLE)
    return t


def _sweep_table(sweep: SweepResult) -> Table:
    rows = [p.as_tuple() for p in sweep]
    if len(rows) > MAX_TABLE_ROWS:
        half = MAX_TABLE_ROWS // 2
        rows = rows[:half] + [None] + rows[-half:]

    data = [['Samples', 'Estimate', 'Relative error']]
    for row in rows:
        if row is None:
            data.append(['...', '...', '...'])
        else:
            n, est, err = row
            data.append([f"{n:,}", f"{est:.6f}", f"{err:.4%}"])
    t = Table(data, colWidths=[1.6*inch, 2*inch, 2*inch])
    t.setStyle(TABLE_STYLE)
    return t


def generate_report(results: dict, output_path: str):
    """Generate a PDF report from a runner results dict.

    Args:
        results: Results dict as written by the runner's --json option.
        output_path: Path to write the PDF file.
    """
    doc = SimpleDocTemplate(
        output_path, pagesize=letter,
        leftMargin=1*inch, rightMargin=1*inch,
        topMargin=1*inch, bottomMargin=1*inch,
    )

    styles = getSampleStyleSheet()
    title_style = ParagraphStyle('CustomTitle', parent=styles['Title'], fontSize=20, spaceAfter=30)
    heading_style = ParagraphStyle('CustomHeading', parent=styles['Heading1'], fontSize=16, spaceAfter=12)
    body_style = styles['BodyText']

    elements = []
    tmpdir = tempfile.mkdtemp()

    elements.append(Paragraph("Volume of Revolution: Monte Carlo Report", title_style))
    elements.append(Paragraph(
        "Rejection-sampling estimate of the volume obtained by revolving "
        "y = cos(x) on [-pi/2, pi/2] about the x axis, sampled from the "
        "enclosing cylinder of radius 1.",
        body_style
    ))
    elements.append(Spacer(1, 0.2*inch))
    elements.append(Paragraph(
        f"Mode: {results.get('mode', 'unknown')}<br/>"
        f"Seed: {results.get('seed', 'unknown')}<br/>"
        f"Analytical volume: {results.get('analytical', 0):.6f}",
        body_style
    ))
    elements.append(Spacer(1, 0.3*inch))

    if results.get('mode') == 'calculator':
        elements.append(Paragraph("1. Single Run", heading_style))
        elements.append(_single_table(results.get('results', {})))
        if 'repeat' in results:
            elements.append(Spacer(1, 0.3*inch))
            elements.append(Paragraph("2. Repeated Runs", heading_style))
            elements.append(_repeat_table(results['repeat']))
    else:
        sweep = SweepResult.from_dict(results.get('results', {}))
        elements.append(Paragraph("1. Error Sweep", heading_style))

        chart_path = os.path.join(tmpdir, 'error_vs_samples.png')
        charts.error_vs_samples_chart(sweep, chart_path)
        elements.append(Image(chart_path, width=4.5*inch, height=4.5*inch))
        elements.append(Spacer(1, 0.2*inch))

        try:
            amplitude, exponent = fit_power_law(sweep.sample_counts(), sweep.errors())
        except ValueError:
            fit_text = "Not enough non-zero errors to fit a power law."
        else:
            fit_text = (f"Fitted error curve: {amplitude:.4g} * n^{exponent:.4f} "
                        f"(pure Monte Carlo scaling is n^-0.5).")
        elements.append(Paragraph(fit_text, body_style))
        elements.append(Spacer(1, 0.2*inch))

        chart_path = os.path.join(tmpdir, 'estimate_convergence.png')
        charts.estimate_convergence_chart(sweep, chart_path)
        elements.append(Image(chart_path, width=5.5*inch, height=2.75*inch))
        elements.append(Spacer(1, 0.2*inch))

        elements.append(_sweep_table(sweep))

    doc.build(elements)
    print(f"PDF report generated: {output_path}")
