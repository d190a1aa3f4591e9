"""Charts and PDF reports for sweep and single-run results."""
