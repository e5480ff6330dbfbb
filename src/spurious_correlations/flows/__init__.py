"""
Prefect flows for the correlation pipeline.

Flows:
- correlate: plan random pairs, fetch both series of each pair concurrently,
  align and compute r; per-pair failures become failed results

Usage (local):
    python -m spurious_correlations.flows.correlate

Usage (Prefect):
    prefect server start  # Optional, for dashboard
    python -m spurious_correlations.flows.correlate
"""
