"""
RYZE — Expectation vs Reality Analytics Engine

Turns a journal of resolved "thoughts" (what the user feared, and what
actually happened) into comparison charts, a monthly accuracy trend, a
0–100 positivity score, and rule-based insight cards.

Architecture:
    config      — All thresholds, band edges, and calendar settings
    models      — OutcomeType spectrum, Outcome, Thought
    frame       — The shared qualifying-thought filter as a DataFrame
    comparison  — Expected vs actual counts, breakdowns, distributions
    trend       — Monthly fear-accuracy trend
    scoring     — Positivity score
    insights    — Rule-based insight cards
    messages    — Chart text and band lookups
    store       — JSON thought store with notification hooks
    pipeline    — Orchestration: load → reduce → insights → report

Public API:
    analyze(filepath)        → CLI mode
    analyze_data(records)    → UI / backend mode
    generate_report(result)  → formatted report
"""

from ryze.pipeline import analyze, analyze_data, generate_report

__version__ = "1.0.0"

__all__ = ["analyze", "analyze_data", "generate_report"]
