"""
Prometheus metrics helpers for the MUDTapper log viewer.

Shared metric definitions for document loads, search requests and load
failures. The service exposes them on ``/metrics``.
"""

from __future__ import annotations

from prometheus_client import Counter, Histogram

documents_loaded_total = Counter(
    "logview_documents_loaded_total",
    "Documents built from session transcripts",
    ["mode"],
)
document_build_seconds = Histogram(
    "logview_document_build_seconds",
    "Time spent repairing, classifying and rendering a transcript",
)
searches_total = Counter(
    "logview_searches_total",
    "Search requests served",
    ["scope"],
)
load_errors_total = Counter(
    "logview_load_errors_total",
    "Transcripts that could not be opened or decoded",
)
