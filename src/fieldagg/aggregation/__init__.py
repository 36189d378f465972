"""Aggregation module for field summaries.

- Validates options and resolves include/exclude selection
- Produces the per-field, per-metric report
- Forbidden: mutating input records, keeping state between calls
"""
