"""
JSON format version for bolt weight reports.

Bump SCHEMA_VERSION whenever a field is renamed or removed from the
report written by save_report_json / to_json.
"""

SCHEMA_VERSION = "1.0"
