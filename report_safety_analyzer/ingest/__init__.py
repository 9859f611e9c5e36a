"""Ingest package - report file reader.

This package handles:
- Reading report text files (one report per line, whitespace-separated integers)
- Rejecting malformed fields with line-level error messages

Key classes:
- ReportReader: Reads a file or in-memory text into a ReportBatch
- ReportReaderConfig: Blank-line policy and encoding

Design principle:
- Readers produce immutable Report objects
- Non-fatal observations are recorded as batch warnings, never printed
"""

from .readers_reports import ReportBatch, ReportFormatError, ReportReader, ReportReaderConfig

__all__ = [
    "ReportBatch",
    "ReportFormatError",
    "ReportReader",
    "ReportReaderConfig",
]
