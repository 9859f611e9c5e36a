from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple
import re

import numpy as np

from report_safety_analyzer.models.report import Report


_INT64_MIN = int(np.iinfo(np.int64).min)
_INT64_MAX = int(np.iinfo(np.int64).max)


class ReportFormatError(ValueError):
    """A report line could not be parsed into signed integer levels."""

    def __init__(self, message: str, *, source: str = "<text>", line_no: Optional[int] = None) -> None:
        self.source = source
        self.line_no = line_no
        where = source if line_no is None else f"{source}:{line_no}"
        super().__init__(f"{where}: {message}")


@dataclass(frozen=True)
class ReportReaderConfig:
    """
    Reader configuration for report text files (one report per line).

    skip_blank_lines:
      - True: lines holding only whitespace are skipped and a warning is recorded.
      - False: a blank line is a format error (a report needs at least one level).

    encoding:
      Text encoding of the input file.
    """
    skip_blank_lines: bool = True
    encoding: str = "utf-8"


@dataclass(frozen=True)
class ReportBatch:
    """All reports read from one source, in line order."""
    source_path: Optional[Path]
    reports: Tuple[Report, ...]
    warnings: Tuple[str, ...] = ()

    @property
    def n_reports(self) -> int:
        return len(self.reports)


class ReportReader:
    """
    Reads report files of the form::

        7 6 4 2 1
        1 2 7 8 9

    Each non-blank line is one report; fields are separated by runs of whitespace and
    each field must be a signed decimal integer within the int64 range. Any malformed
    field aborts the read with :class:`ReportFormatError`.
    """

    _INT_PAT = re.compile(r"[+-]?[0-9]+")

    def __init__(self, config: Optional[ReportReaderConfig] = None):
        self.config = config or ReportReaderConfig()

    def _parse_field(self, token: str, *, source: str, line_no: int, col: int) -> int:
        if not self._INT_PAT.fullmatch(token):
            raise ReportFormatError(
                f"field {col} is not an integer: {token!r}", source=source, line_no=line_no
            )
        value = int(token)
        if not (_INT64_MIN <= value <= _INT64_MAX):
            raise ReportFormatError(
                f"field {col} is outside the signed 64-bit range: {token}", source=source, line_no=line_no
            )
        return value

    def parse_line(self, line: str, *, line_no: int, source: str = "<text>",
                   source_path: Optional[Path] = None) -> Report:
        fields = line.split()
        if not fields:
            raise ReportFormatError("empty report line", source=source, line_no=line_no)
        levels = [
            self._parse_field(tok, source=source, line_no=line_no, col=i + 1)
            for i, tok in enumerate(fields)
        ]
        return Report(levels=levels, line_no=line_no, source_path=source_path)

    def parse_text(self, text: str, source_path: Optional[str | Path] = None) -> ReportBatch:
        """Parse report text already loaded in memory."""
        p = Path(source_path) if source_path is not None else None
        source = str(p) if p is not None else "<text>"

        reports: List[Report] = []
        blank: List[int] = []
        # Only "\n" ends a report; other control characters are field whitespace.
        lines = text.split("\n")
        if lines and lines[-1] == "":
            lines.pop()
        for line_no, line in enumerate(lines, start=1):
            if not line.strip() and self.config.skip_blank_lines:
                blank.append(line_no)
                continue
            reports.append(self.parse_line(line, line_no=line_no, source=source, source_path=p))

        warnings: List[str] = []
        if blank:
            shown = ", ".join(str(n) for n in blank[:20])
            more = f" (+{len(blank) - 20} more)" if len(blank) > 20 else ""
            warnings.append(f"Report reader: skipped {len(blank)} blank line(s) in {source}: {shown}{more}")
        if not reports:
            warnings.append(f"Report reader: no reports found in {source}")

        return ReportBatch(source_path=p, reports=tuple(reports), warnings=tuple(warnings))

    def read(self, path: str | Path) -> ReportBatch:
        p = Path(path).expanduser().resolve()
        if not p.is_file():
            raise FileNotFoundError(f"Report file not found: {p}")
        text = p.read_text(encoding=self.config.encoding)
        return self.parse_text(text, source_path=p)
