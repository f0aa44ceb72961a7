from __future__ import annotations

import csv
import io

from .model import ExportTable


def write_csv(table: ExportTable) -> bytes:
    """Encode an export table as CSV.

    The UTF-8 byte-order mark makes spreadsheet tools pick the right encoding,
    which right-to-left resident names depend on.
    """

    out = io.StringIO()
    writer = csv.writer(out, lineterminator="\n")
    writer.writerow(table.header)
    writer.writerows(table.rows)
    return out.getvalue().encode("utf-8-sig")
