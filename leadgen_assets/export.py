"""CSV export of the personalized outreach rows."""

import csv
import io
from pathlib import Path

from .models import CSV_HEADER, OutreachRow

CSV_FILENAME = "leadgen_personalized_outreach.csv"


def outreach_csv(rows: tuple[OutreachRow, ...] | list[OutreachRow]) -> str:
    """
    Render outreach rows as CSV text with a header row.

    Every cell is quoted and embedded quotes are doubled, so multi-line email
    bodies and commas survive a spreadsheet import.
    """
    buf = io.StringIO()
    writer = csv.writer(buf, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for row in rows:
        writer.writerow(row.as_csv_row())
    return buf.getvalue().rstrip("\n")


def write_outreach_csv(rows: tuple[OutreachRow, ...] | list[OutreachRow], output_path: Path) -> Path:
    output_path.write_text(outreach_csv(rows) + "\n", encoding="utf-8")
    return output_path
