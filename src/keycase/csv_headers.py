"""CSV header conversion: only the first line of the payload is rewritten."""

from __future__ import annotations

from keycase.options import ConversionOptions
from keycase.text.pipeline import convert_text

__all__ = ["convert_csv_headers"]


def convert_csv_headers(csv: str, options: ConversionOptions) -> str:
    """Convert each comma-separated cell of the header line.

    Cells are stripped before conversion.  Every line after the header is
    returned byte-for-byte, including any ``\\r`` line endings.  Quoted cells
    are not parsed: a comma always separates cells.

    Args:
        csv:     The whole CSV payload.
        options: Conversion settings for the current job.

    Returns:
        The payload with a converted header line.
    """
    lines = csv.split("\n")
    lines[0] = ",".join(convert_text(cell.strip(), options) for cell in lines[0].split(","))
    return "\n".join(lines)
