"""Rendering of distance matrices as delimited text."""

from __future__ import annotations

import math
from collections.abc import Sequence as Seq

from .structs import Separator


def format_number(value: float, precision: int) -> str:
    """Render a distance as a percentage; zero as '0', NaN and infinities as '/'."""
    if abs(value) == 0.0:
        return "0"
    if math.isnan(value) or math.isinf(value):
        return "/"
    return f"{value * 100.0:.{precision}f}"


def format_cell(cell, precision: int) -> str:
    """Render a single distance or a (min, max) pair."""
    if isinstance(cell, tuple):
        low, high = cell
        return f"{format_number(low, precision)} - {format_number(high, precision)}"
    return format_number(cell, precision)


def to_sv(
    matrix: Seq[Seq],
    species: Seq[str],
    groups: Seq[int],
    separator: Separator,
    precision: int,
) -> str:
    """Render a lower-triangular matrix with group headers as delimited text."""
    if not groups:
        raise ValueError("at least one group is required")
    sep = separator.symbol()
    header_groups: list[list[str]] = [[] for _ in range(groups[-1] + 2)]
    for name, group in zip(species, groups):
        header_groups[group + 1].append(name)
    header = ["-".join(names) for names in header_groups]
    lines = [sep.join(header)]
    for row, label in zip(matrix, header[1:]):
        numbers = sep.join(format_cell(cell, precision) for cell in row)
        lines.append(f"{label}{sep}{numbers}")
    return "\n".join(lines)