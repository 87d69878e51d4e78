"""Command line entry point computing the min-max K2P distance matrix."""

from __future__ import annotations

import argparse
import math
import sys
import time
from collections.abc import Callable

from .distances import k2p, k2p_ambiguity
from .parsing import (
    compute_frequencies,
    get_output_file_path,
    read_fasta,
    read_species,
    remove_duplicates,
)
from .printers import to_sv
from .structs import AmbiguityInfo, Offset, Separator, Sequence

Distance = Callable[[Sequence, Sequence, "AmbiguityInfo | None"], float]


def group_min_max(
    seqs: list[Sequence],
    offsets: list[Offset],
    min_dist_0: list[bool],
    distance: Distance,
    frequencies: AmbiguityInfo | None,
) -> list[list[tuple[float, float]]]:
    """Lower-triangular matrix of (min, max) distances between groups.

    Row ``g2`` column ``g1`` holds the range for the groups ``g1 <= g2``.
    A group with a duplicated sequence has a minimum of zero; a group with a
    single distinct sequence and no duplicate has no defined range.
    """
    n_groups = len(offsets)
    result: list[list[tuple[float, float]]] = [
        [(math.nan, math.nan)] * (i + 1) for i in range(n_groups)
    ]

    def members(offset: Offset) -> range:
        if offset.offset is None:
            return range(0)
        return range(offset.offset, offset.offset + offset.count)

    for g1, first in enumerate(offsets):
        for g2 in range(g1, n_groups):
            second = offsets[g2]
            low, high = math.inf, -math.inf
            for i in members(first):
                for j in members(second):
                    if i == j:
                        continue
                    d = distance(seqs[i], seqs[j], frequencies)
                    if d < low:
                        low = d
                    if d > high:
                        high = d
            if g1 == g2:
                if min_dist_0[g1]:
                    low = 0.0
                    if first.count == 1:
                        high = 0.0
                elif first.count == 1:
                    low, high = -math.inf, math.inf
            result[g2][g1] = (low, high)
    return result


def full_matrix(
    sequences: list[Sequence], distance: Distance, frequencies: AmbiguityInfo | None
) -> list[list[float]]:
    """Lower-triangular matrix of distances between every pair of sequences."""
    n = len(sequences)
    result: list[list[float]] = [[math.nan] * (i + 1) for i in range(n)]
    for i, first in enumerate(sequences):
        for j in range(i, n):
            result[j][i] = distance(first, sequences[j], frequencies)
    return result


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="hooty", description="Direct computing of K2P min-max distance matrix"
    )
    parser.add_argument("fasta_file", metavar="fasta file", help="path to the fasta file")
    parser.add_argument(
        "species_file", metavar="species file", help="path to the species file"
    )
    parser.add_argument(
        "-o", "--output", dest="output_file", help="path to the output file"
    )
    parser.add_argument(
        "-f", "--full_matrix", dest="full_matrix_file", help="path to the full matrix file"
    )
    parser.add_argument(
        "-s",
        "--separator",
        type=Separator,
        choices=list(Separator),
        default=Separator.SEMICOLON,
        metavar="{comma,semicolon,tab}",
        help="separator to use in the output file",
    )
    parser.add_argument(
        "-t",
        "--threshold",
        type=float,
        default=0.0,
        help="max percentage of ambiguous bases in a group",
    )
    parser.add_argument(
        "-u",
        "--unambiguous",
        action="store_true",
        help="treat ambiguous sites as similarities",
    )
    parser.add_argument("-V", "--version", action="version", version="%(prog)s 0.1.0")
    return parser.parse_args(argv)


def _write(path: str, text: str) -> None:
    with open(path, "w", encoding="utf-8", newline="") as handle:
        handle.write(text)


def main(argv: list[str] | None = None) -> int:
    """Run the command: compute the matrix and write it to the output file."""
    start = time.perf_counter()
    args = _parse_args(argv)

    species, groups, group_offsets = read_species(args.species_file)
    n_groups = len(group_offsets)
    print(f"Number of groups: {n_groups}")

    dup_seqs = read_fasta(args.fasta_file, species, groups)
    print(f"Number of sequences (with duplicates): {len(dup_seqs)}")

    frequencies: AmbiguityInfo | None
    if args.unambiguous:
        frequencies, distance = None, k2p
    else:
        frequencies = compute_frequencies(dup_seqs, n_groups, args.threshold)
        print("Computed frequencies")
        distance = k2p_ambiguity

    seqs, seqs_offsets, min_dist_0 = remove_duplicates(dup_seqs, n_groups)
    print(f"Number of sequences (without duplicates): {len(seqs)}")

    result = group_min_max(seqs, seqs_offsets, min_dist_0, distance, frequencies)
    result_str = to_sv(result, species, groups, args.separator, 2)
    dest_path = args.output_file or get_output_file_path(args.fasta_file)
    try:
        _write(dest_path, result_str)
    except OSError as error:
        print(f"An error occurred while writing to output: {error}", file=sys.stderr)
    else:
        print(f"Output written to {dest_path}")

    if args.full_matrix_file:
        full = full_matrix(dup_seqs, distance, frequencies)
        full_str = to_sv(
            full,
            [s.name for s in dup_seqs],
            list(range(len(dup_seqs))),
            args.separator,
            15,
        )
        try:
            _write(args.full_matrix_file, full_str)
        except OSError as error:
            print(f"An error occurred while writing full matrix: {error}", file=sys.stderr)
        else:
            print(f"Full matrix written to {args.full_matrix_file}")

    print(f"Completion time: {time.perf_counter() - start:.3f}s")
    return 0


if __name__ == "__main__":
    sys.exit(main())