"""Reading species lists and FASTA alignments, and preparing them for distances."""

from __future__ import annotations

import os
import sys
from os import PathLike
from pathlib import PurePath

from .structs import REPLACEMENTS, AmbiguityInfo, Base, Frequencies, Offset, Sequence

StrPath = str | PathLike


def _read_text(path: StrPath) -> str:
    with open(path, encoding="utf-8") as handle:
        return handle.read()


def read_species(path: StrPath) -> tuple[list[str], list[int], list[int]]:
    """Read a species file: one group per line, species separated by commas.

    Returns the species names, the group of each name and the index of the
    first name of every group.
    """
    species: list[str] = []
    groups: list[int] = []
    offsets: list[int] = []
    for group, line in enumerate(_read_text(path).splitlines()):
        offsets.append(len(species))
        for name in line.split(","):
            groups.append(group)
            species.append(name.strip())
    return species, groups, offsets


def to_single_lines(text: str) -> list[str]:
    """Join wrapped sequence lines so that each header is followed by one line."""
    lines = (text + "\n>").splitlines()
    result = [lines[0]]
    buffer: list[str] = []
    for line in lines[1:]:
        if line.startswith(">"):
            result.append("".join(buffer))
            result.append(line)
            buffer.clear()
        else:
            buffer.append(line)
    result.pop()
    return result


def read_fasta(path: StrPath, species: list[str], groups: list[int]) -> list[Sequence]:
    """Read an alignment and assign every sequence to the group of its species.

    A sequence whose name matches no species, or species of more than one
    group, is reported on standard error and skipped.
    """
    text = _read_text(path)
    non_empty = [line for line in text.splitlines() if line]
    if len(non_empty) > 2 and not non_empty[2].startswith(">"):
        lines = to_single_lines(text)
    else:
        lines = non_empty

    sequences: list[Sequence] = []
    for position in range(0, len(lines), 2):
        name = lines[position][1:].strip()
        if position + 1 >= len(lines):
            raise ValueError(f"sequence '{name}' has no bases")
        of_groups = {group for s, group in zip(species, groups) if s in name}
        if len(of_groups) == 1:
            sequences.append(
                Sequence(
                    index=position // 2,
                    group=next(iter(of_groups)),
                    name=name,
                    seq=tuple(Base.from_char(c) for c in lines[position + 1]),
                )
            )
        elif not of_groups:
            print(f"WARNING: match not found for sequence '{name}'", file=sys.stderr)
        else:
            print(
                f"WARNING: species of sequence '{name}' is not unique. "
                f"Found matches for {len(of_groups)} species",
                file=sys.stderr,
            )
    return sequences


def compute_frequencies(
    sequences: list[Sequence], n_groups: int, threshold: float
) -> AmbiguityInfo:
    """Count bases per group and site and derive how each ambiguity code resolves."""
    if not sequences:
        raise ValueError("at least one sequence is required")
    length = len(sequences[0].seq)
    groups = [[Frequencies() for _ in range(length)] for _ in range(n_groups)]
    for sequence in sequences:
        sites = groups[sequence.group]
        for i, base in enumerate(sequence.seq):
            site = sites[i]
            if base.is_plain:
                site.count[base] += 1
                site.normal_count += 1
            else:
                site.ambiguous_count += 1
    for sites in groups:
        for site in sites:
            for code, bases in enumerate(REPLACEMENTS):
                total = max(1, sum(site.count[b] for b in bases))
                for b in bases:
                    site.frequencies[code][b] = site.count[b] / total
            site.percentage = site.ambiguous_count / max(
                1, site.ambiguous_count + site.normal_count
            )
    return AmbiguityInfo(groups=groups, threshold=threshold)


def remove_duplicates(
    sequences: list[Sequence], n_groups: int
) -> tuple[list[Sequence], list[Offset], list[bool]]:
    """Drop sequences identical to an earlier one of the same group.

    Returns the remaining sequences sorted by group and file position, the
    position and size of each group among them, and for each group whether a
    duplicate was found.
    """
    min_dist_0 = [False] * n_groups
    unique: dict[Sequence, Sequence] = {}
    for sequence in sequences:
        if sequence in unique:
            min_dist_0[sequence.group] = True
        else:
            unique[sequence] = sequence
    kept = sorted(unique.values(), key=lambda s: (s.group, s.index))
    offsets = [Offset() for _ in range(n_groups)]
    for i, sequence in enumerate(kept):
        offset = offsets[sequence.group]
        if offset.offset is None:
            offset.offset = i
        offset.count += 1
    return kept, offsets, min_dist_0


def get_output_file_path(path: str) -> str:
    """The default output path: the input path with its extension replaced by .csv."""
    head, tail = os.path.split(path)
    stem = PurePath(tail).stem if tail else ""
    if not head:
        return f"{stem}.csv"
    return f"{os.path.join(head, stem)}.csv"