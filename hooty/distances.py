"""Kimura two-parameter distances between aligned sequences."""

from __future__ import annotations

import math

from .structs import AmbiguityInfo, Base, Sequence

_TRANSITIONS = frozenset(
    {(Base.A, Base.G), (Base.G, Base.A), (Base.C, Base.T), (Base.T, Base.C)}
)
_PLAIN = (Base.A, Base.C, Base.G, Base.T)


def _k2p_formula(p: float, q: float) -> float:
    inner = 1.0 - 2.0 * q
    if math.isnan(p) or math.isnan(q) or inner < 0:
        return math.nan
    product = (1.0 - 2.0 * p - q) * math.sqrt(inner)
    if product == 0:
        return math.inf
    if product < 0:
        return math.nan
    return -0.5 * math.log(product)


def _informative_pairs(seq1: Sequence, seq2: Sequence) -> list[tuple[int, Base, Base]]:
    return [
        (i, b1, b2)
        for i, (b1, b2) in enumerate(zip(seq1.seq, seq2.seq))
        if b1.is_informative and b2.is_informative
    ]


def k2p(seq1: Sequence, seq2: Sequence, frequencies: AmbiguityInfo | None = None) -> float:
    """K2P distance treating ambiguous sites as similarities; NaN if no site compares."""
    pairs = _informative_pairs(seq1, seq2)
    if not pairs:
        return math.nan
    transitions = transversions = 0
    for _, b1, b2 in pairs:
        if b1 != b2 and b1.is_plain and b2.is_plain:
            if (b1, b2) in _TRANSITIONS:
                transitions += 1
            else:
                transversions += 1
    length = len(pairs)
    return _k2p_formula(transitions / length, transversions / length)


def _resolution(base: Base, site) -> list[float]:
    if base.is_plain:
        return [1.0 if b == base else 0.0 for b in _PLAIN]
    return site[base - Base.W]


def k2p_ambiguity(seq1: Sequence, seq2: Sequence, frequencies: AmbiguityInfo | None) -> float:
    """K2P distance resolving ambiguous sites from group frequencies.

    A differing site with an ambiguity code is weighted by the expected
    substitutions when both groups are below the ambiguity threshold at that
    site, and dropped otherwise. A plain base counts as certain.
    """
    if frequencies is None:
        raise ValueError("k2p_ambiguity needs ambiguity frequencies")
    pairs = _informative_pairs(seq1, seq2)
    length = len(pairs)
    groups1 = frequencies.groups[seq1.group]
    groups2 = frequencies.groups[seq2.group]
    transitions = transversions = 0
    expected_ts = expected_tv = 0.0
    for i, b1, b2 in pairs:
        if b1 == b2:
            continue
        if b1.is_plain and b2.is_plain:
            if (b1, b2) in _TRANSITIONS:
                transitions += 1
            else:
                transversions += 1
        elif (
            groups1[i].percentage < frequencies.threshold
            and groups2[i].percentage < frequencies.threshold
        ):
            f1 = _resolution(b1, groups1[i])
            f2 = _resolution(b2, groups2[i])
            for x in _PLAIN:
                for y in _PLAIN:
                    if x == y:
                        continue
                    weight = f1[x] * f2[y]
                    if (x, y) in _TRANSITIONS:
                        expected_ts += weight
                    else:
                        expected_tv += weight
        else:
            length -= 1
    if length == 0:
        return math.nan
    return _k2p_formula(
        (transitions + expected_ts) / length, (transversions + expected_tv) / length
    )