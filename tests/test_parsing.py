import math
import os

import pytest

from hooty.parsing import (
    compute_frequencies,
    get_output_file_path,
    read_fasta,
    read_species,
    remove_duplicates,
    to_single_lines,
)
from hooty.structs import REPLACEMENTS, Base, Sequence


def _seq(text, group=0, index=0, name="s"):
    return Sequence(index=index, group=group, name=name, seq=tuple(Base.from_char(c) for c in text))


def test_read_species(tmp_path):
    path = tmp_path / "species.txt"
    path.write_text("Homo sapiens, Pan\nCanis\n")
    species, groups, offsets = read_species(path)
    assert species == ["Homo sapiens", "Pan", "Canis"]
    assert groups == [0, 0, 1]
    assert offsets == [0, 2]


def test_read_species_missing_file(tmp_path):
    with pytest.raises(OSError):
        read_species(tmp_path / "absent.txt")


def test_to_single_lines_joins_wrapped_sequences():
    text = ">a\nAC\nGT\n>b\nTT\n"
    assert to_single_lines(text) == [">a", "ACGT", ">b", "TT"]


def test_read_fasta_single_line(tmp_path):
    path = tmp_path / "in.fasta"
    path.write_text(">alpha_1\nACGT\n\n>beta_1\nAC-N\n")
    seqs = read_fasta(path, ["alpha", "beta"], [0, 1])
    assert [s.name for s in seqs] == ["alpha_1", "beta_1"]
    assert [s.group for s in seqs] == [0, 1]
    assert [s.index for s in seqs] == [0, 1]
    assert seqs[1].seq == (Base.A, Base.C, Base.GAP, Base.N)


def test_read_fasta_wrapped_equals_single_line(tmp_path):
    wrapped = tmp_path / "wrapped.fasta"
    wrapped.write_text(">alpha_1\nAC\nGT\n>beta_1\nTT\nAA\n")
    flat = tmp_path / "flat.fasta"
    flat.write_text(">alpha_1\nACGT\n>beta_1\nTTAA\n")
    species, groups = ["alpha", "beta"], [0, 1]
    a = read_fasta(wrapped, species, groups)
    b = read_fasta(flat, species, groups)
    assert [(s.name, s.group, s.seq) for s in a] == [(s.name, s.group, s.seq) for s in b]


def test_read_fasta_warns_and_skips(tmp_path, capsys):
    path = tmp_path / "in.fasta"
    path.write_text(">unknown\nACGT\n>alpha_beta\nACGT\n>alpha_2\nAAAA\n")
    seqs = read_fasta(path, ["alpha", "beta"], [0, 1])
    err = capsys.readouterr().err
    assert "match not found for sequence 'unknown'" in err
    assert "not unique" in err
    assert [(s.name, s.index) for s in seqs] == [("alpha_2", 2)]


def test_read_fasta_same_group_species_not_ambiguous(tmp_path):
    path = tmp_path / "in.fasta"
    path.write_text(">Homo Pan\nAC\n")
    seqs = read_fasta(path, ["Homo", "Pan"], [0, 0])
    assert len(seqs) == 1 and seqs[0].group == 0


def test_compute_frequencies_counts():
    info = compute_frequencies([_seq("AG"), _seq("GN", index=1)], 1, 0.3)
    assert info.threshold == 0.3
    site0, site1 = info.groups[0]
    assert site0.count == [1, 0, 1, 0]
    assert site0.normal_count == 2 and site0.ambiguous_count == 0
    assert site1.ambiguous_count == 1
    assert site1.percentage == 0.5
    r = Base.R - Base.W
    assert site0[r][Base.A] == 0.5 and site0[r][Base.G] == 0.5


def test_compute_frequencies_resolution_sums_to_one():
    info = compute_frequencies([_seq("A"), _seq("C", index=1), _seq("G", index=2)], 2, 0.0)
    site = info.groups[0][0]
    for code, bases in enumerate(REPLACEMENTS):
        if any(site.count[b] for b in bases):
            assert math.isclose(sum(site[code]), 1.0)
    assert all(v == 0.0 for row in info.groups[1][0].frequencies for v in row)


def test_compute_frequencies_requires_sequences():
    with pytest.raises(ValueError):
        compute_frequencies([], 1, 0.0)


def test_remove_duplicates():
    seqs = [
        _seq("ACGT", group=1, index=0, name="b1"),
        _seq("ACGT", group=0, index=1, name="a1"),
        _seq("ACGT", group=0, index=2, name="a2"),
        _seq("TTTT", group=0, index=3, name="a3"),
    ]
    kept, offsets, min_dist_0 = remove_duplicates(seqs, 3)
    assert [s.name for s in kept] == ["a1", "a3", "b1"]
    assert min_dist_0 == [True, False, False]
    assert (offsets[0].offset, offsets[0].count) == (0, 2)
    assert (offsets[1].offset, offsets[1].count) == (2, 1)
    assert (offsets[2].offset, offsets[2].count) == (None, 0)


def test_get_output_file_path():
    assert get_output_file_path("seqs.fasta") == "seqs.csv"
    assert get_output_file_path(os.path.join("data", "seqs.fasta")) == os.path.join("data", "seqs") + ".csv"
    assert get_output_file_path("archive.tar.gz") == "archive.tar.csv"