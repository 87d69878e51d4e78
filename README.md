# hooty

Computes the Kimura two-parameter (K2P) distance between aligned DNA
sequences. For every pair of species groups, it reports the minimum and
maximum distance between their sequences. Ambiguous IUPAC bases can be
resolved using the base frequencies that each group shows at each site.

## Installation

```
pip install .
```

To install the test requirements as well, run `pip install .[test]`.

## Usage

```
hooty ALIGNMENT.fasta SPECIES.txt [-o OUTPUT] [-f FULL_MATRIX] [-s {comma,semicolon,tab}] [-t THRESHOLD] [-u]
```

- `ALIGNMENT.fasta` is an aligned FASTA file. Sequences may be on one line
  or wrapped over several lines.
- `SPECIES.txt` holds one group per line. Each line lists comma-separated
  species names. A sequence belongs to a group when its FASTA header
  contains one of that group's names. A sequence that matches no group, or
  names from more than one group, is skipped with a warning on standard
  error.

Options:

- `-o`, `--output`: where to write the min-max matrix. By default this is the
  FASTA path with its extension replaced by `.csv`.
- `-f`, `--full_matrix`: also write the distance matrix between every pair
  of individual sequences to this file. This includes sequences that are
  duplicates of others.
- `-s`, `--separator`: the field separator. It is `comma`, `semicolon` (the
  default) or `tab`.
- `-t`, `--threshold`: the fraction of ambiguous bases a group must stay
  strictly below at a site for that site's ambiguity codes to be resolved by
  frequency. The default is `0.0`.
- `-u`, `--unambiguous`: do not resolve ambiguity codes. Sites where either
  sequence has an ambiguity code count as matches.
- `-V`, `--version`: print the version and exit.

Gaps, unknown characters and `N` are never compared. Without `-u`, a
differing site that involves an ambiguity code is handled in one of two
ways:

- If both groups are below the threshold at that site, the site adds the
  expected numbers of transitions and transversions. These are derived from
  each group's counts of plain bases at that site.
- Otherwise the site is left out of the comparison.

With the default threshold of `0.0`, every such site is left out.

Identical sequences within a group are compared only once. If a group holds
such a duplicate, its within-group minimum is zero.

The command prints progress messages, the output paths and the time taken.
If an output file cannot be written, it reports the error on standard error.

## Output

The min-max matrix is lower-triangular:

- The header row starts with an empty field and then gives each group's
  species joined by `-`.
- Each cell holds `min - max`, with distances as percentages to two decimal
  places.
- A zero distance is written as `0`.
- A `/` marks a value that cannot be computed. For example, a group with a
  single sequence and no duplicate has no within-group range.

The full matrix has the same layout, with one row and column per sequence
named by its FASTA header. Its values have fifteen decimal places.

## Library use

The building blocks can also be used directly:

- `hooty.parsing`:
  - `read_species` and `read_fasta` read the inputs.
  - `compute_frequencies` builds the per-group site frequencies.
  - `remove_duplicates` drops duplicated sequences.
  - `get_output_file_path` gives the default output path.
- `hooty.distances` provides `k2p` and `k2p_ambiguity`.
- `hooty.cli` provides the matrices:
  - `group_min_max` computes the group ranges.
  - `full_matrix` computes every pairwise distance.
- `hooty.printers.to_sv` formats a matrix as delimited text.
- `hooty.structs` holds the data types: `Base`, `Sequence`, `Separator`,
  `Frequencies`, `AmbiguityInfo` and `Offset`.