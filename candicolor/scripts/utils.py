import logging
import os

from .edges import normalize_pair

EDGE_COLUMNS = ["Candidate1", "Candidate2", "Occurrences"]
RELEASE_COLUMNS = ["Candidate", "Release"]
INDEX_COLUMNS = ["Candidate", "Index"]


def validate_file_existence(file_paths):
    """Check if all files in the list exist."""
    missing_files = [str(file) for file in file_paths if not os.path.exists(file)]
    if missing_files:
        logging.error(f"The following files are missing: {', '.join(missing_files)}")
        raise FileNotFoundError(f"Missing files: {', '.join(missing_files)}")
    logging.debug("All files exist.")


def validate_columns(df, expected_columns, source):
    """Check that a loaded table carries the expected columns."""
    missing = [column for column in expected_columns if column not in df.columns]
    if missing:
        logging.error(f"{source} is missing columns: {', '.join(missing)}")
        raise ValueError(f"Missing columns in {source}: {', '.join(missing)}")


def read_tsv(file_path, expected_columns):
    """Load a TSV with identifiers kept as strings."""
    import pandas as pd

    validate_file_existence([file_path])
    df = pd.read_csv(file_path, sep='\t', dtype=str, keep_default_na=False)
    validate_columns(df, expected_columns, file_path)
    return df


def read_file_list(file_path):
    """Read a newline-separated list, skipping blank lines."""
    validate_file_existence([file_path])
    with open(file_path, 'r') as file:
        lines = file.readlines()
    return [line.strip() for line in lines if line.strip()]


def load_edge_weights(file_path):
    """Load co-occurrence edges as ``{(candidate1, candidate2): occurrences}``.

    Keys are order-normalized, so repeated pairs are summed whichever
    direction each row lists them in.
    """
    df = read_tsv(file_path, EDGE_COLUMNS)
    edge_weights = {}
    for row in df.itertuples(index=False):
        try:
            occurrences = int(row.Occurrences)
        except ValueError:
            logging.error(f"Invalid occurrence count {row.Occurrences!r} in {file_path}")
            raise
        key = normalize_pair(row.Candidate1, row.Candidate2)
        edge_weights[key] = edge_weights.get(key, 0) + occurrences
    logging.info(f"Loaded {len(edge_weights)} edges from {file_path}")
    return edge_weights


def load_release_membership(file_path):
    """Load ``(candidate, release)`` pairs."""
    df = read_tsv(file_path, RELEASE_COLUMNS)
    membership = list(zip(df['Candidate'], df['Release']))
    logging.info(f"Loaded {len(membership)} release memberships from {file_path}")
    return membership


def load_color_index(file_path):
    """Load ``{candidate: index}`` from a colors TSV written by the color command."""
    df = read_tsv(file_path, INDEX_COLUMNS)
    return {candidate: float(index) for candidate, index in zip(df['Candidate'], df['Index'])}
