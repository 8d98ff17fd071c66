"""
Tabular export of ranked pairs.

One row per pair, in rank order:

    rank | first_index | second_index | first | second | theta

Parquet keeps ``first``/``second`` as List(Float64). CSV has no list
type, so there they are written in the bracketed text form.

Optional add-on outside the core read-rank-print pipeline: the CLI
never writes files. Only library callers reach it, through
`run_pipeline(output_path=...)` or by calling `write_results` directly.
"""

from pathlib import Path
from typing import Sequence, Union

import polars as pl

from vecangle.ranking import AngleResult

SCHEMA = {
    'rank': pl.Int64,
    'first_index': pl.Int64,
    'second_index': pl.Int64,
    'first': pl.List(pl.Float64),
    'second': pl.List(pl.Float64),
    'theta': pl.Float64,
}


def results_frame(results: Sequence[AngleResult]) -> pl.DataFrame:
    """Ranked results as a polars DataFrame (rank is 1-based)."""
    return pl.DataFrame(
        {
            'rank': list(range(1, len(results) + 1)),
            'first_index': [r.first_index for r in results],
            'second_index': [r.second_index for r in results],
            'first': [r.first.to_list() for r in results],
            'second': [r.second.to_list() for r in results],
            'theta': [r.theta for r in results],
        },
        schema=SCHEMA,
    )


def write_results(results: Sequence[AngleResult], path: Union[str, Path]) -> Path:
    """
    Write ranked results to ``path``; format chosen by suffix.

    Supported: .parquet, .csv
    """
    path = Path(path)
    suffix = path.suffix.lower()
    df = results_frame(results)

    if suffix == '.parquet':
        df.write_parquet(path)
    elif suffix == '.csv':
        df = df.with_columns(
            pl.Series('first', [str(r.first) for r in results], dtype=pl.String),
            pl.Series('second', [str(r.second) for r in results], dtype=pl.String),
        )
        df.write_csv(path)
    else:
        raise ValueError(f"Unsupported output format: {path.suffix!r}. Supported: ['.csv', '.parquet']")
    return path
