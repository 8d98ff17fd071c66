"""
Full pipeline: input file in, ranked pairs out.

No math lives here. Only wiring and file I/O.
"""

import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, TextIO, Union

from vecangle.config import load_config
from vecangle.display import render_results
from vecangle.ingest import read_vectors
from vecangle.ranking import AngleResult, rank_pairs

logger = logging.getLogger(__name__)


def run_pipeline(
    input_path: Optional[Union[str, Path]] = None,
    config: Optional[Dict[str, Any]] = None,
    stream: Optional[TextIO] = None,
    output_path: Optional[Union[str, Path]] = None,
) -> List[AngleResult]:
    """
    Read vectors, rank every pair by angle, print the ranking.

    Args:
        input_path: Vector file. Defaults to config input.default_file.
        config: Full config dict (see vecangle.config). Defaults to CONFIG.
        stream: Where result lines go. Defaults to sys.stdout.
        output_path: Also write the ranking as .parquet or .csv.

    Returns:
        The ranked results.
    """
    if config is None:
        config = load_config()
    if input_path is None:
        input_path = config['input']['default_file']
    if stream is None:
        stream = sys.stdout

    logger.debug("reading %s", input_path)
    vectors = read_vectors(
        input_path,
        strict=config['input']['strict'],
        skip_blank=config['input']['skip_blank'],
    )

    results = rank_pairs(vectors)

    render_results(
        results,
        stream,
        precision=config['output']['precision'],
        symbol=config['output']['symbol'],
    )

    if output_path is not None:
        from vecangle.export import write_results
        written = write_results(results, output_path)
        logger.info("wrote %d pairs to %s", len(results), written)

    return results
