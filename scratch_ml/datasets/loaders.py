"""
Dataset loaders for the Scratch ML runners.
Covers labeled CSV text, directories of text samples, the iris dataset and
synthetic height/weight measurements.
"""

import logging
import os
import numpy as np
import pandas as pd
from typing import Callable, List, Optional, Tuple
from sklearn.datasets import load_iris

logger = logging.getLogger(__name__)

HEIGHT_WEIGHT_RANGES = {
    'Male': {'height': (150, 220), 'weight': (55, 120)},
    'Female': {'height': (140, 185), 'weight': (45, 100)},
}


def stream_labeled_rows(path: str, on_row: Callable[[str, str], None],
                        on_end: Optional[Callable[[], None]] = None,
                        chunksize: int = 1000) -> int:
    """
    Stream a headered CSV file row by row.

    The first column holds the label and the second the text. The file is
    read in chunks so large datasets never sit in memory at once.

    Args:
        path: CSV file path
        on_row: Called with ``(label, text)`` for every row
        on_end: Called once after the last row
        chunksize: Number of rows read per chunk

    Returns:
        Number of rows delivered
    """
    if chunksize <= 0:
        raise ValueError("chunksize must be positive")

    count = 0
    with pd.read_csv(path, chunksize=chunksize, dtype=str, keep_default_na=False) as reader:
        for chunk in reader:
            if chunk.shape[1] < 2:
                raise ValueError(f"{path} must have a label column and a text column")
            for label, text in chunk.iloc[:, :2].itertuples(index=False, name=None):
                on_row(label, text)
                count += 1

    logger.debug("Streamed %d rows from %s", count, path)

    if on_end is not None:
        on_end()

    return count


def read_text_files(directory: str) -> List[str]:
    """Read every file of a directory, in file name order."""
    contents = []
    for name in sorted(os.listdir(directory)):
        file_path = os.path.join(directory, name)
        if os.path.isfile(file_path):
            with open(file_path, 'r', encoding='utf-8') as f:
                contents.append(f.read())
    return contents


def load_iris_dataset() -> Tuple[np.ndarray, np.ndarray]:
    """
    Load the iris measurements with integer class indices.

    Returns:
        samples of shape (150, 4) and labels of shape (150,)
    """
    samples, labels = load_iris(return_X_y=True)
    return samples, labels


def generate_height_weight_data(samples_per_label: int = 1000,
                                random_state: Optional[int] = None
                                ) -> Tuple[List[List[int]], List[str]]:
    """
    Generate labeled height/weight pairs for KNN experiments.

    Each label draws integer heights and weights uniformly from its ranges
    in ``HEIGHT_WEIGHT_RANGES``, bounds included.

    Args:
        samples_per_label: Number of points generated for each label
        random_state: Random seed for reproducibility

    Returns:
        data and labels, one label per point
    """
    if samples_per_label <= 0:
        raise ValueError("samples_per_label must be positive")

    rng = np.random.RandomState(random_state)
    data = []
    labels = []

    for label, ranges in HEIGHT_WEIGHT_RANGES.items():
        low_height, high_height = ranges['height']
        low_weight, high_weight = ranges['weight']
        heights = rng.randint(low_height, high_height + 1, size=samples_per_label)
        weights = rng.randint(low_weight, high_weight + 1, size=samples_per_label)
        data.extend([int(h), int(w)] for h, w in zip(heights, weights))
        labels.extend([label] * samples_per_label)

    return data, labels
