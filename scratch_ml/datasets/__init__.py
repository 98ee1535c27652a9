"""Dataset loaders and generators used by the runners."""

from .loaders import (
    stream_labeled_rows,
    read_text_files,
    load_iris_dataset,
    generate_height_weight_data,
)

__all__ = [
    'stream_labeled_rows', 'read_text_files', 'load_iris_dataset',
    'generate_height_weight_data'
]
