"""
Run configuration for the Scratch ML runners and command line.
"""

import logging
from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Optional


@dataclass
class RunConfig:
    """
    Parameters shared by the algorithm runners.

    Attributes:
        kmeans_k: Number of K-Means clusters
        kmeans_max_iterations: Iteration cap for K-Means
        knn_k: Number of KNN voting neighbours
        knn_samples_per_label: Generated training points per KNN label
        dataset_path: Labeled CSV used to train the Bayes classifier
        positive_dir: Directory of positive Bayes test samples
        negative_dir: Directory of negative Bayes test samples
        random_state: Random seed for data generation and centroids
        log_level: Logging level name
        verbose: Show progress bars
    """

    kmeans_k: int = 3
    kmeans_max_iterations: int = 1000
    knn_k: int = 3
    knn_samples_per_label: int = 1000
    dataset_path: Optional[str] = None
    positive_dir: Optional[str] = None
    negative_dir: Optional[str] = None
    random_state: Optional[int] = None
    log_level: str = 'INFO'
    verbose: bool = False

    def __post_init__(self):
        for name in ('kmeans_k', 'kmeans_max_iterations', 'knn_k', 'knn_samples_per_label'):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive")

        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"Unknown log level: {self.log_level}")

    @property
    def bayes_enabled(self) -> bool:
        """Whether every path the Bayes runner needs is configured."""
        return all((self.dataset_path, self.positive_dir, self.negative_dir))

    @classmethod
    def from_dict(cls, values: Dict[str, Any]) -> 'RunConfig':
        """Build a config from a mapping, ignoring unknown keys."""
        names = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in values.items() if key in names})

    def get_params(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def set_params(self, **params) -> 'RunConfig':
        """
        Set configuration values.

        Args:
            **params: Configuration values

        Returns:
            self: Config instance
        """
        names = {f.name for f in fields(self)}
        for key in params:
            if key not in names:
                raise ValueError(f"Invalid parameter {key}")

        # Validated on a copy so a rejected value never reaches this instance
        replace(self, **params)

        for key, value in params.items():
            setattr(self, key, value)

        return self
