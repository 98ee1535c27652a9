"""
K-Nearest Neighbors implementation for the Scratch ML library.
Classifies a point by majority vote among its closest labeled points.
"""

import numpy as np
from dataclasses import dataclass
from typing import Dict, List, Sequence

from ..utils.helpers import distance


@dataclass
class MapRecord:
    index: int
    distance: float
    label: str


@dataclass
class KNNPrediction:
    label: str
    vote_counts: Dict[str, int]
    votes: List[MapRecord]


class KNN:
    """
    K-Nearest Neighbors classifier.

    The training set is fixed at construction; every prediction scans it
    once, keeping only the k closest points seen so far.
    """

    def __init__(self, k: int, data: Sequence[Sequence[float]], labels: Sequence[str]):
        """
        Initialize KNN classifier.

        Args:
            k: Number of neighbors that vote
            data: Training points of shape (n_samples, n_features)
            labels: Label of every training point
        """
        if len(data) != len(labels):
            raise ValueError("data and labels must have the same number of samples")

        if k <= 0:
            raise ValueError("k must be positive")

        if k > len(data):
            raise ValueError(f"k ({k}) is larger than the number of samples ({len(data)})")

        self.k = k
        self.data = np.array(data, dtype=np.float64)
        self.data.setflags(write=False)
        self.labels = tuple(labels)

    def predict(self, point: Sequence[float]) -> KNNPrediction:
        """
        Predict the label of a point.

        Votes are counted in order of distance, so on a tie the label of
        the closer neighbour wins.

        Args:
            point: Query point

        Returns:
            Winning label, votes per label and the voting neighbours
        """
        votes = self.generate_distance_map(point)[:self.k]

        vote_counts: Dict[str, int] = {}
        for vote in votes:
            vote_counts[vote.label] = vote_counts.get(vote.label, 0) + 1

        sorted_labels = sorted(vote_counts, key=vote_counts.get, reverse=True)

        return KNNPrediction(label=sorted_labels[0], vote_counts=vote_counts, votes=votes)

    def generate_distance_map(self, point: Sequence[float]) -> List[MapRecord]:
        """
        Find the k training points closest to a point.

        A candidate is only added while the map has no maximum yet (or a
        maximum of zero) or when it is closer than the current maximum.
        The map is re-sorted and trimmed to k entries after every candidate.

        Args:
            point: Query point

        Returns:
            Up to k records sorted by ascending distance
        """
        if len(point) != self.data.shape[1]:
            raise ValueError(f"point has {len(point)} features, but KNN was fitted with "
                             f"{self.data.shape[1]} features")

        distance_map: List[MapRecord] = []
        max_distance_in_map = None

        for index, other_point in enumerate(self.data):
            this_distance = distance(point, other_point)

            if not max_distance_in_map or this_distance < max_distance_in_map:
                distance_map.append(MapRecord(index=index, distance=this_distance,
                                              label=self.labels[index]))

            distance_map.sort(key=lambda record: record.distance)

            if len(distance_map) > self.k:
                distance_map.pop()

            max_distance_in_map = distance_map[-1].distance

        return distance_map
