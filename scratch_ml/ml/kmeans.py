"""
K-Means clustering implementation for the Scratch ML library.
Centroids start at random positions inside the data bounds and are refined
until no point changes cluster or the iteration cap is hit.
"""

import logging
import numpy as np
from dataclasses import dataclass
from typing import List, Optional, Sequence

from ..utils.helpers import distance, mean

logger = logging.getLogger(__name__)


@dataclass
class IterationLog:
    centroids: np.ndarray
    iterations: int
    error: float
    did_reach_steady_state: bool


@dataclass
class DimensionRange:
    min: float
    max: float


class KMeans:
    """
    K-Means clustering.

    Each call to ``solve`` alternates between assigning every point to its
    nearest centroid and moving every centroid to the mean of its points,
    recording an ``IterationLog`` after each round.

    A centroid left without points moves to NaN coordinates and stays there.
    """

    def __init__(self, k: int, data: Sequence[Sequence[float]],
                 random_state: Optional[int] = None):
        """
        Initialize K-Means.

        Args:
            k: Number of clusters
            data: Points of shape (n_samples, n_features)
            random_state: Random seed for centroid initialization
        """
        if len(data) == 0:
            raise ValueError("data must contain at least one point")

        dimensionality = len(data[0])
        if any(len(point) != dimensionality for point in data):
            raise ValueError(f"All points must have {dimensionality} dimensions")

        if k <= 0:
            raise ValueError("k must be positive")

        if k > len(data):
            raise ValueError(f"k ({k}) is larger than the number of points ({len(data)})")

        self.k = k
        self.data = np.array(data, dtype=np.float64)
        self.data.setflags(write=False)
        self.random_state = random_state
        self._rng = np.random.RandomState(random_state)

        self.error = 0.0
        self.iterations = 0
        self.iteration_logs: List[IterationLog] = []
        self.centroids_assignments = {}
        self.centroids = None

        self.reset()

    def solve(self, max_iterations: int = 1000) -> IterationLog:
        """
        Run the algorithm until it converges or reaches the iteration cap.

        Args:
            max_iterations: Maximum number of iterations

        Returns:
            Log of the last iteration
        """
        if max_iterations <= 0:
            raise ValueError("max_iterations must be positive")

        while self.iterations < max_iterations:
            did_assignment_change = self.assign_points_to_centroids()
            self.update_centroid_locations()

            log = IterationLog(
                centroids=self.centroids.copy(),
                iterations=self.iterations + 1,
                error=self.calculate_error(),
                did_reach_steady_state=not did_assignment_change,
            )
            # A repeated solve after convergence rewrites the last entry
            del self.iteration_logs[self.iterations:]
            self.iteration_logs.append(log)

            logger.debug("Iteration %d: error=%.6f steady=%s centroids=%s",
                         log.iterations, log.error, log.did_reach_steady_state,
                         log.centroids.tolist())

            if not did_assignment_change:
                break

            self.iterations += 1

        return self.iteration_logs[-1]

    def get_dimensionality(self) -> int:
        """Number of coordinates per point, taken from the first point."""
        return len(self.data[0])

    def get_iteration_logs(self) -> List[IterationLog]:
        return self.iteration_logs

    def get_range_for_dimension(self, n: int) -> DimensionRange:
        """
        Find the bounds of one coordinate across all points.

        Args:
            n: Dimension index

        Returns:
            Minimum and maximum value of the dimension
        """
        values = self.data[:, n]
        return DimensionRange(min=float(np.min(values)), max=float(np.max(values)))

    def get_all_dimension_ranges(self) -> List[DimensionRange]:
        return [self.get_range_for_dimension(n) for n in range(self.get_dimensionality())]

    def init_random_centroids(self) -> np.ndarray:
        """
        Draw k centroids uniformly inside the bounds of the data.

        Returns:
            Centroids of shape (k, n_features)
        """
        ranges = self.get_all_dimension_ranges()
        centroids = np.empty((self.k, self.get_dimensionality()), dtype=np.float64)

        for i in range(self.k):
            for dimension, dimension_range in enumerate(ranges):
                centroids[i, dimension] = (dimension_range.min + self._rng.random_sample()
                                           * (dimension_range.max - dimension_range.min))

        return centroids

    def assign_point_to_centroid(self, point_index: int) -> bool:
        """
        Assign a point to its nearest centroid.

        The scan starts with a minimum distance of 0, which counts as "no
        candidate yet": a later centroid replaces a zero-distance first
        match regardless of its own distance.

        Args:
            point_index: Index of the point in the data

        Returns:
            Whether the point changed centroid
        """
        last_assigned_centroid = self.centroids_assignments.get(point_index)
        point = self.data[point_index]
        min_distance = 0.0
        assigned_centroid = 0

        for i, centroid in enumerate(self.centroids):
            distance_to_centroid = distance(point, centroid)

            if min_distance == 0 or distance_to_centroid < min_distance:
                min_distance = distance_to_centroid
                assigned_centroid = i

        self.centroids_assignments[point_index] = assigned_centroid

        return last_assigned_centroid != assigned_centroid

    def assign_points_to_centroids(self) -> bool:
        """
        Assign every point to its nearest centroid.

        Returns:
            Whether any point changed centroid
        """
        did_any_point_get_reassigned = False
        for i in range(len(self.data)):
            if self.assign_point_to_centroid(i):
                did_any_point_get_reassigned = True

        return did_any_point_get_reassigned

    def get_points_for_centroid(self, centroid_index: int) -> np.ndarray:
        indices = [i for i in range(len(self.data))
                   if self.centroids_assignments.get(i) == centroid_index]
        return self.data[indices]

    def update_centroid_location(self, centroid_index: int) -> np.ndarray:
        """
        Move a centroid to the mean of its assigned points.

        Args:
            centroid_index: Index of the centroid

        Returns:
            New centroid position
        """
        points = self.get_points_for_centroid(centroid_index)
        new_centroid = np.array([mean(points[:, dimension])
                                 for dimension in range(self.get_dimensionality())])

        self.centroids[centroid_index] = new_centroid

        return new_centroid

    def update_centroid_locations(self):
        for i in range(len(self.centroids)):
            self.update_centroid_location(i)

    def calculate_error(self) -> float:
        """
        Calculate the root mean squared distance between points and centroids.

        The running sum is overwritten for every point instead of being
        accumulated, so only the last point's squared distance is counted.
        Existing results depend on this.

        Returns:
            Current error
        """
        sum_distance_squared = 0.0

        for i, point in enumerate(self.data):
            centroid = self.centroids[self.centroids_assignments[i]]
            this_distance = distance(point, centroid)
            sum_distance_squared = this_distance * this_distance

        self.error = float(np.sqrt(sum_distance_squared / len(self.data)))

        return self.error

    def reset(self):
        """Return to the initial state with freshly drawn centroids."""
        self.error = 0.0
        self.iterations = 0
        self.iteration_logs = []
        self.centroids = self.init_random_centroids()
        self.centroids_assignments = {}
