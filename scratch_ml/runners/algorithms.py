"""
Runners for the K-Means and KNN algorithms on built-in datasets.
"""

import logging
from dataclasses import asdict
from typing import List, Optional, Sequence

from ..config import RunConfig
from ..datasets.loaders import generate_height_weight_data
from ..ml.kmeans import IterationLog, KMeans
from ..ml.knn import KNN, KNNPrediction
from .bayes_runner import run_bayes_algorithm

DEFAULT_KMEANS_DATA = [
    [1, 4],
    [6, 7],
    [18, 9],
    [10, 19],
    [2, 7],
    [10, 0],
    [2, 6],
    [8, 13],
    [11, 5],
]

DEFAULT_KNN_QUERIES = ((181, 65), (161, 58))


def _log_fields(logger: logging.Logger, record):
    for key, value in asdict(record).items():
        logger.info("%s: %s", key, value)


def run_kmeans_algorithm(logger: logging.Logger,
                         data: Sequence[Sequence[float]] = DEFAULT_KMEANS_DATA,
                         k: int = 3, max_iterations: int = 1000,
                         random_state: Optional[int] = None) -> IterationLog:
    """
    Cluster a dataset with K-Means and log the final iteration.

    Args:
        logger: Logger receiving the report
        data: Points to cluster
        k: Number of clusters
        max_iterations: Iteration cap
        random_state: Random seed for centroid initialization

    Returns:
        Log of the last iteration
    """
    logger.info("===================  START K-MEANS  =======================")

    kmeans = KMeans(k, data, random_state=random_state)
    result = kmeans.solve(max_iterations)

    logger.info("Process result:")
    _log_fields(logger, result)
    logger.info("=====================  END K-MEANS  =======================")

    return result


def run_knn_algorithm(logger: logging.Logger, k: int = 3, samples_per_label: int = 1000,
                      queries: Sequence[Sequence[float]] = DEFAULT_KNN_QUERIES,
                      random_state: Optional[int] = None) -> List[KNNPrediction]:
    """
    Classify query points against generated height/weight data.

    Args:
        logger: Logger receiving the report
        k: Number of voting neighbours
        samples_per_label: Generated training points per label
        queries: Points to classify
        random_state: Random seed for data generation

    Returns:
        One prediction per query
    """
    data, labels = generate_height_weight_data(samples_per_label, random_state=random_state)

    logger.info("===================  START KNN  =======================")

    knn = KNN(k, data, labels)

    logger.info("Process result:")
    results = []
    for number, query in enumerate(queries, start=1):
        prediction = knn.predict(query)
        logger.info("-------------  RESULT %d %s -------------------------- ", number, list(query))
        _log_fields(logger, prediction)
        results.append(prediction)

    logger.info("===================  END KNN  =======================")

    return results


def run_algorithms(config: RunConfig, logger: logging.Logger):
    """Run every from-scratch algorithm the configuration allows."""
    run_kmeans_algorithm(logger.getChild("kmeans"), k=config.kmeans_k,
                         max_iterations=config.kmeans_max_iterations,
                         random_state=config.random_state)
    run_knn_algorithm(logger.getChild("knn"), k=config.knn_k,
                      samples_per_label=config.knn_samples_per_label,
                      random_state=config.random_state)

    if config.bayes_enabled:
        run_bayes_algorithm(logger.getChild("bayes"), config.dataset_path,
                            config.positive_dir, config.negative_dir, verbose=config.verbose)
    else:
        logger.info("Bayes algorithm skipped: dataset paths are not configured")
