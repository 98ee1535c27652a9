"""Runners feeding datasets to the algorithms and logging the results."""

from .algorithms import run_kmeans_algorithm, run_knn_algorithm, run_algorithms
from .bayes_runner import EvaluationResult, train_from_csv, tester, run_bayes_algorithm
from .ensemble import calculate_loss, run_random_forest, run_svm

__all__ = [
    'run_kmeans_algorithm', 'run_knn_algorithm', 'run_algorithms',
    'EvaluationResult', 'train_from_csv', 'tester', 'run_bayes_algorithm',
    'calculate_loss', 'run_random_forest', 'run_svm'
]
