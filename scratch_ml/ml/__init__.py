"""Learning algorithms implemented from scratch."""

from .bayes_classifier import BayesClassifier, BayesDatabase, BayesPrediction, LabelProbability
from .kmeans import KMeans, IterationLog, DimensionRange
from .knn import KNN, KNNPrediction, MapRecord

__all__ = [
    'BayesClassifier', 'BayesDatabase', 'BayesPrediction', 'LabelProbability',
    'KMeans', 'IterationLog', 'DimensionRange',
    'KNN', 'KNNPrediction', 'MapRecord'
]
