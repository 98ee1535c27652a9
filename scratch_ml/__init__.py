"""
Scratch ML - statistical learning algorithms implemented from scratch.

This package provides:
- A naive Bayes text classifier with Robinson/Fisher token scoring
- K-Means clustering
- K-Nearest Neighbors classification
- Dataset loaders, runners and a command line reporting through logging
"""

__version__ = "0.1.0"

# ML algorithms
from scratch_ml.ml.bayes_classifier import BayesClassifier
from scratch_ml.ml.kmeans import KMeans
from scratch_ml.ml.knn import KNN

# NLP components
from scratch_ml.nlp.tokenizer import simple_tokenizer

# Utilities
from scratch_ml.utils.helpers import mean, distance
from scratch_ml.config import RunConfig

__all__ = [
    # ML
    'BayesClassifier', 'KMeans', 'KNN',

    # NLP
    'simple_tokenizer',

    # Utils
    'mean', 'distance', 'RunConfig'
]
