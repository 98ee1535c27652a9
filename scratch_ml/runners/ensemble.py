"""
Random forest and SVM runners on the iris dataset.
Both wrap scikit-learn estimators and serve as a baseline for the
from-scratch algorithms.
"""

import logging
import numpy as np
from typing import Any, Dict, Optional, Sequence
from sklearn.ensemble import RandomForestClassifier
from sklearn.metrics import accuracy_score, confusion_matrix
from sklearn.model_selection import KFold, cross_val_predict
from sklearn.svm import SVC

from ..datasets.loaders import load_iris_dataset


def calculate_loss(expected: Sequence[Any], actual: Sequence[Any]) -> float:
    """
    Fraction of predictions that differ from the expected labels.

    Args:
        expected: True labels
        actual: Predicted labels of the same length

    Returns:
        Loss between 0 and 1
    """
    if len(expected) != len(actual):
        raise ValueError("expected and actual must have the same length")

    if len(expected) == 0:
        return 0.0

    return float(np.mean(np.asarray(expected) != np.asarray(actual)))


def run_random_forest(logger: logging.Logger, n_estimators: int = 100, max_features: int = 3,
                      bootstrap: bool = True, folds: int = 10,
                      random_state: Optional[int] = None) -> Dict[str, Any]:
    """
    Train a random forest on iris and report training and k-fold losses.

    Args:
        logger: Logger receiving the report
        n_estimators: Number of trees
        max_features: Features considered per split
        bootstrap: Sample training rows with replacement
        folds: Number of cross-validation folds
        random_state: Random seed for trees and fold shuffling

    Returns:
        Training loss, cross-validated loss and confusion matrix
    """
    logger.info("===================== RANDOM FOREST ALGORITHM START =======================")

    samples, labels = load_iris_dataset()
    params = dict(n_estimators=n_estimators, max_features=max_features,
                  bootstrap=bootstrap, random_state=random_state)

    forest = RandomForestClassifier(**params)
    forest.fit(samples, labels)
    predictions = forest.predict(samples)

    cv = KFold(n_splits=folds, shuffle=True, random_state=random_state)
    cv_predictions = cross_val_predict(RandomForestClassifier(**params), samples, labels, cv=cv)
    matrix = confusion_matrix(labels, cv_predictions)
    accuracy = accuracy_score(labels, cv_predictions)

    loss = calculate_loss(labels, predictions)
    cv_loss = 1 - accuracy

    logger.info("Predictions: %s", ",".join(str(p) for p in predictions))
    logger.info("Loss for predictions: %d%%", round(loss * 100))
    logger.info("Loss for predictions after cross validation %d%%", round(cv_loss * 100))
    logger.info("Confusion matrix:\n%s", matrix)

    logger.info("===================== RANDOM FOREST ALGORITHM END =======================")

    return {'loss': loss, 'cv_loss': cv_loss, 'confusion_matrix': matrix}


def run_svm(logger: logging.Logger, kernel: str = 'rbf', gamma: float = 0.5, C: float = 1.0,
            folds: int = 5, random_state: Optional[int] = None) -> Dict[str, Any]:
    """
    Train a C-SVC on iris and report training and k-fold losses.

    Args:
        logger: Logger receiving the report
        kernel: Kernel type
        gamma: Kernel coefficient
        C: Regularization parameter
        folds: Number of cross-validation folds
        random_state: Random seed for fold shuffling

    Returns:
        Training loss and cross-validated loss
    """
    logger.info("==================  START SVM ALGORITHM  =================")

    samples, labels = load_iris_dataset()

    svm = SVC(kernel=kernel, gamma=gamma, C=C)
    svm.fit(samples, labels)
    predictions = svm.predict(samples)

    cv = KFold(n_splits=folds, shuffle=True, random_state=random_state)
    cv_predictions = cross_val_predict(SVC(kernel=kernel, gamma=gamma, C=C), samples, labels, cv=cv)

    loss = calculate_loss(labels, predictions)
    cv_loss = calculate_loss(labels, cv_predictions)

    logger.info("Loss for predictions: %d%%", round(loss * 100))
    logger.info("Loss for predictions after cross checking: %d%%", round(cv_loss * 100))

    logger.info("==================  END SVM ALGORITHM  =================")

    return {'loss': loss, 'cv_loss': cv_loss}
