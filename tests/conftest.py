"""Shared test fixtures for scratch_ml tests."""

import logging
from pathlib import Path

import pytest

from scratch_ml.ml.bayes_classifier import BayesClassifier

TRAINING_ROWS = [
    ("positive", "great movie with wonderful acting"),
    ("positive", "wonderful story and great cast"),
    ("positive", "great film, loved every moment"),
    ("negative", "terrible movie with awful acting"),
    ("negative", "awful story and terrible cast"),
    ("negative", "boring film, hated every moment"),
]


@pytest.fixture
def kmeans_data():
    """Two-dimensional sample used by the K-Means runner."""
    return [[1, 4], [6, 7], [18, 9], [10, 19], [2, 7], [10, 0], [2, 6], [8, 13], [11, 5]]


@pytest.fixture
def trained_classifier() -> BayesClassifier:
    """Classifier trained on one positive and one negative review."""
    classifier = BayesClassifier()
    classifier.train("great movie", "positive")
    classifier.train("terrible film", "negative")
    return classifier


@pytest.fixture
def labeled_csv(tmp_path: Path) -> Path:
    """CSV file with a label column followed by a text column."""
    lines = ["sentiment,review"]
    lines += [f'{label},"{text}"' for label, text in TRAINING_ROWS]
    path = tmp_path / "reviews.csv"
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def review_dirs(tmp_path: Path):
    """Directories holding one positive and one negative test review."""
    pos_dir = tmp_path / "pos"
    neg_dir = tmp_path / "neg"
    pos_dir.mkdir()
    neg_dir.mkdir()
    (pos_dir / "0_pos.txt").write_text("Great and wonderful!", encoding="utf-8")
    (neg_dir / "0_neg.txt").write_text("Terrible, simply awful.", encoding="utf-8")
    return pos_dir, neg_dir


@pytest.fixture
def runner_logger(caplog) -> logging.Logger:
    """Logger whose INFO records are captured by caplog."""
    caplog.set_level(logging.INFO)
    return logging.getLogger("tests.runner")
