"""
Bayes classifier runner: trains from a labeled CSV file and measures
precision on directories of positive and negative samples.
"""

import logging
from dataclasses import dataclass
from typing import Iterable
from tqdm import tqdm

from ..datasets.loaders import read_text_files, stream_labeled_rows
from ..ml.bayes_classifier import BayesClassifier
from ..nlp.tokenizer import simple_tokenizer


@dataclass
class EvaluationResult:
    total: int = 0
    correct: int = 0

    @property
    def precision(self) -> float:
        """Share of correct predictions as a percentage."""
        if self.total == 0:
            return 0.0
        return 100 * self.correct / self.total

    def __add__(self, other: 'EvaluationResult') -> 'EvaluationResult':
        return EvaluationResult(total=self.total + other.total, correct=self.correct + other.correct)


def train_from_csv(path: str, classifier: BayesClassifier, logger: logging.Logger,
                   verbose: bool = False) -> int:
    """
    Train a classifier with every row of a labeled CSV file.

    Args:
        path: CSV file with a label column followed by a text column
        classifier: Classifier to train
        logger: Logger receiving progress messages
        verbose: Show a progress bar

    Returns:
        Number of training rows
    """
    pbar = tqdm(desc="Training", unit="rows", disable=not verbose)

    def on_row(label: str, text: str):
        classifier.train(text, label)
        pbar.update(1)

    def on_end():
        pbar.close()
        logger.info("Algorithm finished training")

    try:
        return stream_labeled_rows(path, on_row, on_end)
    finally:
        pbar.close()


def tester(data: Iterable[str], classifier: BayesClassifier, label: str,
           logger: logging.Logger) -> EvaluationResult:
    """
    Count how many samples the classifier assigns to the expected label.

    Args:
        data: Sample texts
        classifier: Trained classifier
        label: Expected label of every sample
        logger: Logger receiving progress messages

    Returns:
        Number of samples and number of correct predictions
    """
    logger.info("Testing sample reviews.... for label: %s", label)

    result = EvaluationResult()
    for record in data:
        prediction = classifier.predict(record)
        result.total += 1
        if prediction.label == label:
            result.correct += 1

    return result


def run_bayes_algorithm(logger: logging.Logger, dataset_path: str, positive_dir: str,
                        negative_dir: str, verbose: bool = False) -> EvaluationResult:
    """
    Train the Bayes classifier and test it on positive and negative samples.

    Args:
        logger: Logger receiving the report
        dataset_path: Labeled training CSV
        positive_dir: Directory of samples expected to be "positive"
        negative_dir: Directory of samples expected to be "negative"
        verbose: Show a training progress bar

    Returns:
        Combined test result
    """
    classifier = BayesClassifier(simple_tokenizer)
    logger.info("=============== BAYES ALGORITHM START ===================")
    logger.info("Training the algorithm")

    train_from_csv(dataset_path, classifier, logger, verbose=verbose)

    positive_test_data = read_text_files(positive_dir)
    negative_test_data = read_text_files(negative_dir)

    if positive_test_data and negative_test_data:
        logger.info("Data for bayes tester created successfully")

    positive_result = tester(positive_test_data, classifier, 'positive', logger)
    logger.info("Positive label testing result: %s", positive_result)

    negative_result = tester(negative_test_data, classifier, 'negative', logger)
    logger.info("Negative label testing result: %s", negative_result)

    result = positive_result + negative_result
    logger.info("Total testing result: %s", result)
    logger.info("Test precision: %.2f%%", result.precision)

    logger.info("=============== BAYES ALGORITHM END ===================")

    return result
