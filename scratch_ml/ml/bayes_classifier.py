"""
Naive Bayes text classifier for the Scratch ML library.
Scores labels per token with Robinson's smoothing and combines the scores
with Fisher's log-odds method.
"""

import numpy as np
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from ..nlp.tokenizer import simple_tokenizer

Tokenizer = Callable[[str], List[str]]


@dataclass
class BayesDatabase:
    """Document counts per label and occurrence counts per token and label."""
    labels: Dict[str, int] = field(default_factory=dict)
    tokens: Dict[str, Dict[str, int]] = field(default_factory=dict)


@dataclass
class LabelProbability:
    label: str
    probability: float


@dataclass
class BayesPrediction:
    label: str
    probability: float
    probabilities: List[LabelProbability]


class BayesClassifier:
    """
    Bernoulli-style naive Bayes classifier for short texts.

    Every training document contributes one count to its label and one count
    per distinct token. Prediction scores each token against each label,
    drops tokens that carry no information and combines the rest into a
    single probability per label.

    Predicting requires at least two trained labels. Inside the scoring
    methods zero denominators are not guarded: they yield NaN.
    """

    epsilon = 0.15
    rare_token_weight = 3

    def __init__(self, tokenizer: Optional[Tokenizer] = None):
        """
        Initialize the classifier with an empty database.

        Args:
            tokenizer: Function splitting text into distinct tokens
        """
        self.tokenizer = tokenizer if tokenizer is not None else simple_tokenizer
        self.database = BayesDatabase()

    def train(self, text: str, label: str):
        """
        Learn from a single labeled document.

        Args:
            text: Document text
            label: Label of the document
        """
        self.increment_label_document_count(label)
        for token in dict.fromkeys(self.tokenizer(text)):
            self.increment_token_count(token, label)

    def predict(self, text: str) -> BayesPrediction:
        """
        Predict the label of a document.

        Args:
            text: Document text

        Returns:
            Best label, its probability and all label probabilities ranked
        """
        if len(self.database.labels) < 2:
            raise ValueError("Classifier must be trained with at least two labels "
                             "before making predictions")

        probabilities = self.calculate_all_label_probabilities(text)
        best = probabilities[0]

        return BayesPrediction(
            label=best.label,
            probability=best.probability,
            probabilities=probabilities,
        )

    def calculate_all_label_probabilities(self, text: str) -> List[LabelProbability]:
        """
        Calculate the probability of every known label for a document.

        The result is sorted by descending probability. Equal probabilities
        keep the order in which labels were first trained.

        Args:
            text: Document text

        Returns:
            Ranked label probabilities
        """
        tokens = self.tokenizer(text)
        probabilities = [
            LabelProbability(label, self.calculate_label_probability(label, tokens))
            for label in self.get_all_labels()
        ]
        return sorted(probabilities, key=lambda item: item.probability, reverse=True)

    def calculate_label_probability(self, label: str, tokens: List[str]) -> float:
        """
        Calculate the probability that a tokenized document has a label.

        Token scores within ``epsilon`` of the uniform prior are ignored.
        The others are combined with Fisher's method, so a document without
        informative tokens gets 0.5.

        Args:
            label: Label to score
            tokens: Document tokens

        Returns:
            Probability in [0, 1]
        """
        prob_label = 1 / len(self.get_all_labels())

        token_scores = np.array([self.calculate_token_score(token, label) for token in tokens],
                                dtype=np.float64)
        token_scores = token_scores[np.abs(prob_label - token_scores) > self.epsilon]

        with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
            log_sum = np.sum(np.log(1 - token_scores) - np.log(token_scores))
            probability = 1 / (1 + np.exp(log_sum))

        return float(probability)

    def calculate_token_score(self, token: str, label: str) -> float:
        """
        Calculate the probability of a label given that a token is present.

        The raw Bayes score is blended with the label prior, weighted by
        ``rare_token_weight``, so rarely seen tokens stay close to the prior.
        The blend adds the token count to the raw score, ``(s*p + (n + raw))
        / (s + n)``, rather than weighting it by ``n`` as in Robinson's
        formula; existing results depend on this form.

        Args:
            token: Token to score
            label: Label to score against

        Returns:
            Smoothed token score
        """
        total_document_count = self.get_label_document_count()
        label_document_count = self.get_label_document_count(label)
        not_label_document_count = total_document_count - label_document_count

        prob_label = 1 / len(self.get_all_labels())
        prob_not_label = 1 - prob_label

        token_label_count = self.get_token_count(token, label)
        token_total_count = self.get_token_count(token)
        token_not_label_count = token_total_count - token_label_count

        with np.errstate(divide='ignore', invalid='ignore'):
            prob_token_given_label = np.float64(token_label_count) / label_document_count
            prob_token_given_not_label = np.float64(token_not_label_count) / not_label_document_count
            label_support = prob_token_given_label * prob_label
            not_label_support = prob_token_given_not_label * prob_not_label
            raw_token_score = label_support / (label_support + not_label_support)

        # An unseen or label-free token falls back to the prior
        if np.isnan(raw_token_score) or raw_token_score == 0:
            raw_token_score = prob_label

        s = self.rare_token_weight
        n = token_total_count

        return float((s * prob_label + (n + raw_token_score)) / (s + n))

    def get_all_labels(self) -> List[str]:
        """Return every label seen during training, in training order."""
        return list(self.database.labels)

    def increment_label_document_count(self, label: str):
        self.database.labels[label] = self.get_label_document_count(label) + 1

    def get_label_document_count(self, label: Optional[str] = None) -> int:
        """
        Return the number of documents trained for a label.

        Args:
            label: Label to look up. If None, count documents of every label

        Returns:
            Document count
        """
        if label is None:
            return sum(self.database.labels.values())
        return self.database.labels.get(label, 0)

    def increment_token_count(self, token: str, label: str) -> int:
        label_counts = self.database.tokens.setdefault(token, {})
        label_counts[label] = label_counts.get(label, 0) + 1
        return label_counts[label]

    def get_token_count(self, token: str, label: Optional[str] = None) -> int:
        """
        Return how many training documents of a label contained a token.

        Args:
            token: Token to look up
            label: Label to look up. If None, count across every label

        Returns:
            Occurrence count
        """
        label_counts = self.database.tokens.get(token, {})
        if label is None:
            return sum(label_counts.values())
        return label_counts.get(label, 0)
