"""Tests for the naive Bayes text classifier.

Covers training counts, Robinson token scores, Fisher probability
combination, ranking and the prediction preconditions.
"""

import math

import pytest

from scratch_ml.ml.bayes_classifier import BayesClassifier, BayesPrediction, LabelProbability


class TestTraining:
    def test_counts_start_empty(self):
        classifier = BayesClassifier()
        assert classifier.get_all_labels() == []
        assert classifier.get_label_document_count() == 0
        assert classifier.get_token_count("great") == 0

    def test_repeated_training_adds_exactly_n(self):
        classifier = BayesClassifier()
        for _ in range(5):
            classifier.train("wonderful wonderful story", "positive")

        assert classifier.get_label_document_count("positive") == 5
        assert classifier.get_token_count("wonderful", "positive") == 5
        assert classifier.get_token_count("story", "positive") == 5

    def test_tokens_counted_once_per_document(self):
        classifier = BayesClassifier(tokenizer=lambda text: text.split())
        classifier.train("good good good", "positive")
        assert classifier.get_token_count("good", "positive") == 1

    def test_aggregate_counts(self, trained_classifier):
        trained_classifier.train("great plot", "negative")

        assert trained_classifier.get_label_document_count() == 3
        assert trained_classifier.get_label_document_count("negative") == 2
        assert trained_classifier.get_token_count("great") == 2
        assert trained_classifier.get_token_count("great", "negative") == 1
        assert trained_classifier.get_token_count("great", "unknown") == 0

    def test_labels_keep_training_order(self, trained_classifier):
        assert trained_classifier.get_all_labels() == ["positive", "negative"]

    def test_custom_tokenizer_is_used(self):
        classifier = BayesClassifier(tokenizer=lambda text: ["fixed"])
        classifier.train("anything at all", "a")
        assert classifier.database.tokens == {"fixed": {"a": 1}}


class TestTokenScore:
    def test_token_seen_only_with_label(self, trained_classifier):
        # (3 * 0.5 + (1 + 1.0)) / (3 + 1)
        assert trained_classifier.calculate_token_score("great", "positive") == pytest.approx(0.875)

    def test_token_never_seen_with_label_falls_back_to_prior(self, trained_classifier):
        # (3 * 0.5 + (1 + 0.5)) / (3 + 1)
        assert trained_classifier.calculate_token_score("great", "negative") == pytest.approx(0.75)

    def test_unseen_token(self, trained_classifier):
        # (3 * 0.5 + (0 + 0.5)) / 3
        assert trained_classifier.calculate_token_score("unknown", "positive") == pytest.approx(2 / 3)

    def test_single_label_yields_nan_raw_score_without_raising(self):
        classifier = BayesClassifier()
        classifier.train("lonely label", "only")
        score = classifier.calculate_token_score("lonely", "only")
        assert math.isfinite(score)
        assert score > 1


class TestLabelProbability:
    def test_fisher_combination(self, trained_classifier):
        probability = trained_classifier.calculate_label_probability("positive", ["great"])
        assert probability == pytest.approx(0.875)

    def test_no_tokens_gives_one_half(self, trained_classifier):
        assert trained_classifier.calculate_label_probability("positive", []) == 0.5

    def test_token_shared_by_all_labels(self):
        classifier = BayesClassifier()
        classifier.train("shared", "a")
        classifier.train("shared", "b")
        # (3 * 0.5 + (2 + 0.5)) / (3 + 2)
        assert classifier.calculate_token_score("shared", "a") == pytest.approx(0.8)

    def test_uninformative_tokens_are_ignored(self):
        classifier = BayesClassifier()
        classifier.train("first", "a")
        classifier.train("second", "b")
        classifier.train("third", "c")
        # prior 1/3, unseen token scores 4/9, within epsilon of the prior
        assert classifier.calculate_label_probability("a", ["missing"]) == 0.5

    @pytest.mark.parametrize("tokens", [
        [],
        ["great"],
        ["terrible"],
        ["great", "terrible", "movie", "film"],
        ["unknown", "tokens", "only"],
        ["great"] * 50,
    ])
    def test_probability_is_bounded(self, trained_classifier, tokens):
        for label in trained_classifier.get_all_labels():
            probability = trained_classifier.calculate_label_probability(label, tokens)
            assert 0.0 <= probability <= 1.0


class TestPredict:
    def test_end_to_end_positive(self, trained_classifier):
        prediction = trained_classifier.predict("great")

        assert isinstance(prediction, BayesPrediction)
        assert prediction.label == "positive"
        assert prediction.probability == pytest.approx(0.875)

    def test_ranked_probabilities(self, trained_classifier):
        prediction = trained_classifier.predict("terrible")

        assert prediction.label == "negative"
        assert [p.label for p in prediction.probabilities] == ["negative", "positive"]
        assert prediction.probabilities[0].probability >= prediction.probabilities[1].probability
        assert all(isinstance(p, LabelProbability) for p in prediction.probabilities)

    def test_ties_keep_first_trained_label(self):
        classifier = BayesClassifier()
        classifier.train("great movie", "positive")
        classifier.train("terrible film", "negative")
        assert classifier.predict("").label == "positive"

        classifier = BayesClassifier()
        classifier.train("terrible film", "negative")
        classifier.train("great movie", "positive")
        assert classifier.predict("").label == "negative"

    def test_predict_before_training_raises(self):
        with pytest.raises(ValueError, match="at least two labels"):
            BayesClassifier().predict("great")

    def test_predict_with_single_label_raises(self):
        classifier = BayesClassifier()
        classifier.train("great movie", "positive")
        with pytest.raises(ValueError):
            classifier.predict("great")
