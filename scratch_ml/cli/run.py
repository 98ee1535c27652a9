"""
Command line interface for Scratch ML.

Usage::

    scratch-ml kmeans --k 3
    scratch-ml knn --k 5 --samples-per-label 500
    scratch-ml bayes datasets/IMDB_review_dataset.csv datatests/bayes/pos datatests/bayes/neg
    scratch-ml all --dataset datasets/IMDB_review_dataset.csv --pos-dir ... --neg-dir ...
"""

import functools
import logging

import click

from ..config import RunConfig
from ..runners import (
    run_algorithms,
    run_bayes_algorithm,
    run_kmeans_algorithm,
    run_knn_algorithm,
    run_random_forest,
    run_svm,
)
from ..utils.logging_utils import init_logging


def _handle_errors(func):
    """Report configuration and file errors as clean command failures."""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except (ValueError, OSError) as e:
            raise click.ClickException(str(e)) from e
    return wrapper


@click.group()
@click.version_option(package_name="scratch_ml")
@click.option("--log-level", default="INFO", show_default=True, help="Logging level.")
@click.option("--verbose", is_flag=True, help="Show progress bars.")
@click.option("--seed", type=int, default=None, help="Random seed.")
@click.pass_context
def main(ctx: click.Context, log_level: str, verbose: bool, seed) -> None:
    """Run the from-scratch learning algorithms and report through logging."""
    try:
        config = RunConfig(log_level=log_level, verbose=verbose, random_state=seed)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--log-level") from e

    ctx.obj = {'config': config, 'logger': init_logging(config.log_level)}


@main.command()
@click.option("--k", "k", default=3, show_default=True, help="Number of clusters.")
@click.option("--max-iterations", default=1000, show_default=True)
@click.pass_obj
@_handle_errors
def kmeans(obj, k: int, max_iterations: int) -> None:
    """Cluster the built-in 2-D sample with K-Means."""
    config = obj['config'].set_params(kmeans_k=k, kmeans_max_iterations=max_iterations)
    run_kmeans_algorithm(obj['logger'].getChild("kmeans"), k=config.kmeans_k,
                         max_iterations=config.kmeans_max_iterations,
                         random_state=config.random_state)


@main.command()
@click.option("--k", "k", default=3, show_default=True, help="Number of voting neighbours.")
@click.option("--samples-per-label", default=1000, show_default=True)
@click.pass_obj
@_handle_errors
def knn(obj, k: int, samples_per_label: int) -> None:
    """Classify sample points against generated height/weight data."""
    config = obj['config'].set_params(knn_k=k, knn_samples_per_label=samples_per_label)
    run_knn_algorithm(obj['logger'].getChild("knn"), k=config.knn_k,
                      samples_per_label=config.knn_samples_per_label,
                      random_state=config.random_state)


@main.command()
@click.argument("dataset", type=click.Path(exists=True, dir_okay=False))
@click.argument("pos_dir", type=click.Path(exists=True, file_okay=False))
@click.argument("neg_dir", type=click.Path(exists=True, file_okay=False))
@click.pass_obj
@_handle_errors
def bayes(obj, dataset: str, pos_dir: str, neg_dir: str) -> None:
    """Train the Bayes classifier on DATASET and test it on POS_DIR and NEG_DIR."""
    config = obj['config']
    run_bayes_algorithm(obj['logger'].getChild("bayes"), dataset, pos_dir, neg_dir,
                        verbose=config.verbose)


@main.command("random-forest")
@click.option("--estimators", default=100, show_default=True)
@click.option("--folds", default=10, show_default=True)
@click.pass_obj
@_handle_errors
def random_forest(obj, estimators: int, folds: int) -> None:
    """Train a random forest on iris."""
    run_random_forest(obj['logger'].getChild("random_forest"), n_estimators=estimators,
                      folds=folds, random_state=obj['config'].random_state)


@main.command()
@click.option("--folds", default=5, show_default=True)
@click.pass_obj
@_handle_errors
def svm(obj, folds: int) -> None:
    """Train an RBF support vector classifier on iris."""
    run_svm(obj['logger'].getChild("svm"), folds=folds,
            random_state=obj['config'].random_state)


@main.command("all")
@click.option("--dataset", type=click.Path(exists=True, dir_okay=False), default=None)
@click.option("--pos-dir", type=click.Path(exists=True, file_okay=False), default=None)
@click.option("--neg-dir", type=click.Path(exists=True, file_okay=False), default=None)
@click.pass_obj
@_handle_errors
def run_all(obj, dataset, pos_dir, neg_dir) -> None:
    """Run K-Means, KNN and, when datasets are given, the Bayes classifier."""
    config = obj['config'].set_params(dataset_path=dataset, positive_dir=pos_dir,
                                      negative_dir=neg_dir)
    logger: logging.Logger = obj['logger']
    logger.info("Starting ML training application...")
    run_algorithms(config, logger)


if __name__ == "__main__":
    main()
