#!/usr/bin/env python
"""
CLI for training the housing price model.

Usage:
    python -m housingprice.cli.train_model
    python -m housingprice.cli.train_model --samples 500
    python -m housingprice.cli.train_model --csv housing_data.csv
"""

import argparse
import sys

from housingprice.config import get_config
from housingprice.exceptions import HousingPriceError
from housingprice.logging_config import setup_logging, get_logger
from housingprice.utils.price_format import format_coefficients, format_price


def main(argv=None):
    """Main entry point for model training CLI."""
    parser = argparse.ArgumentParser(
        description="Train the housing price regression model",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    python -m housingprice.cli.train_model
    python -m housingprice.cli.train_model --samples 500 --seed 7
    python -m housingprice.cli.train_model --csv housing_data.csv --no-save
        """,
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--csv",
        type=str,
        default=None,
        help="Dataset CSV to train on",
    )
    source.add_argument(
        "--samples",
        type=int,
        default=None,
        help="Number of generated sample houses (default: from config or 20)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for generated samples (default: from config or 42)",
    )
    parser.add_argument(
        "--no-save",
        action="store_true",
        help="Do not persist the trained model",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Set log level (default: INFO)",
    )

    args = parser.parse_args(argv)

    setup_logging(level=args.log_level, force=True)
    logger = get_logger(__name__)

    config = get_config()
    logger.info("Model directory: %s", config.ml.model_dir)

    try:
        from housingprice.ml.dataset import load_training_csv
        from housingprice.ml.model_store import ModelStore
        from housingprice.ml.sample_data import generate_sample_records

        if args.csv:
            records = load_training_csv(args.csv)
        else:
            records = generate_sample_records(args.samples, seed=args.seed)

        store = ModelStore()
        model = store.train(records)

        print("\n=== Trained Model Information ===")
        for line in format_coefficients(model):
            print(line)

        metrics = store.metadata.get("metrics", {})
        print("\nIn-sample fit:")
        if metrics.get("r2") is not None:
            print(f"  R² Score: {metrics['r2']:.4f}")
        print(f"  MAE: {format_price(metrics.get('mae'))}")
        print(f"  MAPE: {metrics.get('mape', 0):.2f}%")
        print(f"  Training samples: {model.sample_count}")

        if not args.no_save:
            path = store.save()
            print(f"\nModel saved to: {path}")

    except (HousingPriceError, OSError, ValueError) as e:
        logger.error("Training error: %s", e, exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
