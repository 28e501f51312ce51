#!/usr/bin/env python
"""
CLI for housing price predictions.

Usage:
    python -m housingprice.cli.predict --sqft 1800 --beds 3 --baths 2 --location suburb
    python -m housingprice.cli.predict --sqft 2400 --beds 4 --baths 3 --kitchen closed --json
"""

import argparse
import json
import sys

from housingprice.core.constants import (
    FURNISHING_ORDINALS,
    KITCHEN_ORDINALS,
    LOCATION_ORDINALS,
)
from housingprice.exceptions import HousingPriceError
from housingprice.logging_config import setup_logging, get_logger
from housingprice.utils.price_format import format_price


def main(argv=None):
    """Main entry point for the prediction CLI."""
    parser = argparse.ArgumentParser(
        description="Predict a house price using the saved model",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    python -m housingprice.cli.predict --sqft 1800 --beds 3
    python -m housingprice.cli.predict --sqft 2400 --beds 4 --baths 3 --location beachside --furnishing furnished
    python -m housingprice.cli.predict --sqft 1200 --beds 2 --json
        """,
    )
    parser.add_argument("--sqft", type=float, required=True, help="Square footage")
    parser.add_argument("--beds", type=int, required=True, help="Number of bedrooms")
    parser.add_argument("--baths", type=int, default=2, help="Number of bathrooms (default: 2)")
    parser.add_argument("--age", type=int, default=10, help="Age in years (default: 10)")
    parser.add_argument(
        "--neighborhood",
        type=float,
        default=4.0,
        help="Neighborhood quality, 1.0-5.0 (default: 4.0)",
    )
    parser.add_argument("--parking", type=int, default=2, help="Parking spaces (default: 2)")
    parser.add_argument(
        "--location",
        choices=sorted(LOCATION_ORDINALS),
        default="suburb",
        help="Location type (default: suburb)",
    )
    parser.add_argument(
        "--furnishing",
        choices=sorted(FURNISHING_ORDINALS),
        default="semi-furnished",
        help="Furnishing state (default: semi-furnished)",
    )
    parser.add_argument(
        "--kitchen",
        choices=sorted(KITCHEN_ORDINALS),
        default="open",
        help="Kitchen layout (default: open)",
    )
    parser.add_argument("--json", action="store_true", help="Output as JSON")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Set log level (default: WARNING)",
    )

    args = parser.parse_args(argv)

    setup_logging(level=args.log_level, force=True)
    logger = get_logger(__name__)

    try:
        from housingprice.ml.feature_codec import build_record, encode
        from housingprice.ml.model_store import ModelStore
        from housingprice.ml.regression import predict

        store = ModelStore()
        if not store.load():
            logger.error("Model not found. Run 'python -m housingprice.cli.train_model' first.")
            sys.exit(1)

        record = build_record(
            area=args.sqft,
            bedrooms=args.beds,
            bathrooms=args.baths,
            age_years=args.age,
            neighborhood_score=args.neighborhood,
            parking_spaces=args.parking,
            location=args.location,
            furnishing=args.furnishing,
            kitchen=args.kitchen,
        )
        predicted_price = predict(store.inspect(), encode(record))

        if args.json:
            print(json.dumps({"predictedPrice": predicted_price, "input": record.to_dict()}, indent=2))
        else:
            print("\n" + "=" * 50)
            print("PREDICTION RESULT")
            print("=" * 50)
            print(f"Predicted Price: {format_price(predicted_price, cents=True)}")
            print("\nHouse Features:")
            print(f"  - Square Footage: {args.sqft} sq ft")
            print(f"  - Bedrooms: {args.beds}")
            print(f"  - Bathrooms: {args.baths}")
            print(f"  - Age: {args.age} years")
            print(f"  - Neighborhood Quality: {args.neighborhood}/5")
            print(f"  - Parking Spaces: {args.parking}")
            print(f"  - Location Type: {record.location}")
            print(f"  - Furnishing State: {record.furnishing}")
            print(f"  - Kitchen Type: {record.kitchen}")
            print()

    except HousingPriceError as e:
        logger.error("Prediction failed: %s", e, exc_info=True)
        if args.json:
            print(json.dumps({"error": str(e)}))
        else:
            print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
