"""Shipment tracker entry point.

Usage:
    shipping-tracker                    # Interactive console with demo shipments
    shipping-tracker --no-seed          # Start with an empty store
    shipping-tracker --log-level INFO   # Override LOG_LEVEL / SHIPPING_ENV
"""

import argparse

from shipping.bootstrap import build_service, seed_demo_enabled
from shipping.console import ConsoleApp
from shipping.utils.logging import configure_logging


def main(argv=None):
    parser = argparse.ArgumentParser(description="Shipment tracker console")
    parser.add_argument(
        "--no-seed",
        action="store_true",
        help="Do not register the demo shipments on start-up",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Log level (default: derived from LOG_LEVEL / SHIPPING_ENV)",
    )
    args = parser.parse_args(argv)

    configure_logging(args.log_level)

    app = ConsoleApp(build_service())
    if seed_demo_enabled() and not args.no_seed:
        app.seed_demo_data()
    app.run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
