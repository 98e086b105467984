import argparse
import logging
import sys

from linreg.config import TrainingConfig
from linreg.engine import Dataset, InvalidDatasetError
from linreg.json_logging import setup_logging
from linreg.optim import mean_squared_error
from linreg.train import fit

logger = logging.getLogger("linreg")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="linreg", description="Fit y = slope * x + b by gradient descent.")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--csv", help="two column x,y file")
    source.add_argument("--x", type=float, nargs="+", help="x samples")
    parser.add_argument("--y", type=float, nargs="+", help="y samples, used with --x")
    parser.add_argument("--epochs", type=int, default=TrainingConfig.epochs)
    parser.add_argument("--learning-rate", type=float, default=TrainingConfig.learning_rate)
    parser.add_argument("--verbose", action="store_true", help="log every epoch")
    parser.add_argument("--json-logs", action="store_true")
    parser.add_argument("--log-level", default=TrainingConfig.log_level)
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.x is not None and args.y is None:
        parser.error("--y is required with --x")
    if args.csv and args.y is not None:
        parser.error("--y cannot be used with --csv")

    try:
        config = TrainingConfig(
            epochs=args.epochs,
            learning_rate=args.learning_rate,
            verbose=args.verbose,
            json_logs=args.json_logs,
            log_level=args.log_level,
        )
    except ValueError as e:
        parser.error(str(e))

    setup_logging(config.log_level, json_format=config.json_logs)

    try:
        if args.csv:
            dataset = Dataset.from_csv(args.csv, verbose=config.verbose)
        else:
            dataset = Dataset(args.x, args.y, verbose=config.verbose)
    except (InvalidDatasetError, OSError) as e:
        logger.error("could not load dataset: %s", e)
        return 1

    line = fit(dataset, config.epochs, config.learning_rate)
    mse = mean_squared_error(dataset, line)
    logger.info("trained on %d points for %d epochs", len(dataset), config.epochs,
                extra={"slope": line.slope, "intercept": line.b, "mse": mse})
    print(f"{line}  (mse={mse})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
