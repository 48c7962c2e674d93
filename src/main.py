import sys
import logging

from errors import InvalidHeader
from payments_engine import PaymentsEngine

logger = logging.getLogger(__name__)


def main():
    logging.basicConfig(
        level=logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    if len(sys.argv) != 2:
        print("Usage: toy-payments <input.csv>", file=sys.stderr)
        logger.error("Incorrect number of arguments")
        sys.exit(1)

    filepath = sys.argv[1]
    engine = PaymentsEngine()
    try:
        engine.process_file(filepath)
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Can not read input file `{filepath}`: {e}")
        sys.exit(1)
    except InvalidHeader as e:
        logger.error(f"{e} in `{filepath}`")
        sys.exit(1)

    try:
        engine.write_snapshot(sys.stdout)
        sys.stdout.flush()
    except OSError as e:
        logger.error(f"Can not write output: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
