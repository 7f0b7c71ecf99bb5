# main.py
"""
Command-line runner.

    python main.py mission.txt
    python main.py --json < mission.txt
    echo "5 3 1 1 E RFRFRFRF" | python main.py --plot
"""
import argparse
import logging
import sys
from typing import List, Optional

from mars_mission.mission.processor import MissionProcessor, format_mission_results
from mars_mission.utils.errors import InputFormatError

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_BAD_INPUT = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run a Mars robot mission")
    parser.add_argument(
        "mission",
        nargs="?",
        default="-",
        help="Mission file, or - for stdin (default: -)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the full mission results as JSON",
    )
    parser.add_argument(
        "--plot",
        action="store_true",
        help="Show the final grid with matplotlib",
    )
    parser.add_argument(
        "--max-coordinate",
        type=int,
        default=None,
        help="Largest allowed grid coordinate (overrides MAX_GRID_COORDINATE)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )
    return parser


def read_mission(path: str) -> str:
    """Read mission text from `path`; "-" reads stdin without closing it."""
    if path == "-":
        return sys.stdin.read()
    with open(path, encoding="utf-8") as handle:
        return handle.read()


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    text = read_mission(args.mission)

    processor = MissionProcessor(max_coordinate=args.max_coordinate)
    try:
        results = processor.run(text)
    except InputFormatError as e:
        logger.debug("Rejected mission input", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return EXIT_BAD_INPUT

    if args.json:
        print(results.model_dump_json(indent=2))
    else:
        print(format_mission_results(results.text_output))

    if args.plot:
        # Imported lazily so text-only runs never touch a display backend
        import matplotlib.pyplot as plt
        from dashboard import plot_mission

        plot_mission(results.visualization_data)
        plt.show()

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
