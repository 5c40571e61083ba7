# app.py — reads a field and its trees, prints the total drone fly distance

from __future__ import annotations
import argparse
import logging
import sys
from typing import Callable, Optional, TextIO, Tuple

from drone_survey.config import FAIL_TOKEN, MAX_PLOT_PLOTS
from drone_survey.distance import fly_distance
from drone_survey.models import Field, TreeMap
from drone_survey.reader import StreamTripleProvider, TripleProvider
from drone_survey.validation import InvalidInputError, validate_field, validate_tree

logger = logging.getLogger(__name__)


class App:
    """
    Reads ``length width count`` and then ``count`` lines of ``x y height``
    from the provider. Writes the distance to ``out``; on any invalid input it
    writes FAIL to ``err`` and calls ``exit_fn(1)``.
    """

    def __init__(
        self,
        provider: TripleProvider,
        out: Optional[TextIO] = None,
        err: Optional[TextIO] = None,
        exit_fn: Callable[[int], None] = sys.exit,
    ):
        self.provider = provider
        self.out = out if out is not None else sys.stdout
        self.err = err if err is not None else sys.stderr
        self.exit_fn = exit_fn
        self.field: Optional[Field] = None
        self.trees: Optional[TreeMap] = None

    # region Input
    def read_field(self) -> Tuple[Field, int]:
        length, width, count = self.provider.read_triple()
        field = validate_field(length, width, count)
        return field, count

    def read_trees(self, field: Field, count: int) -> TreeMap:
        trees = TreeMap()
        for _ in range(count):
            x, y, height = self.provider.read_triple()
            # stops at the first bad tree, later lines are never read
            trees.plant(validate_tree(field, x, y, height))
        return trees
    # endregion

    def start(self) -> Optional[int]:
        try:
            field, count = self.read_field()
            trees = self.read_trees(field, count)
        except InvalidInputError as e:
            logger.info("invalid input: %s", e)
            self.throw_fail()
            return None

        logger.info("field %dx%d with %d trees", field.length, field.width, len(trees))
        self.field, self.trees = field, trees
        distance = fly_distance(field, trees)
        print(distance, file=self.out)
        return distance

    def throw_fail(self) -> None:
        print(FAIL_TOKEN, file=self.err)
        self.exit_fn(1)


# region CLI
def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="drone-survey",
        description="Total fly distance of a drone scanning a tree field in a snake pattern.",
    )
    parser.add_argument("--input", type=str, default=None,
                        help="Read input from this file instead of stdin")
    parser.add_argument("--plot", action="store_true",
                        help="Show the scan path and altitude profile")
    parser.add_argument("--log-level", type=str, default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging level (logs go to stderr)")
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    if args.input:
        try:
            f = open(args.input, "r")
        except OSError as e:
            parser.error(f"cannot read --input: {e}")
        with f:
            app = App(StreamTripleProvider(f))
            app.start()
    else:
        app = App(StreamTripleProvider(sys.stdin))
        app.start()

    if args.plot and app.field is not None:
        if app.field.n_plots > MAX_PLOT_PLOTS:
            logger.warning(
                "field %dx%d too large to plot (limit %d plots), skipping",
                app.field.length, app.field.width, MAX_PLOT_PLOTS,
            )
        else:
            # matplotlib is only pulled in when a figure is asked for
            from drone_survey.viz import show_flight
            show_flight(app.field, app.trees)
    return 0
# endregion


if __name__ == "__main__":
    sys.exit(main())
