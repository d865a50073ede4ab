from __future__ import generator_stop

import logging
from argparse import ArgumentParser, ArgumentTypeError
from typing import IO, Callable, Dict, List, Optional

from rich.console import Console

from .config import DEFAULTS, load_config
from .rmq import SemiDynamicRMQTree
from .time import MeasureTime

logger = logging.getLogger(__name__)

HELP = """update KEY VALUE
rmq KEY1 KEY2
print
new TREE_SIZE
help
quit"""


def positive_int(s: str) -> int:

    """Used as argparse `type`, so errors show up as
    error: argument --size: invalid positive_int value: 'a'
    """

    number = int(s)

    if number < 1:
        msg = f"{s} is not a positive integer"
        raise ArgumentTypeError(msg)

    return number


class Session:

    """Interactive session working on one tree of the keys `1..size` mapped to themselves.
    The current tree is replaced by the `new` command.
    """

    def __init__(
        self,
        size: int = DEFAULTS["initial_size"],
        console: Optional[Console] = None,
        prompt: str = DEFAULTS["prompt"],
        stream: Optional[IO[str]] = None,
    ) -> None:

        self.console = console or Console()
        self.prompt = prompt
        self.stream = stream

        self.commands: Dict[str, Callable[[List[str]], bool]] = {
            "update": self.cmd_update,
            "rmq": self.cmd_rmq,
            "print": self.cmd_print,
            "new": self.cmd_new,
            "help": self.cmd_help,
            "quit": self.cmd_quit,
            "exit": self.cmd_quit,
        }

        self.tree = self.build_tree(size)

    def echo(self, text: str, style: Optional[str] = None) -> None:
        self.console.print(text, style=style, markup=False, highlight=False, soft_wrap=True)

    def build_tree(self, size: int) -> SemiDynamicRMQTree:

        with MeasureTime() as t_pairs:
            pairs = {i: i for i in range(1, size + 1)}

        with MeasureTime() as t_tree:
            tree = SemiDynamicRMQTree(pairs)

        self.echo(f"Built the key/value pairs in {t_pairs.get():,} nanoseconds.")
        self.echo(f"Built the RMQ tree in {t_tree.get():,} nanoseconds.")
        self.echo(f"Total time building the RMQ tree: {t_pairs.get() + t_tree.get():,} nanoseconds.")
        logger.debug("Built tree of size %d with height %d", size, tree.height)

        return tree

    # commands

    def cmd_update(self, args: List[str]) -> bool:
        key = int(args[0])
        value = int(args[1])

        with MeasureTime() as t:
            self.tree.update(key, value)

        self.echo(f"update in {t.get():,} nanoseconds.")
        return True

    def cmd_rmq(self, args: List[str]) -> bool:
        left_key = int(args[0])
        right_key = int(args[1])

        with MeasureTime() as t:
            value = self.tree.range_minimum(left_key, right_key)

        self.echo(f"rmq in {t.get():,} nanoseconds.")
        self.echo(str(value))
        return True

    def cmd_print(self, args: List[str]) -> bool:
        self.echo(str(self.tree))
        return True

    def cmd_new(self, args: List[str]) -> bool:
        size = int(args[0])
        self.tree = self.build_tree(size)
        return True

    def cmd_help(self, args: List[str]) -> bool:
        self.echo(HELP)
        return True

    def cmd_quit(self, args: List[str]) -> bool:
        self.echo("Bye!")
        return False

    # loop

    def execute(self, line: str) -> bool:
        """Runs one command line. Returns `False` if the session should end.
        Malformed commands and errors raised by the tree are reported and the session continues.
        """

        line = line.strip()
        if not line:
            return True

        command, *args = line.split()
        logger.debug("Command %s %s", command, args)

        try:
            try:
                func = self.commands[command]
            except KeyError:
                raise ValueError(f"Unknown command {command}") from None
            return func(args)
        except (LookupError, ValueError):
            logger.debug("Command failed: %s", line, exc_info=True)
            self.echo(f'ERROR: Could not parse command "{line}".', style="red")
            return True

    def read_line(self) -> str:
        line = self.console.input(self.prompt, markup=False, stream=self.stream)
        if self.stream is not None and not line:
            raise EOFError
        return line

    def run(self) -> None:
        while True:
            try:
                line = self.read_line()
            except EOFError:
                break

            if not self.execute(line):
                break


def main(argv: Optional[List[str]] = None) -> None:

    parser = ArgumentParser(description="Interactive shell for the semi-dynamic RMQ tree")
    parser.add_argument("--size", type=positive_int, help="Number of keys of the initial tree")
    parser.add_argument("--config", help="Path to a TOML configuration file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    config = load_config(args.config)
    size = args.size or config["initial_size"]

    session = Session(size, prompt=config["prompt"])
    session.run()


if __name__ == "__main__":
    main()
