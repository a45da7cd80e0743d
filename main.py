from rich.console import Console
from rich.pretty import pprint

from hubargs import parse

__prog__ = "hub"


if __name__ == '__main__':
    args = parse(shell=True, fancy=True, colorful=True)
    pprint(args)
    console = Console()
    for cmd in args.commands():
        console.print(cmd)
