"""Console entry for `readdocs`.

Agents spawn the command bare with stdin piped, which starts the stdio
server; anything else goes to the Typer CLI.
"""

import sys


def spawned_over_stdio() -> bool:
    return len(sys.argv) == 1 and not sys.stdin.isatty()


def main():
    if spawned_over_stdio():
        from readdocs.mcp.server import main as serve_stdio

        serve_stdio()
        return

    from readdocs.cli.main import app

    app()


if __name__ == "__main__":
    main()
