"""CLI app entrypoint and error mapping."""

from __future__ import annotations

import sys

from storypush import AuthenticationError, ConfigError, ProviderError, StoryLoadError


def main(argv: list[str] | None = None) -> int:
    import storypush.cli as cli

    parser = cli.build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        cli.logging.basicConfig(level=cli.logging.DEBUG, format="%(name)s %(message)s", stream=sys.stderr)

    try:
        if args.command == "render":
            cli._run_render(args)
            return 0
        result = cli.asyncio.run(cli._run_push(args))
    except (ConfigError, StoryLoadError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 3
    except (AuthenticationError, ProviderError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 4
    except Exception as exc:  # pragma: no cover - unexpected failure
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if result.failed:
        return 5
    return 0


__all__ = ["main"]
