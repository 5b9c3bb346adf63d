"""Command line entry point: ``userbench`` or ``python -m userbench``."""

import argparse
from typing import List, Optional

from userbench.apps import create_app
from userbench.config import VARIANTS, Settings, configure_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="userbench", description="Serve the userbench demo API.")
    parser.add_argument("--variant", choices=VARIANTS, help="application variant (default: standard)")
    parser.add_argument("--host", help="bind address (default: 0.0.0.0)")
    parser.add_argument("--port", type=int, help="bind port (default: 8000)")
    parser.add_argument("--log-level", help="logging level (default: INFO)")
    parser.add_argument(
        "--debug", action=argparse.BooleanOptionalAction, default=None, help="include tracebacks in error responses"
    )
    parser.add_argument("--reload", action="store_true", help="restart the server when Python files change")
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = Settings.from_env().override(
        variant=args.variant,
        host=args.host,
        port=args.port,
        log_level=args.log_level.upper() if args.log_level else None,
        debug=args.debug,
    )
    configure_logging(settings.log_level)

    if args.reload:
        from userbench.reload import run_with_reload

        child_argv = [
            "--variant", settings.variant,
            "--host", settings.host,
            "--port", str(settings.port),
            "--log-level", settings.log_level,
        ]
        child_argv.append("--debug" if settings.debug else "--no-debug")
        run_with_reload(child_argv)
        return

    app = create_app(settings.variant, settings)
    app.run(host=settings.host, port=settings.port, log_level=settings.log_level)


if __name__ == "__main__":
    main()
