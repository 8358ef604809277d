"""CLI - main entry point."""

import sys


def _log_level() -> str:
    """Configured log level, INFO when no usable config exists yet."""
    from ctxpack.api.config.CtxpackConfig import CtxpackConfig

    try:
        return CtxpackConfig.load().log.level
    except ValueError:
        return "INFO"


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    from ctxpack.api.config.CtxpackConfig import CtxpackConfig
    from ctxpack.cli._create_app import _create_app
    from ctxpack.utils.get_package_version import get_package_version
    from ctxpack.utils.logger import configure_logging

    if argv is None:
        argv = sys.argv[1:]

    if "--version" in argv or "-v" in argv:
        print(f"ctxpack {get_package_version()}")
        return 0

    configure_logging(CtxpackConfig.get_home_dir(), _log_level())

    app = _create_app()
    # Standalone mode reports usage errors itself and always ends in SystemExit
    try:
        app(args=argv, prog_name="ctxpack")
    except SystemExit as e:
        if e.code is None:
            return 0
        return e.code if isinstance(e.code, int) else 1
    return 0
