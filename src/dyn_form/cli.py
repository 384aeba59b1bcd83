"""
Command-line entry point for the dyn-form server.
"""

import argparse
import asyncio
import logging
import sys

from dyn_form.config import get_config
from dyn_form.default_schema import build_default_schema
from dyn_form.server import create_app, run_http_server
from dyn_form.storage import SubmissionStore


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    config = get_config()

    parser = argparse.ArgumentParser(
        description="dyn-form server",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Defaults (port 4000, ./db.json)
  dyn-form-server

  # Custom port and store
  dyn-form-server --port 8080 --db /var/lib/dyn-form/db.json

Environment Variables:
  PORT                    Port to listen on (default: 4000)
  DYN_FORM_HOST           Host to bind to (default: 0.0.0.0)
  DYN_FORM_DB_PATH        Submission file (default: db.json)
  DYN_FORM_CORS_ORIGINS   Comma-separated allowed origins (default: *)
  DYN_FORM_LOG_LEVEL      Log level (default: INFO)
        """,
    )

    parser.add_argument(
        "--host",
        default=config.server_host,
        help=f"Host to bind to (default: {config.server_host})",
    )

    parser.add_argument(
        "--port",
        type=int,
        default=config.server_port,
        help=f"Port to listen on (default: {config.server_port})",
    )

    parser.add_argument(
        "--db",
        default=config.db_path,
        help=f"Path of the submission file (default: {config.db_path})",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger = logging.getLogger("dyn-form")

    schema = build_default_schema()
    store = SubmissionStore(args.db)
    app = create_app(schema, store, config)

    logger.info(f"Serving form '{schema.title}' ({len(schema.fields)} fields), store: {store.path}")

    try:
        asyncio.run(
            run_http_server(
                app,
                host=args.host,
                port=args.port,
                log_level=config.log_level.lower(),
            )
        )
    except KeyboardInterrupt:
        logger.info("Server stopped.")
    except Exception as e:
        logger.error(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
