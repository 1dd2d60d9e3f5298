"""
Allow running the responder as a module: python -m responder
"""
from typing import Optional

import click
import uvicorn

from responder.api import create_app
from responder.config import load_settings
from tintlog import ConfigError, LoggerRegistry


@click.command()
@click.option('--config', type=click.Path(), default=None, help='Path to config.yml')
@click.option('--host', default=None, help='Host to bind to')
@click.option('--port', type=int, default=None, help='Port to bind to')
def main(config: Optional[str], host: Optional[str], port: Optional[int]):
    """Run the status-code echo service"""
    try:
        settings = load_settings(config)
    except ConfigError as e:
        raise click.UsageError(str(e))

    if host is None:
        host = settings.host
    if port is None:
        port = settings.port

    registry = LoggerRegistry(level=settings.level)
    app = create_app(registry)

    registry.logger_for('main').info(f"Starting Responder on {host}:{port}")
    uvicorn.run(app, host=host, port=port)


if __name__ == '__main__':
    main()
