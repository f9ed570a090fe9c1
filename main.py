#!/usr/bin/env python3
"""Main entry point for the folder size Prometheus exporter"""
import sys
import uvicorn
from config import Config
from app.server import MetricsServer
from collectors import FolderSizeCollector, render_collectors
from logging_config import setup_structured_logging, get_logger, log_server_startup, log_error


async def render_folder_sizes(request, collectors) -> str:
    return await render_collectors(collectors)


def main():
    """Main application entry point"""
    try:
        config = Config()

        setup_structured_logging(config)
        logger = get_logger(__name__)

        log_server_startup(logger, config)

        collectors = [FolderSizeCollector(config)]
        server = MetricsServer(config, render_folder_sizes, options=collectors)
        app = server.get_app()

        try:
            uvicorn.run(
                app,
                host=config.metrics_host,
                port=config.metrics_port,
                log_config=None  # We handle logging ourselves
            )
        finally:
            for collector in collectors:
                collector.cleanup()

    except Exception as e:
        logger = get_logger(__name__)
        log_error(logger, e, {"component": "main", "phase": "startup"})
        sys.exit(1)


if __name__ == '__main__':
    main()
