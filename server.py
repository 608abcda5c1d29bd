#!/usr/bin/env python3
"""
Development server for the Interest Calculator API
"""

import logging
import webbrowser

import config
from app import create_app

logger = logging.getLogger(__name__)


def start_server(host=None, port=None, open_browser=None):
    """Start the Flask app and optionally open it in a browser"""
    if host is None:
        host = config.HOST
    if port is None:
        port = config.PORT
    if open_browser is None:
        open_browser = config.OPEN_BROWSER

    app = create_app()
    url = f"http://localhost:{port}"
    logger.info("%s %s running at %s (validation: %s)", config.APP_NAME, config.APP_VERSION,
                url, app.config['VALIDATION_POLICY'].value)

    if open_browser:
        try:
            webbrowser.open(url)
        except webbrowser.Error as e:
            logger.warning("Could not open a browser: %s", e)

    try:
        app.run(host=host, port=port, debug=False)
    except KeyboardInterrupt:
        logger.info("Server stopped by user")
    except OSError as e:
        logger.error("Could not start server on port %s: %s", port, e)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(start_server())
