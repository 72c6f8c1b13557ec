import os
import sys
from whatsnew import app
from whatsnew.config import APP_VERSION
from whatsnew.utils.logger import logger


if __name__ == '__main__':
    logger.info(f"Starting What's New service {APP_VERSION} with Python {sys.version}")

    # Get port from environment variable (for Render, Railway, etc.) or default to 5001
    port = int(os.environ.get('PORT', 5001))
    host = os.environ.get('HOST', '127.0.0.1')
    # Use 0.0.0.0 for production (Render, Railway, etc.)
    if os.environ.get('RENDER') or os.environ.get('RAILWAY') or os.environ.get('FLY') or os.environ.get('PORT'):
        host = '0.0.0.0'
    logger.info(f"Starting server on {host}:{port}")
    app.run(debug=False, host=host, port=port, use_reloader=False, threaded=True)
