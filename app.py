import os
import logging
from flask import Flask
from flask_cors import CORS
from werkzeug.middleware.proxy_fix import ProxyFix

from config import ConfigHelper
from store import CandidateStore

logger = logging.getLogger(__name__)


def create_app(overrides=None):
    """Build the referral tracker app.

    ``overrides`` is applied on top of the environment configuration; tests
    use it to point DATA_FILE and UPLOAD_FOLDER at temporary locations.
    """
    app = Flask(__name__)
    app.config.update(ConfigHelper.get_app_config())
    if overrides:
        app.config.update(overrides)

    # Configure logging
    logging.basicConfig(
        level=getattr(logging, app.config['LOG_LEVEL'], logging.INFO),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s'
    )

    app.secret_key = app.config['SECRET_KEY']
    app.wsgi_app = ProxyFix(app.wsgi_app, x_proto=1, x_host=1)
    # Keep records in the same key order as the store file
    app.json.sort_keys = False

    # The dashboard may be served from another origin (see API_BASE)
    CORS(app, origins=app.config['ALLOWED_ORIGINS'])

    # Resolve against the working directory; send_from_directory would
    # otherwise resolve relative paths against the app root
    app.config['DATA_FILE'] = os.path.abspath(app.config['DATA_FILE'])
    app.config['UPLOAD_FOLDER'] = os.path.abspath(app.config['UPLOAD_FOLDER'])

    # Create upload directory if it doesn't exist
    os.makedirs(app.config['UPLOAD_FOLDER'], exist_ok=True)

    from routes import register_routes, STORE_EXTENSION

    store = CandidateStore(app.config['DATA_FILE'])
    store.ensure_exists()
    app.extensions[STORE_EXTENSION] = store

    register_routes(app)

    logger.info(f"Candidate store: {store.path}, uploads: {app.config['UPLOAD_FOLDER']}")
    return app
