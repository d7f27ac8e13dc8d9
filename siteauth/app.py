# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

import atexit
import importlib
from typing import Any, Protocol, cast

from flask import Flask

from siteauth.infrastructure.container import Container
from siteauth.infrastructure.db import init_db
from siteauth.shared.config import AppConfig, load_config
from siteauth.shared.logging import logger, setup_logging
from siteauth.shared.middleware.error_handler import configure_error_handling
from siteauth.shared.middleware.request_logger import configure_request_logging


class _CORSCallable(Protocol):
    def __call__(self, app: Flask, **kwargs: Any) -> Any: ...


_flask_cors = importlib.import_module("flask_cors")
CORS = cast(_CORSCallable, _flask_cors.CORS)


def create_app(config: AppConfig | None = None, *, container: Container | None = None) -> Flask:
    config = config or (container.config if container else load_config())
    container = container or Container(config)
    setup_logging(debug_mode=config.debug_logging)

    # Fail before serving anything if the signing secret is unusable.
    _ = container.session_issuer

    init_db(container.engine)

    app = Flask(__name__)
    app.extensions["siteauth.container"] = container
    configure_error_handling(app, debug_mode=config.debug_logging)
    configure_request_logging(app, debug_mode=config.debug_logging)

    cors_kwargs: dict[str, object] = {
        "resources": {r"/v1/api/*": {"origins": config.security.allowed_origins}}
    }
    CORS(app, **cors_kwargs)
    app.register_blueprint(container.auth_controller.as_blueprint())
    atexit.register(container.notifications.shutdown)

    @app.after_request
    def _add_security_headers(resp):
        resp.headers.setdefault("X-Frame-Options", "DENY")
        resp.headers.setdefault("Referrer-Policy", "no-referrer")
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")
        resp.headers.setdefault("Cache-Control", "no-store")

        if config.security.enable_hsts:
            resp.headers.setdefault(
                "Strict-Transport-Security",
                "max-age=31536000; includeSubDomains; preload",
            )

        return resp

    logger.info("Flask app initialized")
    return app


if __name__ == "__main__":
    create_app().run(host="0.0.0.0", port=5000, debug=True)
