from flask import Flask

from shopfront.modules.catalog.routes import bp as catalog_bp
from shopfront.modules.users.routes import bp as users_bp

API_PREFIX = "/api"


def register_api_blueprints(app: Flask) -> None:
    app.register_blueprint(catalog_bp, url_prefix=API_PREFIX)
    app.register_blueprint(users_bp, url_prefix=API_PREFIX)

    # Root API document
    @app.get(API_PREFIX)
    def api_index():
        return {
            "name": "Shopfront API",
            "version": "0.1.0",
            "endpoints": {
                "catalog": ["/products", "/products/<id>", "/products/<id>/reviews", "/categories"],
                "users": ["/users/register", "/users/login", "/users/me"],
            },
        }, 200
