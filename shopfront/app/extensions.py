from flask_cors import CORS
from flask_migrate import Migrate
from flask_sqlalchemy import SQLAlchemy

# Bound to the app in create_app()
db = SQLAlchemy()
migrate = Migrate()
cors = CORS()
