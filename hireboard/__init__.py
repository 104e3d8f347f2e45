from flask import Flask, jsonify
from flask_migrate import Migrate
from werkzeug.exceptions import HTTPException
from .extensions import db, login_manager, rq

migrate = Migrate()


def create_app(config_object='config.Config'):
    """App factory.

    Every surface is a JSON API; HTTP errors raised with ``abort`` are turned
    into ``{"error": ...}`` bodies with the same status.
    """
    app = Flask(__name__)
    app.config.from_object(config_object)
    app.logger.setLevel(app.config.get('LOG_LEVEL', 'INFO'))

    db.init_app(app)
    migrate.init_app(app, db)
    login_manager.init_app(app)
    rq.init_app(app)

    from .models.user import AuthUser

    @login_manager.user_loader
    def load_user(user_id):
        return db.session.get(AuthUser, user_id)

    @login_manager.unauthorized_handler
    def unauthorized():
        return jsonify({"error": "Authentication required"}), 401

    @app.errorhandler(HTTPException)
    def http_error(e):
        return jsonify({"error": e.description or e.name}), e.code

    from .blueprints.auth import bp as auth_bp
    from .blueprints.jobs import bp as jobs_bp
    from .blueprints.dashboard import bp as dashboard_bp
    from .blueprints.profile import bp as profile_bp
    from .blueprints.hr import bp as hr_bp
    from .blueprints.interviews import bp as interviews_bp
    from .blueprints.admin import bp as admin_bp

    app.register_blueprint(auth_bp, url_prefix="/auth")
    app.register_blueprint(jobs_bp)
    app.register_blueprint(dashboard_bp)
    app.register_blueprint(profile_bp)
    app.register_blueprint(hr_bp)
    app.register_blueprint(interviews_bp)
    app.register_blueprint(admin_bp, url_prefix="/admin")

    @app.get('/')
    def index():
        return jsonify({"name": "hireboard", "status": "ok"})

    @app.get('/health')
    def health():
        try:
            db.session.execute(db.text("SELECT 1"))
        except Exception:
            app.logger.exception('Health check failed')
            return jsonify({"status": "error", "database": False}), 503
        return jsonify({"status": "ok", "database": True})

    return app
