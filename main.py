"""
main.py

This is the application factory for the AI Stock Vault demo storefront.
"""

from flask import Flask, current_app, g, session, request
import mistune

from config import Config
from extensions import babel, limiter
from mock_data import all_assets_data
from routes import main_bp, api_bp
from services.catalog import CatalogService
from services.gateway import AdRewardGateway, DownloadGateway
from utils.session_state import SessionStore
from utils.translator import translate


# --- Jinja2 Custom Filters ---

def format_credits(value):
    if value is None:
        return "0 cr"
    return f"{int(value):,} cr"


# --- Language Selection for Babel ---

def get_locale():
    supported = current_app.config['SUPPORTED_LANGUAGES']
    if session.get('language') in supported:
        return session['language']
    return request.accept_languages.best_match(supported) or current_app.config['BABEL_DEFAULT_LOCALE']


# --- Application Factory Function ---

def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)

    # --- Initialize Flask Extensions ---
    babel.init_app(app, locale_selector=get_locale)
    limiter.init_app(app)

    # --- Mock services shared by every request ---
    app.extensions['vault_catalog'] = CatalogService.from_records(
        all_assets_data, latency=app.config['CATALOG_LATENCY_SECONDS'])
    app.extensions['vault_ads'] = AdRewardGateway(latency=app.config['EARN_LATENCY_SECONDS'])
    app.extensions['vault_downloads'] = DownloadGateway(
        app.config['DOWNLOAD_BASE_URL'], latency=app.config['REDEEM_LATENCY_SECONDS'])
    app.extensions['vault_sessions'] = SessionStore(
        ttl_seconds=int(app.config['PERMANENT_SESSION_LIFETIME'].total_seconds()))

    # --- Register Jinja2 Filters ---
    app.jinja_env.filters['format_credits'] = format_credits
    app.jinja_env.filters['markdown'] = lambda text: mistune.html(text)

    # --- Register Blueprints ---
    app.register_blueprint(main_bp)
    app.register_blueprint(api_bp)

    # --- Request Hooks ---
    @app.before_request
    def before_request_tasks():
        session.permanent = True
        g.language = get_locale()

    # --- Context Processors ---
    @app.context_processor
    def inject_global_vars():
        return dict(
            store_name="AI Stock Vault",
            supported_languages=app.config['SUPPORTED_LANGUAGES'],
            translate=translate
        )

    app.logger.info("AI Stock Vault ready")
    return app
