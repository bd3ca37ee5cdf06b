# routes.py

from flask import (
    Blueprint, render_template, request, jsonify, redirect,
    url_for, session, current_app
)

from werkzeug.exceptions import HTTPException

from extensions import limiter
from services.storefront import AssetNotFoundError
from utils.session_state import get_controller, reset_state
from utils.translator import translate

# --- Blueprint Definitions ---
main_bp = Blueprint('main', __name__)
api_bp = Blueprint('api', __name__, url_prefix='/api')


# --- Helpers for JSON responses ---

def serialize_notification(notification):
    if notification is None:
        return None
    return {
        'message': translate(notification.key, **notification.params),
        'kind': notification.kind.value,
        'expires_at': notification.expires_at,
    }


def state_payload(controller, **extra):
    """Common response body: balance and the toast currently on screen."""
    payload = {
        'success': True,
        'credits': controller.state.credits,
        'notification': serialize_notification(controller.visible_notification()),
    }
    payload.update(extra)
    return payload


# ==============================================================================
# == PAGES
# ==============================================================================

@main_bp.route('/')
@limiter.limit("60 per minute")
def landing_page():
    # Every page load starts a fresh vault session
    state = reset_state()
    catalog = current_app.extensions['vault_catalog']

    return render_template(
        'user/index.html',
        assets=catalog.assets,
        featured=catalog.featured(),
        types=catalog.types(),
        tags=catalog.tags(),
        credits=state.credits,
        ad_reward=current_app.config['AD_REWARD_CREDITS'],
        notification_ms=int(current_app.config['NOTIFICATION_SECONDS'] * 1000),
    )


@main_bp.route('/set-language/<lang_code>')
def set_language(lang_code):
    if lang_code in current_app.config['SUPPORTED_LANGUAGES']:
        session['language'] = lang_code
    return redirect(request.referrer or url_for('main.landing_page'))


# ==============================================================================
# == JSON API (mocked backend)
# ==============================================================================

@api_bp.route('/assets', methods=['GET'])
@limiter.limit("120 per minute")
def list_assets():
    controller = get_controller()
    results = controller.search(
        request.args.get('q', ''),
        request.args.get('type', 'all'),
        request.args.get('tag', 'all'),
    )
    return jsonify(state_payload(
        controller,
        assets=[a.to_dict() for a in results],
        count=len(results),
        html=render_template(
            'user/_asset_grid.html',
            assets=results,
            ad_reward=current_app.config['AD_REWARD_CREDITS'],
        ),
    ))


@api_bp.route('/assets/<asset_id>', methods=['GET'])
def preview_asset(asset_id):
    controller = get_controller()
    try:
        asset = controller.select(asset_id)
    except AssetNotFoundError:
        return jsonify({'success': False, 'message': translate('asset_not_found')}), 404
    return jsonify(state_payload(controller, asset=asset.to_dict()))


@api_bp.route('/selection', methods=['DELETE'])
def close_preview():
    controller = get_controller()
    controller.close_preview()
    return jsonify(state_payload(controller, selected_id=None))


@api_bp.route('/ads/callback', methods=['POST'])
def ad_callback():
    data = request.get_json(silent=True) or {}
    amount = data.get('amount', current_app.config['AD_REWARD_CREDITS'])
    if isinstance(amount, bool) or not isinstance(amount, int):
        return jsonify({'success': False, 'message': translate('invalid_amount')}), 400

    controller = get_controller()
    try:
        controller.watch_ad(amount)
    except ValueError:
        return jsonify({'success': False, 'message': translate('invalid_amount')}), 400

    current_app.logger.info(f"Ad reward of {amount} credit(s) applied, balance {controller.state.credits}")
    return jsonify(state_payload(controller, earned=amount))


@api_bp.route('/credits/redeem', methods=['POST'])
def redeem_credits():
    data = request.get_json(silent=True) or {}
    asset_id = data.get('asset_id')
    if not asset_id:
        return jsonify({'success': False, 'message': translate('missing_asset')}), 400

    controller = get_controller()
    try:
        outcome = controller.redeem(asset_id)
    except AssetNotFoundError:
        return jsonify({'success': False, 'message': translate('asset_not_found')}), 404

    payload = state_payload(controller, asset_id=asset_id)
    if not outcome.accepted:
        payload['success'] = False
        payload['message'] = serialize_notification(controller.state.notification)['message']
        return jsonify(payload), 402

    payload['download_url'] = outcome.download_url
    payload['message'] = serialize_notification(controller.state.notification)['message']
    return jsonify(payload)


@api_bp.route('/notification', methods=['DELETE'])
def dismiss_notification():
    controller = get_controller()
    controller.dismiss_notification()
    return jsonify(state_payload(controller))


@api_bp.route('/session', methods=['GET'])
def session_snapshot():
    controller = get_controller()
    state = controller.state
    return jsonify(state_payload(
        controller,
        query=state.query,
        type_filter=state.type_filter,
        tag_filter=state.tag_filter,
        result_ids=list(state.result_ids),
        selected_id=state.selected_id,
    ))


@api_bp.errorhandler(Exception)
def api_error(e):
    if isinstance(e, HTTPException):
        return jsonify({'success': False, 'message': e.description}), e.code
    current_app.logger.error(f"Unhandled API error on {request.path}: {e}")
    return jsonify({'success': False, 'message': translate('server_error')}), 500
