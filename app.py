"""Flask web application for the Gift Generator."""

import logging
import os

from flask import Flask, render_template, request, jsonify, session

from gift_agent.models import EndpointConfig, GenerationResult, Profile
from gift_agent.services import (
    ConfigurationError,
    ProfileService,
    ProfileValidationError,
    RecommendationError,
    RecommendationService,
    RecommendationServiceError,
    SettingsStore,
)

logger = logging.getLogger(__name__)

app = Flask(__name__)
app.config['SECRET_KEY'] = os.environ.get('SECRET_KEY', 'gift-agent-secret-key')
app.config['SETTINGS_STORE'] = SettingsStore()

# Session key for the last submitted profile (used by regenerate)
PROFILE_SESSION_KEY = 'last_profile'


def get_store() -> SettingsStore:
    return app.config['SETTINGS_STORE']


def get_config() -> EndpointConfig:
    """Snapshot of the current endpoint config."""
    return get_store().load_or_default()


def make_service(last_profile=None) -> RecommendationService:
    """Build the service for one request (overridable in tests)."""
    factory = app.config.get('SERVICE_FACTORY')
    if factory is not None:
        return factory(last_profile)
    return RecommendationService(last_profile=last_profile)


def config_payload(config: EndpointConfig) -> dict:
    return {
        'apiUrl': config.url,
        'apiKey': config.masked_key(),
        'model': config.model,
        'hasApiKey': config.has_api_key,
    }


def result_response(result: GenerationResult):
    if result.is_empty:
        return jsonify({
            'success': False,
            'warning': '未能解析礼物推荐，请检查API返回格式',
            'content': result.reply_text,
            'gifts': [],
        })
    return jsonify({
        'success': True,
        'message': '礼物推荐生成成功！',
        'gifts': [gift.to_dict() for gift in result.suggestions],
    })


def run_pipeline(service: RecommendationService, action):
    """Run generate/regenerate and map failures to HTTP responses."""
    try:
        result = action(service, get_config())
    except ConfigurationError as e:
        return jsonify({'error': str(e)}), 400
    except RecommendationError as e:
        logger.error("[api] generation failed: %s", e)
        return jsonify({'error': str(e)}), 502
    return result_response(result)


@app.route('/')
def index():
    """Render the main page."""
    return render_template('index.html')


@app.route('/api/config', methods=['GET'])
def api_get_config():
    """Return the current endpoint config with the key masked."""
    return jsonify(config_payload(get_config()))


@app.route('/api/config', methods=['POST'])
def api_save_config():
    """Save endpoint config; missing fields keep their current value."""
    data = request.get_json(silent=True) or {}
    config = get_config().with_updates(
        url=(data.get('apiUrl') or '').strip(),
        api_key=(data.get('apiKey') or '').strip(),
        model=(data.get('model') or '').strip(),
    )
    try:
        get_store().save(config)
    except OSError as e:
        logger.error("[api] failed to save config: %s", e)
        return jsonify({'error': f'保存配置失败: {e}'}), 500
    return jsonify({**config_payload(config), 'message': 'API配置已保存'})


@app.route('/api/generate', methods=['POST'])
def api_generate():
    """Validate the submitted profile and generate suggestions."""
    data = request.get_json(silent=True) or {}
    try:
        profile = ProfileService().from_form(data)
    except ProfileValidationError as e:
        return jsonify({'error': str(e), 'field': e.field}), 400

    session[PROFILE_SESSION_KEY] = profile.to_dict()
    service = make_service()
    return run_pipeline(service, lambda s, config: s.generate(profile, config))


@app.route('/api/regenerate', methods=['POST'])
def api_regenerate():
    """Regenerate with the profile stored in the session."""
    stored = session.get(PROFILE_SESSION_KEY)
    last_profile = Profile.from_dict(stored) if stored else None
    service = make_service(last_profile)
    try:
        return run_pipeline(service, lambda s, config: s.regenerate(config))
    except RecommendationServiceError as e:
        return jsonify({'error': str(e)}), 400


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO)
    port = int(os.environ.get('PORT', 5000))
    app.run(host='0.0.0.0', port=port, debug=os.environ.get('FLASK_DEBUG') == '1')
