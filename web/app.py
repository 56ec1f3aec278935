"""
Web Interface for Declaration Previews
"""

import logging
import os
import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from flask import Flask, request, jsonify
from css_modules.declaration_emitter import DeclarationEmitter
from css_modules.naming import DEFAULT_FORMAT, get_convention
from css_modules.plugin import PluginOptions, TypedCssModules
from css_modules.selector_extractor import extract, is_eligible
from css_modules.stylesheet import StyleSheet

logger = logging.getLogger(__name__)

app = Flask(__name__)
emitter = DeclarationEmitter()

TRUE_VALUES = {'1', 'true', 'yes', 'on'}

@app.route('/health')
def health():
    return jsonify({'status': 'ok'})

@app.route('/declaration', methods=['POST'])
def declaration():
    """Render the declaration for a posted style sheet without writing it."""
    payload = request.get_json(silent=True)
    if payload is None:
        payload = {}
    if not isinstance(payload, dict):
        return jsonify({'error': 'The request body must be a JSON object'}), 400
    css = payload.get('css')
    if not isinstance(css, str):
        return jsonify({'error': 'A "css" string is required'}), 400

    try:
        convention = get_convention(payload.get('format', DEFAULT_FORMAT))
    except ValueError as e:
        return jsonify({'error': str(e)}), 400

    path = payload.get('path', 'styles.module.css')
    if not isinstance(path, str):
        return jsonify({'error': '"path" must be a string'}), 400
    if not is_eligible(path):
        return jsonify({'error': f'{path} is not a CSS Modules file'}), 422

    identifiers = extract(StyleSheet.parse(css, path), convention)
    logger.debug(f"Previewed {path}: {len(identifiers)} class names")
    return jsonify({
        'path': path,
        'identifiers': identifiers,
        'declaration': emitter.render(identifiers) if identifiers else None
    })

@app.route('/config')
def config():
    """Return the CSS Modules settings for the host build tool."""
    try:
        options = PluginOptions(
            format=request.args.get('format', DEFAULT_FORMAT),
            hash_length=request.args.get('hash_length', 6, type=int)
        )
    except ValueError as e:
        return jsonify({'error': str(e)}), 400

    production = request.args.get('production', '').lower() in TRUE_VALUES
    host_config = TypedCssModules(options).host_config(is_production=production)
    host_config['css']['postcss']['plugins'] = [p.postcss_plugin for p in host_config['css']['postcss']['plugins']]
    return jsonify(host_config)


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO)
    port = int(os.environ.get("PORT", 5000))
    app.run(host='0.0.0.0', port=port)
