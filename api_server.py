#!/usr/bin/env python3
"""REST API server for Mood Giphs."""

from flask import Flask, request, jsonify
from flask_cors import CORS
from moodgiphs.sources.giphy import GiphySource
from moodgiphs.exceptions import GiphSearchError
from moodgiphs.config import Config

app = Flask(__name__)
CORS(app)  # Enable CORS for all routes

# Lazy initialization - create the source on first request
source = None


def get_source():
    """Get or create the GiphySource instance."""
    global source
    if source is None:
        source = GiphySource()
    return source


@app.route('/health', methods=['GET'])
def health():
    """Health check endpoint."""
    return jsonify({
        'status': 'healthy',
        'service': 'Mood Giphs API',
        'version': '0.1.0'
    }), 200


@app.route('/api/status', methods=['GET'])
def get_status():
    """Get the current configuration status."""
    status = Config.validate()
    status['source_available'] = get_source().is_available()
    return jsonify({
        'success': True,
        'data': status
    }), 200


@app.route('/api/search', methods=['POST'])
def search():
    """
    Search Giphy for a mood.

    Request body:
    {
        "keyword": "happy"
    }

    Response:
    {
        "success": true,
        "data": {
            "keyword": "happy",
            "total_results": 25,
            "images": [{"image_url": "..."}, ...]
        }
    }
    """
    if not request.is_json:
        return jsonify({
            'success': False,
            'error': 'Content-Type must be application/json'
        }), 400

    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({
            'success': False,
            'error': 'Request body must be a JSON object'
        }), 400

    keyword = data.get('keyword', '')

    try:
        giphs = get_source().search(keyword)
    except GiphSearchError as e:
        app.logger.error("Search for %r failed: %s", keyword, e)
        return jsonify({
            'success': False,
            'error': e.message
        }), 502

    return jsonify({
        'success': True,
        'data': {
            'keyword': keyword,
            'total_results': len(giphs),
            'images': [giph.to_dict() for giph in giphs]
        }
    }), 200


@app.errorhandler(404)
def not_found(error):
    """Handle 404 errors."""
    return jsonify({
        'success': False,
        'error': 'Endpoint not found'
    }), 404


@app.errorhandler(500)
def internal_error(error):
    """Handle 500 errors."""
    return jsonify({
        'success': False,
        'error': 'Internal server error'
    }), 500


if __name__ == '__main__':
    print("=" * 60)
    print("Mood Giphs API Server")
    print("=" * 60)

    port = Config.PORT or 8000

    print(f"\n✓ Server will start on http://{Config.HOST}:{port}")
    print(f"✓ Debug mode: {Config.DEBUG}")
    print(f"✓ Giphy endpoint: {Config.GIPHY_BASE_URL}")

    print("\nAPI Endpoints:")
    print("  GET  /health           - Health check")
    print("  GET  /api/status       - Get configuration status")
    print("  POST /api/search       - Search for giphs")

    print("\nPress Ctrl+C to stop the server")
    print("=" * 60)

    app.run(host=Config.HOST, port=port, debug=Config.DEBUG)
