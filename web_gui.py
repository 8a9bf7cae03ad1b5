#!/usr/bin/env python3
"""Web-based GUI for Mood Giphs."""

from flask import Flask, render_template, request
from moodgiphs.sources.giphy import GiphySource
from moodgiphs.exceptions import GiphSearchError
from moodgiphs.config import Config

app = Flask(__name__)

# Lazy initialization - create the source on first request
source = None


def get_source():
    """Get or create the GiphySource instance."""
    global source
    if source is None:
        source = GiphySource()
    return source


@app.route('/')
def index():
    """Render the page where a user types in their mood."""
    return render_template('home.html')


@app.route('/moods', methods=['POST'])
def moods():
    """Search Giphy for the submitted mood and show the results."""
    keyword = request.form.get('keyword', '')

    try:
        giphs = get_source().search(keyword)
    except GiphSearchError as e:
        app.logger.error("Search for %r failed: %s", keyword, e)
        return render_template('error.html', keyword=keyword, message=e.message), 502

    return render_template('giphs/index.html', keyword=keyword, giphs=giphs)


if __name__ == '__main__':
    port = Config.PORT or 8080

    print("Starting Mood Giphs Web GUI...")
    if not get_source().is_available():
        print("⚠ No Giphy API key configured - searches will be rejected by Giphy")
    elif Config.validate()['using_demo_key']:
        print("⚠ Using the public Giphy demo key - set GIPHY_API_KEY for real use")
    print(f"\nOpen your browser and navigate to: http://localhost:{port}")
    print("\nPress Ctrl+C to stop the server")
    app.run(debug=Config.DEBUG, host=Config.HOST, port=port)
