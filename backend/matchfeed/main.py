from flask import Blueprint, current_app, jsonify

main = Blueprint('main', __name__)


@main.route('/')
def index():
    feed = current_app.extensions['live_feed']
    return jsonify({
        'message': 'Live match feed is running',
        'namespace': current_app.config.get('FEED_NAMESPACE', '/ws'),
        'games': len(feed.registry),
        'subscribers': len(feed.fanout),
    })
