from flask import Blueprint, jsonify, current_app

main = Blueprint('main', __name__)

@main.route('/')
def index():
    return jsonify({'message': 'Welcome to the blankparty game server!'})

@main.route('/health')
def health():
    return jsonify({'status': 'ok', 'lobbies': len(current_app.extensions['lobbies'])})
