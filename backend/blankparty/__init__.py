import logging

from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
import click
from blankparty.config import Config

allowed_origins = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
    "http://localhost:5174",
    "http://127.0.0.1:5174",
]
socketio = SocketIO(cors_allowed_origins=allowed_origins, async_mode=None)

def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    flask_app.logger.setLevel(flask_app.config.get('LOG_LEVEL', 'INFO'))
    logging.getLogger('blankparty.services').setLevel(flask_app.config.get('LOG_LEVEL', 'INFO'))

    CORS(flask_app, supports_credentials=True, origins=allowed_origins)

    # One registry per app keeps test apps isolated from each other
    from blankparty.lobbies import LobbyRegistry
    flask_app.extensions['lobbies'] = LobbyRegistry()

    # Initialize Socket.IO after app is created
    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    # Import and register blueprints here
    from blankparty.main import main
    flask_app.register_blueprint(main)

    from blankparty.api.games import games
    # Mount game routes under /api to match frontend API client
    flask_app.register_blueprint(games, url_prefix='/api/games')

    # Register Socket.IO event handlers
    from blankparty.socketio_events import register_socketio_handlers
    register_socketio_handlers(testing=flask_app.config.get('TESTING', False))

    @click.command('list-decks')
    def list_decks_command():
        """Lists the prompt and answer libraries available to lobbies."""
        from blankparty.services.games.decks import DECK_KINDS, available_libraries
        for kind in DECK_KINDS:
            names = available_libraries(kind, base_dir=flask_app.config.get('DECK_LIBRARY_DIR'))
            click.echo(f"{kind}: {', '.join(names) if names else '(none)'}")

    @click.command('play-demo')
    @click.option('--players', default=4, show_default=True, help='Number of simulated players (>= 3).')
    @click.option('--hand-size', default=None, type=int, help='Cards per hand; defaults to DEFAULT_HAND_SIZE.')
    @click.option('--win-target', default=3, show_default=True, help='Points needed to win.')
    @click.option('--library', default=None, help='Deck library; defaults to DEFAULT_DECK_LIBRARY.')
    def play_demo_command(players, hand_size, win_target, library):
        """Plays a simulated match and prints every round."""
        from blankparty.demo import play_demo
        from blankparty.services.games import GameCoreError
        try:
            play_demo(
                num_players=players,
                hand_size=hand_size or flask_app.config.get('DEFAULT_HAND_SIZE', 10),
                win_target=win_target,
                library=library or flask_app.config.get('DEFAULT_DECK_LIBRARY', 'default'),
                deck_dir=flask_app.config.get('DECK_LIBRARY_DIR'),
                echo=click.echo,
            )
        except GameCoreError as exc:
            raise click.ClickException(exc.message)

    flask_app.cli.add_command(list_decks_command)
    flask_app.cli.add_command(play_demo_command)

    return flask_app
