from flask import Blueprint, jsonify, request, current_app
from blankparty import socketio
from blankparty.lobbies import Lobby, LobbyNotFound, LobbyRegistry
from blankparty.services.games import GameCoreError
from blankparty.services.games.decks import DECK_KINDS, DeckLibraryNotFound, load_library


games = Blueprint('games', __name__)


def _lobbies() -> LobbyRegistry:
    return current_app.extensions['lobbies']


def _emit_state(lobby: Lobby, event: str) -> None:
    socketio.emit('state_update', {'game_code': lobby.code, 'event': event}, to=f"game:{lobby.code}", namespace='/ws')


def _game_finished(lobby: Lobby):
    return jsonify({'error': 'Game is finished', 'winner': lobby.winner}), 400


def _string_list(data: dict, key: str):
    values = data.get(key)
    if not isinstance(values, list) or not all(isinstance(v, str) and v for v in values):
        return None
    return values


def _index_list(data: dict, key: str):
    values = data.get(key)
    if not isinstance(values, list):
        return None
    # bool is an int subclass; reject it explicitly
    if not all(isinstance(v, int) and not isinstance(v, bool) for v in values):
        return None
    return values


@games.errorhandler(GameCoreError)
def handle_game_core_error(exc: GameCoreError):
    current_app.logger.info(f"[rejected] kind={exc.kind} details={exc.details}")
    return jsonify(exc.to_dict()), 400


@games.errorhandler(LobbyNotFound)
def handle_lobby_not_found(exc: LobbyNotFound):
    return jsonify({'error': 'Game not found', 'game_code': exc.code}), 404


@games.route('/create', methods=['POST'])
def create_game():
    data = request.get_json(silent=True) or {}
    cfg = current_app.config
    library = data.get('library', cfg.get('DEFAULT_DECK_LIBRARY'))
    if library is not None and not isinstance(library, str):
        return jsonify({'error': 'library must be a string'}), 400
    lobby = _lobbies().create(
        hand_size=int(cfg.get('DEFAULT_HAND_SIZE', 10)),
        win_target=int(cfg.get('DEFAULT_WIN_TARGET', 5)),
        code_length=int(cfg.get('GAME_CODE_LENGTH', 4)),
    )
    if library:
        for kind in DECK_KINDS:
            try:
                cards = load_library(kind, library, base_dir=cfg.get('DECK_LIBRARY_DIR'))
            except DeckLibraryNotFound:
                current_app.logger.warning(f"[create] game={lobby.code} no {kind} library named {library}")
                continue
            if kind == 'prompts':
                lobby.driver.add_prompts(cards)
            else:
                lobby.driver.add_answers(cards)
    current_app.logger.info(f"[create] game={lobby.code} library={library}")
    return jsonify({
        'message': 'New game created!',
        'game_code': lobby.code
    }), 201


@games.route('/<string:game_code>/state', methods=['GET'])
def get_game_state(game_code):
    lobby = _lobbies().get(game_code)
    return jsonify(lobby.to_dict())


@games.route('/<string:game_code>/players', methods=['POST'])
def add_player(game_code):
    data = request.get_json(silent=True) or {}
    name = data.get('name')
    if not isinstance(name, str) or not name.strip():
        return jsonify({'error': 'Player name is required'}), 400

    lobby = _lobbies().get(game_code)
    with lobby.lock:
        lobby.driver.add_player(name.strip())
    _emit_state(lobby, 'player_joined')
    return jsonify({'name': name.strip(), 'num_players': lobby.driver.assembler.num_players()}), 201


@games.route('/<string:game_code>/players/<string:name>', methods=['DELETE'])
def remove_player(game_code, name):
    lobby = _lobbies().get(game_code)
    with lobby.lock:
        lobby.driver.remove_player(name)
    _emit_state(lobby, 'player_left')
    return jsonify({'message': f'{name} left the game', 'num_players': lobby.driver.assembler.num_players()})


@games.route('/<string:game_code>/players', methods=['DELETE'])
def remove_all_players(game_code):
    lobby = _lobbies().get(game_code)
    with lobby.lock:
        lobby.driver.remove_all_players()
    _emit_state(lobby, 'players_cleared')
    return jsonify({'num_players': 0})


@games.route('/<string:game_code>/prompts', methods=['POST'])
def add_prompts(game_code):
    data = request.get_json(silent=True) or {}
    prompts = _string_list(data, 'prompts')
    if prompts is None:
        return jsonify({'error': 'prompts must be a list of non-empty strings'}), 400
    lobby = _lobbies().get(game_code)
    with lobby.lock:
        lobby.driver.add_prompts(prompts)
    _emit_state(lobby, 'prompts_changed')
    return jsonify({'num_prompts': lobby.driver.assembler.num_prompts()}), 201


@games.route('/<string:game_code>/prompts', methods=['DELETE'])
def clear_prompts(game_code):
    lobby = _lobbies().get(game_code)
    with lobby.lock:
        lobby.driver.clear_prompts()
    _emit_state(lobby, 'prompts_changed')
    return jsonify({'num_prompts': 0})


@games.route('/<string:game_code>/answers', methods=['POST'])
def add_answers(game_code):
    data = request.get_json(silent=True) or {}
    answers = _string_list(data, 'answers')
    if answers is None:
        return jsonify({'error': 'answers must be a list of non-empty strings'}), 400
    lobby = _lobbies().get(game_code)
    with lobby.lock:
        lobby.driver.add_answers(answers)
    _emit_state(lobby, 'answers_changed')
    return jsonify({'num_answers': lobby.driver.assembler.num_answers()}), 201


@games.route('/<string:game_code>/answers', methods=['DELETE'])
def clear_answers(game_code):
    lobby = _lobbies().get(game_code)
    with lobby.lock:
        lobby.driver.clear_answers()
    _emit_state(lobby, 'answers_changed')
    return jsonify({'num_answers': 0})


@games.route('/<string:game_code>/use', methods=['POST'])
def use_library(game_code):
    """Replace the prompts or answers with a named library."""
    data = request.get_json(silent=True) or {}
    kind = data.get('type')
    library = data.get('library')
    if kind not in DECK_KINDS or not isinstance(library, str) or not library:
        return jsonify({'error': f'type must be one of {list(DECK_KINDS)} and library is required'}), 400

    lobby = _lobbies().get(game_code)
    cards = load_library(kind, library, base_dir=current_app.config.get('DECK_LIBRARY_DIR'))
    with lobby.lock:
        if kind == 'prompts':
            lobby.driver.clear_prompts()
            lobby.driver.add_prompts(cards)
        else:
            lobby.driver.clear_answers()
            lobby.driver.add_answers(cards)
    _emit_state(lobby, f'{kind}_changed')
    return jsonify({
        'message': f'Loaded {len(cards)} {kind} from {library}',
        'num_prompts': lobby.driver.assembler.num_prompts(),
        'num_answers': lobby.driver.assembler.num_answers(),
    })


@games.route('/<string:game_code>/settings', methods=['POST'])
def update_settings(game_code):
    data = request.get_json(silent=True) or {}
    cfg = current_app.config
    lobby = _lobbies().get(game_code)

    hand_size = data.get('hand_size')
    win_target = data.get('win_target')
    if hand_size is not None:
        lo, hi = int(cfg.get('MIN_HAND_SIZE', 1)), int(cfg.get('MAX_HAND_SIZE', 25))
        if not isinstance(hand_size, int) or isinstance(hand_size, bool) or not lo <= hand_size <= hi:
            return jsonify({'error': f'hand_size must be between {lo} and {hi} inclusive'}), 400
    if win_target is not None:
        if not isinstance(win_target, int) or isinstance(win_target, bool) or win_target < 1:
            return jsonify({'error': 'win_target must be at least 1'}), 400

    with lobby.lock:
        # A running match keeps the hand size it was dealt with
        if hand_size is not None:
            lobby.driver.set_hand_size(hand_size)
        if win_target is not None:
            lobby.win_target = win_target
    _emit_state(lobby, 'settings_changed')
    return jsonify({'hand_size': lobby.driver.hand_size, 'win_target': lobby.win_target})


@games.route('/<string:game_code>/start', methods=['POST'])
def start_game(game_code):
    lobby = _lobbies().get(game_code)
    with lobby.lock:
        if lobby.status == 'finished':
            # Rematch with the same table
            ordered = lobby.driver.restart_game()
        else:
            ordered = lobby.driver.start_game()
        lobby.status = 'in_progress'
        lobby.round_number = 0
        lobby.current_round = None
        lobby.collected_answers = None
        lobby.last_ranking = lobby.driver.ranking()
        lobby.winner = None
    current_app.logger.info(f"[start] game={lobby.code} order={ordered}")
    _emit_state(lobby, 'game_started')
    payload = lobby.to_dict()
    payload['ordered_players'] = ordered
    return jsonify(payload)


@games.route('/<string:game_code>/rounds', methods=['POST'])
def start_round(game_code):
    lobby = _lobbies().get(game_code)
    with lobby.lock:
        if lobby.status == 'finished':
            return _game_finished(lobby)
        round_start = lobby.driver.start_round()
        lobby.round_number += 1
        lobby.current_round = round_start
        lobby.collected_answers = None
    current_app.logger.info(f"[round] game={lobby.code} round={lobby.round_number} judge={round_start.judge}")
    _emit_state(lobby, 'round_started')
    return jsonify({
        'round': lobby.round_number,
        'judge': round_start.judge,
        'prompt': round_start.prompt,
        'num_blanks': round_start.num_blanks,
    })


@games.route('/<string:game_code>/hand/<string:name>', methods=['GET'])
def get_hand(game_code, name):
    lobby = _lobbies().get(game_code)
    record = lobby.driver.engine.player(name)
    return jsonify({'player': record.name, 'hand': record.hand(), 'score': record.score})


@games.route('/<string:game_code>/submit', methods=['POST'])
def submit_answers(game_code):
    data = request.get_json(silent=True) or {}
    player = data.get('player')
    indices = _index_list(data, 'indices')
    if not isinstance(player, str) or indices is None:
        return jsonify({'error': 'player and a list of integer indices are required'}), 400

    lobby = _lobbies().get(game_code)
    with lobby.lock:
        if lobby.status == 'finished':
            return _game_finished(lobby)
        collected = lobby.driver.submit_answers(player, indices)
        if collected is not None:
            lobby.collected_answers = dict(collected)
    if collected is None:
        _emit_state(lobby, 'answer_submitted')
        return jsonify({'complete': False})
    _emit_state(lobby, 'answers_collected')
    return jsonify({
        'complete': True,
        'answers': [{'player': name, 'answer': answer} for name, answer in collected.items()],
    })


@games.route('/<string:game_code>/redraw', methods=['POST'])
def redraw_hands(game_code):
    data = request.get_json(silent=True) or {}
    players = _string_list(data, 'players')
    if players is None:
        return jsonify({'error': 'players must be a list of names'}), 400
    lobby = _lobbies().get(game_code)
    with lobby.lock:
        lobby.driver.redraw_hands(players)
    _emit_state(lobby, 'hands_redrawn')
    return jsonify({'redrawn': players})


@games.route('/<string:game_code>/choose', methods=['POST'])
def choose_winner(game_code):
    data = request.get_json(silent=True) or {}
    player = data.get('player')
    if not isinstance(player, str):
        return jsonify({'error': 'player is required'}), 400

    lobby = _lobbies().get(game_code)
    with lobby.lock:
        if lobby.status == 'finished':
            return _game_finished(lobby)
        ranking = lobby.driver.end_round(player)
        lobby.last_ranking = ranking
        lobby.collected_answers = None
        leader, top_score = ranking[0]
        if top_score >= lobby.win_target:
            lobby.status = 'finished'
            lobby.winner = leader
    current_app.logger.info(f"[choose] game={lobby.code} winner={player} leader={leader} score={top_score}")
    _emit_state(lobby, 'game_finished' if lobby.winner else 'round_ended')
    return jsonify({
        'ranking': [{'name': name, 'score': score} for name, score in ranking],
        'winner': lobby.winner,
        'status': lobby.status,
    })


@games.route('/<string:game_code>/end', methods=['POST'])
def end_game(game_code):
    lobby = _lobbies().get(game_code)
    with lobby.lock:
        lobby.driver.end_game()
        lobby.status = 'lobby'
        lobby.current_round = None
        lobby.collected_answers = None
    current_app.logger.info(f"[end] game={lobby.code}")
    _emit_state(lobby, 'game_ended')
    return jsonify(lobby.to_dict())
