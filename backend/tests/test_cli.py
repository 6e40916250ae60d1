from blankparty.demo import play_demo


def test_list_decks_command(flask_app):
    runner = flask_app.test_cli_runner()
    result = runner.invoke(args=['list-decks'])
    assert result.exit_code == 0
    assert 'prompts: default' in result.output
    assert 'answers: default' in result.output


def test_play_demo_command(flask_app):
    runner = flask_app.test_cli_runner()
    result = runner.invoke(args=['play-demo', '--players', '3', '--hand-size', '5', '--win-target', '2'])
    assert result.exit_code == 0
    assert 'The judge is' in result.output
    assert 'you have won!' in result.output


def test_play_demo_reports_assembly_errors(flask_app):
    runner = flask_app.test_cli_runner()
    result = runner.invoke(args=['play-demo', '--players', '2'])
    assert result.exit_code != 0
    assert 'at least 3 players' in result.output


def test_play_demo_function_returns_winner():
    lines = []
    winner, rounds = play_demo(num_players=4, hand_size=6, win_target=2, echo=lines.append)
    assert winner.startswith('Player ')
    assert rounds >= 2
    assert lines[-1] == f'Congratulations, {winner}, you have won!'
