import pytest

from salesianos import cli
from salesianos.exceptions import ReportError, StorageError


@pytest.fixture(autouse=True)
def quiet_setup(mocker, tmp_path):
    mocker.patch('salesianos.cli.logfire')
    return mocker.patch('salesianos.cli.setup_local_logging', return_value=tmp_path / 'run.log')


@pytest.fixture
def runner_cls(mocker):
    return mocker.patch('salesianos.cli.ScrapeRunner')


@pytest.fixture
def builder_cls(mocker):
    return mocker.patch('salesianos.cli.ReportBuilder')


def test_help(config, capsys):
    assert cli.main(['help'], config) == 0
    assert 'scrape' in capsys.readouterr().out


def test_scrape_success(config, runner_cls, builder_cls):
    assert cli.main(['scrape'], config) == 0

    runner_cls.return_value.run.assert_called_once()
    builder_cls.assert_not_called()


def test_scrape_failure_exit_code(config, runner_cls):
    runner_cls.return_value.run.side_effect = RuntimeError('boom')

    assert cli.main(['scrape'], config) == 1


def test_process_without_data_fails(config):
    assert cli.main(['process'], config) == 1


def test_process_success(config, builder_cls):
    assert cli.main(['process'], config) == 0
    builder_cls.return_value.build.assert_called_once()


def test_both_skips_reports_when_scrape_fails(config, runner_cls, builder_cls):
    runner_cls.return_value.run.side_effect = RuntimeError('boom')

    assert cli.main(['both'], config) == 1
    builder_cls.assert_not_called()


def test_both_runs_scrape_then_process(config, runner_cls, builder_cls):
    assert cli.main(['both'], config) == 0

    runner_cls.return_value.run.assert_called_once()
    builder_cls.return_value.build.assert_called_once()


def test_both_reports_process_failure(config, runner_cls, builder_cls):
    builder_cls.return_value.build.side_effect = ReportError('missing all_data.json')

    assert cli.main(['both'], config) == 1


def test_exit_command(config, runner_cls):
    assert cli.main(['exit'], config) == 0
    runner_cls.assert_not_called()


def test_unknown_command_is_rejected(config):
    with pytest.raises(SystemExit) as excinfo:
        cli.main(['dance'], config)

    assert excinfo.value.code == 2


def test_interactive_loop(mocker, config, runner_cls):
    mocker.patch('salesianos.cli.Prompt.ask', side_effect=['help', 'scrape', 'exit'])

    assert cli.main([], config) == 0
    runner_cls.return_value.run.assert_called_once()


def test_interactive_loop_reports_failures(mocker, config, runner_cls):
    runner_cls.return_value.run.side_effect = RuntimeError('boom')
    mocker.patch('salesianos.cli.Prompt.ask', side_effect=['scrape', EOFError])

    assert cli.main([], config) == 1


def test_setup_failure_exit_code(mocker, config):
    mocker.patch('salesianos.cli.setup_local_logging', side_effect=StorageError('logs', 'read-only'))

    assert cli.main(['scrape'], config) == 1


@pytest.mark.parametrize('command', ['help', 'exit'])
def test_help_and_exit_do_not_create_logs(config, quiet_setup, command):
    assert cli.main([command], config) == 0

    quiet_setup.assert_not_called()
    assert not config.logs_dir.exists()


def test_scrape_prepares_logging(config, quiet_setup, runner_cls):
    assert cli.main(['scrape'], config) == 0

    quiet_setup.assert_called_once_with(config.logs_dir, level='INFO')


def test_scrape_closes_fetcher(mocker, config, runner_cls):
    fetcher_cls = mocker.patch('salesianos.cli.PageFetcher')
    fetcher = fetcher_cls.return_value.__enter__.return_value

    assert cli.main(['scrape'], config) == 0

    assert runner_cls.call_args.kwargs['fetcher'] is fetcher
    fetcher_cls.return_value.__exit__.assert_called_once()


def test_scrape_closes_fetcher_on_failure(mocker, config, runner_cls):
    fetcher_cls = mocker.patch('salesianos.cli.PageFetcher')
    runner_cls.return_value.run.side_effect = RuntimeError('boom')
    fetcher_cls.return_value.__exit__.return_value = False

    assert cli.main(['scrape'], config) == 1

    fetcher_cls.return_value.__exit__.assert_called_once()
