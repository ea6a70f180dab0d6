import json

import pytest
import requests

from salesianos.exceptions import FetchError
from salesianos.pipeline import ScrapeRunner, build_summary


@pytest.fixture
def fetcher(mocker, config, main_page_html, sport_page_html, make_fetch_result):
    pages = {
        config.base_url: main_page_html,
        config.base_url + 'futbol/': sport_page_html,
    }

    def fetch(url):
        if url not in pages:
            raise FetchError(url, requests.ConnectionError('connection refused'), config.max_retries + 1)
        return make_fetch_result(url, pages[url])

    mock_fetcher = mocker.Mock()
    mock_fetcher.fetch.side_effect = fetch
    return mock_fetcher


def read_json(path):
    return json.loads(path.read_text(encoding='utf-8'))


def test_run_survives_failing_sport(config, console, fetcher):
    summary = ScrapeRunner(config, fetcher=fetcher, console=console).run()

    out = config.output_dir
    assert (out / 'main_page.json').exists()
    assert (out / 'fútbol.json').exists()
    assert not (out / 'ajedrez.json').exists()

    summary_json = read_json(out / 'summary.json')
    assert summary_json == summary.model_dump(by_alias=True, exclude_none=True)
    futbol, ajedrez = summary_json['sports']
    assert futbol == {
        'name': 'Fútbol',
        'resultsCount': 2,
        'matchesCount': 1,
        'hasStandings': True,
        'hasMedals': True,
    }
    assert ajedrez['name'] == 'Ajedrez'
    assert ajedrez['error'] == 'connection refused'
    assert ajedrez['resultsCount'] == 0
    assert summary_json['eventTitle'] == 'Juegos Nacionales Salesianos 2025'


def test_run_writes_aggregate(config, console, fetcher):
    ScrapeRunner(config, fetcher=fetcher, console=console).run()

    all_data = read_json(config.output_dir / 'all_data.json')
    assert set(all_data) == {'mainPage', 'sports', 'metadata'}
    assert list(all_data['sports']) == ['Fútbol', 'Ajedrez']
    assert all_data['sports']['Ajedrez'] == {
        'sportInfo': {
            'name': 'Ajedrez',
            'url': config.base_url + 'ajedrez/',
            'error': 'connection refused',
        }
    }
    assert all_data['metadata']['version'] == '1.0.0'
    assert all_data['metadata']['config'] == {'baseUrl': config.base_url, 'sportsScraped': ['Fútbol', 'Ajedrez']}

    log = (config.output_dir / 'scraping_log.txt').read_text(encoding='utf-8')
    assert 'Scraping started at:' in log
    assert 'Total sports scraped: 2' in log


def test_run_fetches_in_order_with_pacing(mocker, config, console, fetcher):
    sleep = mocker.Mock()
    paced = config.model_copy(update={'request_delay': 1.5})

    ScrapeRunner(paced, fetcher=fetcher, console=console, sleep=sleep).run()

    assert [call.args[0] for call in fetcher.fetch.call_args_list] == [
        config.base_url,
        config.base_url + 'futbol/',
        config.base_url + 'ajedrez/',
    ]
    assert sleep.call_count == 3
    sleep.assert_called_with(1.5)


def test_run_without_main_page(mocker, config, console):
    fetcher = mocker.Mock()
    fetcher.fetch.side_effect = FetchError(config.base_url, 'offline', 4)

    summary = ScrapeRunner(config, fetcher=fetcher, console=console).run()

    all_data = read_json(config.output_dir / 'all_data.json')
    assert all_data['mainPage'] is None
    assert summary.event_title == config.event_title
    assert [sport.error for sport in summary.sports] == ['offline', 'offline']


def test_fatal_error_is_logged_and_raised(mocker, config, console, fetcher):
    runner = ScrapeRunner(config, fetcher=fetcher, console=console)
    mocker.patch.object(runner.main_scraper, 'parse', side_effect=RuntimeError('parser exploded'))

    with pytest.raises(RuntimeError):
        runner.run()

    log = (config.output_dir / 'scraping_log.txt').read_text(encoding='utf-8')
    assert 'ERROR at' in log
    assert 'parser exploded' in log
    assert 'Traceback' in log


def test_run_survives_sport_parse_error(mocker, config, console, fetcher):
    runner = ScrapeRunner(config, fetcher=fetcher, console=console)
    mocker.patch.object(runner.sport_scraper, 'parse', side_effect=ValueError('unexpected layout'))

    summary = runner.run()

    assert [call.args[0] for call in fetcher.fetch.call_args_list] == [
        config.base_url,
        config.base_url + 'futbol/',
        config.base_url + 'ajedrez/',
    ]
    summary_json = read_json(config.output_dir / 'summary.json')
    assert summary_json == summary.model_dump(by_alias=True, exclude_none=True)
    assert [sport['error'] for sport in summary_json['sports']] == ['unexpected layout', 'connection refused']

    all_data = read_json(config.output_dir / 'all_data.json')
    assert all_data['sports']['Fútbol'] == {
        'sportInfo': {'name': 'Fútbol', 'url': config.base_url + 'futbol/', 'error': 'unexpected layout'}
    }
    assert (config.output_dir / 'main_page.json').exists()
    assert not (config.output_dir / 'fútbol.json').exists()


def test_build_summary_counts():
    sports = {
        'Fútbol': {'results': [{}, {}], 'matches': [{}], 'standings': [], 'medals': [{}]},
        'Ajedrez': {'sportInfo': {'name': 'Ajedrez', 'error': 'timeout'}},
    }

    summary = build_summary({'generalInfo': {'title': 'Juegos'}}, sports, 'Fallback')

    assert summary.event_title == 'Juegos'
    futbol, ajedrez = summary.sports
    assert (futbol.results_count, futbol.matches_count, futbol.has_standings, futbol.has_medals) == (2, 1, False, True)
    assert futbol.error is None
    assert ajedrez.error == 'timeout'
