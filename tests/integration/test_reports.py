import csv

import pytest

from salesianos.exceptions import ReportError
from salesianos.outputs import ReportBuilder
from salesianos.storage import ALL_DATA_FILENAME, OutputStorage


@pytest.fixture
def all_data():
    return {
        'mainPage': {
            'generalInfo': {'title': 'Juegos Nacionales Salesianos 2025', 'description': 'Resultados oficiales'},
            'announcements': [{'title': 'Aviso', 'content': 'Cambio de horario'}],
            'standings': [{'title': 'Standings', 'headers': ['Centro', 'Oro'], 'rows': [['Don Bosco', '5']]}],
        },
        'sports': {
            'Tenis de Mesa': {
                'sportInfo': {'name': 'Tenis de Mesa', 'url': 'https://example.com/tenis-de-mesa/'},
                'results': [
                    {
                        'title': 'Resultados 1',
                        'headers': ['Local', 'Visitante'],
                        'rows': [
                            [{'text': 'Don Bosco', 'isWinner': True}, 'He said, "hi"'],
                            ['Savio', {'text': 'Calasanz', 'imgSrc': '/logo.png'}],
                        ],
                    }
                ],
                'matches': [
                    {'title': 'Final', 'teams': ['Don Bosco', 'Savio'], 'score': '3-1'},
                    {'title': 'Semifinal', 'date': '12/05/2025'},
                ],
                'standings': [{'title': 'Grupo A', 'teams': [{'position': '1', 'name': 'Don Bosco', 'points': '9'}]}],
                'medals': [{'title': 'Medallero', 'items': [{'position': 'Oro', 'name': 'Ana Pérez'}]}],
                'news': [{'title': '<b>x</b>', 'content': 'Texto'}],
                'gallery': [{'url': '/img/1.jpg', 'title': 'Final', 'caption': 'Podio'}],
            },
            'Ajedrez': {'sportInfo': {'name': 'Ajedrez', 'url': 'https://example.com/ajedrez/', 'error': 'timeout'}},
        },
        'metadata': {'scrapedAt': '2025-05-12T10:00:00.000Z', 'version': '1.0.0'},
    }


@pytest.fixture
def builder(config, console, all_data):
    OutputStorage(config.output_dir, console=console).write(ALL_DATA_FILENAME, all_data)
    return ReportBuilder(config, console=console)


def read_csv(path):
    with open(path, encoding='utf-8', newline='') as f:
        return list(csv.reader(f))


def test_build_writes_every_report(builder, config):
    written = builder.build()

    names = {path.name for path in written}
    assert names == {
        'index.html',
        'tenis_de_mesa.html',
        'tenis_de_mesa_resultados_1.csv',
        'tenis_de_mesa_partidos.csv',
        'tenis_de_mesa_clasificacion_1.csv',
        'tenis_de_mesa_medallero_1.csv',
        'ajedrez.html',
    }
    assert all(path.parent == config.reports_dir for path in written)


def test_result_csv_contents(builder, config):
    builder.build()

    rows = read_csv(config.reports_dir / 'tenis_de_mesa_resultados_1.csv')
    assert rows == [['Local', 'Visitante'], ['Don Bosco', 'He said, "hi"'], ['Savio', 'Calasanz']]


def test_record_csv_uses_union_of_keys(builder, config):
    builder.build()

    rows = read_csv(config.reports_dir / 'tenis_de_mesa_partidos.csv')
    assert rows == [
        ['title', 'teams', 'score', 'date'],
        ['Final', 'Don Bosco, Savio', '3-1', ''],
        ['Semifinal', '', '', '12/05/2025'],
    ]


def test_csv_output_is_stable_across_runs(builder, config):
    builder.build()
    first = {path.name: path.read_bytes() for path in config.reports_dir.glob('*.csv')}

    builder.build()
    second = {path.name: path.read_bytes() for path in config.reports_dir.glob('*.csv')}

    assert first == second


def test_sport_page_html(builder, config):
    builder.build()

    page = (config.reports_dir / 'tenis_de_mesa.html').read_text(encoding='utf-8')
    assert '<td class="winner">Don Bosco</td>' in page
    assert '&lt;b&gt;x&lt;/b&gt;' in page
    assert '<b>x</b>' not in page
    assert 'href="ajedrez.html"' in page
    assert '<img src="/img/1.jpg" alt="Final">' in page


def test_failed_sport_page_shows_error(builder, config):
    builder.build()

    page = (config.reports_dir / 'ajedrez.html').read_text(encoding='utf-8')
    assert 'No se pudo obtener la información: timeout' in page


def test_index_page(builder, config):
    builder.build()

    page = (config.reports_dir / 'index.html').read_text(encoding='utf-8')
    assert 'Resultados oficiales' in page
    assert 'Cambio de horario' in page
    assert '<h3>Standings</h3>' in page
    assert '<a href="tenis_de_mesa.html">Tenis de Mesa</a>' in page


def test_missing_aggregate_raises(config, console):
    with pytest.raises(ReportError):
        ReportBuilder(config, console=console).build()

    assert not config.reports_dir.exists()
