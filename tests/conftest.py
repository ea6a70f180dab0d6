import io

import logfire
import pytest
from rich.console import Console

from salesianos.config import ScraperConfig, Sport
from salesianos.models.results import FetchResult


@pytest.fixture
def config(tmp_path):
    return ScraperConfig(
        output_dir=tmp_path / 'resultados',
        reports_dir=tmp_path / 'reportes',
        request_delay=0,
        retry_delay=0,
        sports=[Sport(name='Fútbol', url_path='futbol'), Sport(name='Ajedrez', url_path='ajedrez')],
    )


@pytest.fixture
def console():
    return Console(file=io.StringIO(), width=120)


@pytest.fixture
def make_fetch_result():
    def _make(url, html):
        return FetchResult(url=url, html=html, status_code=200)

    return _make


@pytest.fixture
def main_page_html():
    return """
    <!DOCTYPE html>
    <html>
    <head>
        <title>Juegos Nacionales Salesianos 2025</title>
        <meta name="description" content="Resultados oficiales de los juegos">
    </head>
    <body>
        <nav>
            <a class="active" href="https://clasico.com.do/juegos-nacionales-salesianos-2025/">Inicio</a>
            <a href="https://clasico.com.do/juegos-nacionales-salesianos-2025/futbol/">Fútbol</a>
            <a href="https://clasico.com.do/juegos-nacionales-salesianos-2025/futbol/">Fútbol</a>
            <a href="/ajedrez/">Ajedrez</a>
            <a href="#"></a>
        </nav>
        <div class="announcement"><h3>Aviso</h3> Cambio de horario</div>
        <div class="schedule">
            <ul>
                <li><h4>Inauguración</h4><span class="date">01/05/2025</span><span class="venue">Estadio</span></li>
            </ul>
        </div>
        <div class="standings">
            <table>
                <tr><th>Centro</th><th>Oro</th></tr>
                <tr><td>Don Bosco</td><td>5</td></tr>
                <tr><td>Savio</td><td>3</td></tr>
            </table>
        </div>
    </body>
    </html>
    """


@pytest.fixture
def sport_page_html():
    return """
    <!DOCTYPE html>
    <html>
    <head><title>Fútbol</title></head>
    <body>
        <h1>Fútbol</h1>
        <div class="description">Torneo   de fútbol
            masculino</div>
        <div class="category-container">
            <h3>Categoría A</h3>
            <h2>Resultados Jornada 1</h2>
            <table>
                <tr><th>Local</th><th>Marcador</th><th>Visitante</th></tr>
                <tr><td class="winner">Don Bosco</td><td>2-1</td><td>Savio</td></tr>
                <tr><td>Maria Auxiliadora</td><td>0-0</td><td><img src="/logo.png"> Calasanz</td></tr>
            </table>
        </div>
        <div class="match">
            <h4>Semifinal</h4>
            <span class="team">Don Bosco</span>
            <span class="team">Savio</span>
            <span class="score">3-1</span>
            <span class="date">12/05/2025</span>
        </div>
        <article><h3>Noticia general</h3></article>
        <div class="standings">
            <table>
                <caption>Grupo A</caption>
                <tr><th>Pos</th><th>Equipo</th><th>PJ</th><th>G</th><th>E</th><th>P</th><th>Pts</th></tr>
                <tr><td>1</td><td>Don Bosco</td><td>3</td><td>3</td><td>0</td><td>0</td><td>9</td></tr>
                <tr><td>2</td><td>Savio</td><td>3</td><td>1</td><td>1</td><td>1</td><td>4</td></tr>
            </table>
        </div>
        <h2>Medallero Final</h2>
        <div class="medals">
            <ul>
                <li>
                    <span class="position">Oro</span>
                    <span class="name">Ana Pérez</span>
                    <span class="school">Don Bosco</span>
                    <span class="result">12.5s</span>
                </li>
                <li><span class="position">Plata</span><span class="name">Luis Gómez</span></li>
                <li>Sin datos</li>
            </ul>
        </div>
        <div class="news">
            <h3>Gran final este sábado</h3>
            <span class="date">10/05/2025</span>
            <p>La final se jugará en el estadio.</p>
            <span class="author">Redacción</span>
        </div>
        <div class="gallery">
            <figure><img src="/img/1.jpg" alt="Final"><figcaption>Entrega de premios</figcaption></figure>
            <img src="/img/2.jpg" title="Podio">
            <img alt="sin fuente">
        </div>
    </body>
    </html>
    """


def pytest_configure(config):
    """Register custom markers and keep telemetry local."""
    config.addinivalue_line('markers', 'integration: marks tests as integration tests')
    config.addinivalue_line('markers', 'unit: marks tests as unit tests')
    logfire.configure(send_to_logfire=False, console=False)


def pytest_collection_modifyitems(config, items):
    """Apply directory-based marks to collected test items."""

    for item in items:
        if hasattr(item, 'fspath'):
            file_path = str(item.fspath)

            if '/tests/integration/' in file_path:
                item.add_marker(pytest.mark.integration)
            elif '/tests/unit/' in file_path:
                item.add_marker(pytest.mark.unit)
