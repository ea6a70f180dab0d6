"""Builds the static HTML and CSV reports from the aggregated JSON snapshot."""

import html
import logging
from pathlib import Path
from typing import Any

import logfire
from rich.console import Console

from salesianos.config import ScraperConfig, file_slug
from salesianos.exceptions import ReportError
from salesianos.outputs.cells import collect_keys
from salesianos.outputs.csv_output import save_csv
from salesianos.outputs.html_output import escape, render_page, to_html_table
from salesianos.storage import ALL_DATA_FILENAME, OutputStorage
from salesianos.utils.dates import format_local
from salesianos.utils.files import ensure_directory


class ReportBuilder:
    """Renders index.html, one page per sport and CSV exports.

    The builder only reads all_data.json; it never touches the network.

    Attributes:
        config: Scraper configuration (data and report directories, event title)
        console: Rich console instance for formatted output
        storage: Reader for the JSON snapshots
        reports_dir: Directory receiving the reports

    """

    def __init__(self, config: ScraperConfig, console: Console | None = None):
        """Initialize the report builder.

        Args:
            config: Scraper configuration
            console: Rich console instance for formatted output. Defaults to None (creates new Console).

        """
        self.config = config
        self.console = console or Console()
        self.storage = OutputStorage(config.output_dir, console=self.console)
        self.reports_dir = Path(config.reports_dir)
        self.logger = logging.getLogger(__name__)

    def build(self) -> list[Path]:
        """Render every report.

        Returns:
            Paths of the files written.

        Raises:
            ReportError: If all_data.json is missing or unreadable.
            StorageError: If the reports directory cannot be created.

        """
        with logfire.span('build_reports', reports_dir=str(self.reports_dir)):
            self.console.print('[step]Processing all sports data...[/step]')
            data = self.storage.load(ALL_DATA_FILENAME)
            if not isinstance(data, dict):
                raise ReportError(f'Failed to load {ALL_DATA_FILENAME} from {self.config.output_dir}')

            ensure_directory(self.reports_dir)
            sports: dict[str, Any] = data.get('sports') or {}
            navigation = self._navigation(sports)

            written = [self._write('index.html', self._index_page(data, navigation))]
            for sport_name, sport in sports.items():
                written.extend(self._sport_reports(sport_name, sport or {}, navigation))
                self.console.print(f'[success]✓ Processed {sport_name} data[/success]')

            self.console.print(f'[success]Data processing complete. Reports saved to {self.reports_dir}[/success]')
            logfire.info('Reports built', files=len(written))
            return written

    # ------------------------------------------------------------------
    # Pages
    # ------------------------------------------------------------------

    def _navigation(self, sports: dict[str, Any]) -> str:
        links = ['<div class="nav">', '<a href="index.html">Inicio</a>']
        for sport_name in sports:
            links.append(self._sport_link(sport_name))
        links.append('</div>')
        return '\n'.join(links)

    def _index_page(self, data: dict[str, Any], navigation: str) -> str:
        main_page = data.get('mainPage') or {}
        metadata = data.get('metadata') or {}
        fragments = [navigation]

        general_info = main_page.get('generalInfo')
        if general_info:
            title = general_info.get('title') or self.config.event_title
            description = general_info.get('description') or 'Información no disponible'
            updated = format_local(metadata.get('scrapedAt'))
            fragments.append(
                '\n'.join(
                    [
                        '<div class="notice">',
                        '  <h2>Información General</h2>',
                        f'  <p><strong>Evento:</strong> {escape(title)}</p>',
                        f'  <p><strong>Descripción:</strong> {escape(description)}</p>',
                        f'  <p><strong>Última actualización:</strong> {escape(updated)}</p>',
                        '</div>',
                    ]
                )
            )

        announcements = main_page.get('announcements') or []
        if announcements:
            fragments.append('<h2>Anuncios</h2>')
            for announcement in announcements:
                fragments.append(
                    self._notice(announcement.get('title') or 'Anuncio', [announcement.get('content', '')])
                )

        news = main_page.get('news') or []
        if news:
            fragments.append('<h2>Últimas Noticias</h2>')
            fragments.append(to_html_table(news, 'Noticias', ['title', 'date', 'summary']))

        schedule = main_page.get('scheduleItems') or []
        if schedule:
            fragments.append('<h2>Calendario de Eventos</h2>')
            fragments.append(to_html_table(schedule, 'Próximos Eventos', ['title', 'date', 'location', 'description']))

        standings = main_page.get('standings') or []
        if standings:
            fragments.append('<h2>Clasificaciones Generales</h2>')
            for standing in standings:
                fragments.append(self._table(standing))

        fragments.append('<h2>Disciplinas Deportivas</h2>')
        fragments.append('<ul>')
        for sport_name in data.get('sports') or {}:
            fragments.append(f'<li>{self._sport_link(sport_name)}</li>')
        fragments.append('</ul>')

        return render_page(self.config.event_title, fragments)

    def _sport_reports(self, sport_name: str, sport: dict[str, Any], navigation: str) -> list[Path]:
        slug = file_slug(sport_name)
        info = sport.get('sportInfo') or {}
        written: list[Path] = []
        fragments = [navigation]

        paragraphs = [info.get('description', '')]
        if info.get('error'):
            paragraphs.append(f'No se pudo obtener la información: {info["error"]}')
        fragments.append(self._notice(info.get('title') or sport_name, paragraphs, heading='h2'))

        results = sport.get('results') or []
        if results:
            fragments.append('<h2>Resultados</h2>')
            for index, table in enumerate(results, 1):
                fragments.append(self._table(table))
                filename = f'{slug}_resultados_{index}.csv'
                written.append(self._write_csv(filename, table.get('rows', []), table.get('headers')))

        matches = sport.get('matches') or []
        if matches:
            headers = collect_keys(matches)
            fragments.append('<h2>Partidos/Eventos</h2>')
            fragments.append(to_html_table(matches, 'Partidos', headers))
            written.append(self._write_csv(f'{slug}_partidos.csv', matches, headers))

        standings = sport.get('standings') or []
        if standings:
            fragments.append('<h2>Clasificaciones</h2>')
            for index, standing in enumerate(standings, 1):
                teams = standing.get('teams', [])
                headers = collect_keys(teams)
                title = standing.get('title', '')
                if standing.get('category'):
                    title = f'{title} - {standing["category"]}'
                fragments.append(f'<h3>{escape(title)}</h3>')
                fragments.append(to_html_table(teams, '', headers))
                written.append(self._write_csv(f'{slug}_clasificacion_{index}.csv', teams, headers))

        medals = sport.get('medals') or []
        if medals:
            fragments.append('<h2>Medallero</h2>')
            for index, medal in enumerate(medals, 1):
                items = medal.get('items', [])
                headers = collect_keys(items)
                fragments.append(f'<h3>{escape(medal.get("title", ""))}</h3>')
                fragments.append(to_html_table(items, '', headers))
                written.append(self._write_csv(f'{slug}_medallero_{index}.csv', items, headers))

        news = sport.get('news') or []
        if news:
            fragments.append('<h2>Noticias</h2>')
            for item in news:
                paragraphs = []
                if item.get('date'):
                    paragraphs.append(f'<small>{escape(item["date"])}</small>')
                paragraphs.append(escape(item.get('content', '')))
                if item.get('author'):
                    paragraphs.append(f'<small>Por: {escape(item["author"])}</small>')
                fragments.append(self._notice(item.get('title') or 'Noticia', paragraphs, escaped=True))

        gallery = sport.get('gallery') or []
        if gallery:
            fragments.append('<h2>Galería</h2>')
            fragments.append('<div class="gallery">')
            for image in gallery:
                caption = ''
                if image.get('caption'):
                    caption = f'<figcaption><small>{escape(image["caption"])}</small></figcaption>'
                img = f'<img src="{escape(image.get("url"))}" alt="{escape(image.get("title"))}">'
                fragments.append(f'<figure>{img}{caption}</figure>')
            fragments.append('</div>')

        page = render_page(f'{sport_name} - {self.config.event_title}', fragments)
        written.append(self._write(f'{slug}.html', page))
        return written

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _sport_link(sport_name: str) -> str:
        return f'<a href="{html.escape(file_slug(sport_name))}.html">{html.escape(sport_name)}</a>'

    @staticmethod
    def _table(table: dict[str, Any]) -> str:
        return to_html_table(table.get('rows', []), table.get('title', ''), table.get('headers'))

    @staticmethod
    def _notice(title: str, paragraphs: list[str], heading: str = 'h3', escaped: bool = False) -> str:
        lines = ['<div class="notice">', f'  <{heading}>{escape(title)}</{heading}>']
        for paragraph in paragraphs:
            if paragraph:
                lines.append(f'  <p>{paragraph if escaped else escape(paragraph)}</p>')
        lines.append('</div>')
        return '\n'.join(lines)

    def _write(self, filename: str, content: str) -> Path:
        filepath = self.reports_dir / filename
        filepath.write_text(content, encoding='utf-8')
        self.logger.info(f'Wrote {filepath}')
        return filepath

    def _write_csv(self, filename: str, rows: list[Any], headers: list[str] | None) -> Path:
        filepath = self.reports_dir / filename
        save_csv(str(filepath), rows, headers)
        self.logger.info(f'Wrote {filepath}')
        return filepath
