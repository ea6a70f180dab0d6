"""Selector lists for the event site's pages.

Selectors inside a field are ordered fallbacks: the first one matching
anything wins. Container and item selectors enumerate elements and may use
CSS selector groups.
"""

from salesianos.models.fields import FieldSpec, RecordRule, attr_field, text_field

HERO_IMAGE = ['header img', '.hero img', '.banner img', '.featured-image img']

# Main page
# ---------

GENERAL_INFO_FIELDS = [
    text_field('title', 'title'),
    attr_field('description', 'content', 'meta[name="description"]'),
    attr_field('heroImage', 'src', *HERO_IMAGE),
]

ANNOUNCEMENT_ITEMS = '.announcement, .notice, .alert, .important'
ANNOUNCEMENT_FIELDS = [
    text_field('title', 'h2', 'h3', '.title', 'strong'),
    FieldSpec(name='content', selectors=[], kind='text'),
]
ANNOUNCEMENT_RULE = RecordRule(require_any=('title', 'content'))

MAIN_NEWS_ITEMS = '.news, .post, article, .entry'
MAIN_NEWS_FIELDS = [
    text_field('title', 'h2', 'h3', '.title', '.entry-title'),
    text_field('date', '.date', '.posted-on', 'time'),
    text_field('summary', 'p', '.excerpt', '.summary'),
    FieldSpec(name='imageUrl', selectors=[], kind='image'),
    attr_field('link', 'href', 'a'),
]
MAIN_NEWS_RULE = RecordRule(require_any=('title',))

SCHEDULE_CONTAINERS = '.schedule, .calendar, .event-list, .fixtures'
SCHEDULE_ITEMS = 'li, .event, .fixture, .match'
SCHEDULE_FIELDS = [
    text_field('title', 'h3', 'h4', '.event-title', '.title'),
    text_field('date', '.date', 'time', '.datetime'),
    text_field('location', '.venue', '.location', '.place'),
    text_field('description', 'p', '.description'),
]
SCHEDULE_RULE = RecordRule(require_any=('title', 'date'))

NAVIGATION_ITEMS = 'nav a, .menu a, .navigation a, .main-menu a'
NAVIGATION_FIELDS = [
    FieldSpec(name='text', selectors=[], kind='text'),
    attr_field('url', 'href'),
    FieldSpec(name='isActive', selectors=[], kind='has_class', attr='active'),
]
NAVIGATION_RULE = RecordRule(require_all=('text', 'url'))

MAIN_STANDINGS_BLOCKS = '.standings, .medal-tally, .results-summary, .leaderboard'

# Sport pages
# -----------

SPORT_INFO_FIELDS = [
    text_field('title', 'h1', '.entry-title', '.page-title'),
    text_field('description', '.description', '.intro', '.summary'),
    attr_field('heroImage', 'src', 'header img', '.hero img', '.featured-image img'),
]

RESULT_TABLES = 'table, .table, .results-table'

MATCH_ITEMS = '.match, .event, .fixture, .game, article'
MATCH_FIELDS = [
    text_field('title', 'h3', 'h4', '.match-title', '.title'),
    FieldSpec(name='teams', selectors=['.team-name', '.team', '.participant', '.competitor'], kind='texts'),
    text_field('score', '.score', '.result', '.match-score'),
    text_field('winner', '.winner', '.champion'),
    text_field('date', '.date', '.match-date', 'time', '.datetime'),
    text_field('time', '.time', '.match-time'),
    text_field('location', '.venue', '.location', '.place'),
    text_field('category', '.category', '.division', '.group'),
]
# A lone title is usually a generic article, not a match
MATCH_RULE = RecordRule(min_fields=2)

STANDINGS_BLOCKS = '.standings, .ranking, .leaderboard, .positions, .table-standings'
STANDINGS_CAPTIONS = ['caption', '.table-title', '.standings-title']
STANDINGS_ROW_FIELDS = [
    text_field('position', 'td:nth-child(1)'),
    text_field('name', 'td:nth-child(2)'),
    text_field('played', 'td:nth-child(3)'),
    text_field('won', 'td:nth-child(4)'),
    text_field('drawn', 'td:nth-child(5)'),
    text_field('lost', 'td:nth-child(6)'),
    text_field('points', 'td:nth-child(7)', 'td:last-of-type'),
]
STANDINGS_ROW_RULE = RecordRule(require_all=('name', 'position'))

MEDAL_BLOCKS = '.medals, .awards, .winners'
MEDAL_ITEMS = 'li, tr, .medal-item, .award-item'
MEDAL_ITEM_FIELDS = [
    text_field('position', '.position', '.medal-type', '.rank', 'td:nth-child(1)'),
    text_field('name', '.name', '.athlete', '.winner', '.team-name', 'td:nth-child(2)'),
    text_field('school', '.school', '.institution', '.team', 'td:nth-child(3)'),
    text_field('result', '.result', '.mark', '.time', '.score', 'td:nth-child(4)'),
]
MEDAL_ITEM_RULE = RecordRule(require_all=('name', 'position'))

SPORT_NEWS_ITEMS = '.news, .post, .update, article, .entry'
SPORT_NEWS_FIELDS = [
    text_field('title', 'h2', 'h3', '.title', '.news-title', '.post-title'),
    text_field('date', '.date', '.posted-on', 'time'),
    text_field('content', 'p', '.content', '.excerpt'),
    text_field('author', '.author', '.byline'),
    FieldSpec(name='imageUrl', selectors=[], kind='image'),
]
SPORT_NEWS_RULE = RecordRule(require_any=('title', 'content'))

GALLERY_CONTAINERS = '.gallery, .photos, .images'
GALLERY_FIELDS = [
    attr_field('url', 'src'),
    attr_field('title', 'alt'),
]
GALLERY_RULE = RecordRule(require_all=('url',))
