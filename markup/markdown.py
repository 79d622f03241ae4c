"""
Minimal markdown to HTML conversion for bilingual content fields.

Two flavours:
- parse_markdown: storefront product/testimonial descriptions
- parse_preview_markdown: admin editor preview (adds tables and h1/h2)

Input is HTML-escaped before any markup is produced.
"""

import re

_BOLD = re.compile(r'\*\*([^*]+)\*\*')
_ITALIC = re.compile(r'\*([^*]+)\*')
_HEADING = re.compile(r'^## (.+)$', re.MULTILINE)
_SUBHEADING = re.compile(r'^### (.+)$', re.MULTILINE)
_BULLET = re.compile(r'^[•-] (.+)$', re.MULTILINE)
_LIST_RUN = re.compile(r'(<li>.*</li>\n?)+')
_LINK = re.compile(r'\[([^\]]+)\]\(([^)]+)\)')
_SAFE_SCHEMES = ('http', 'https', 'mailto')
_URL_SCHEME = re.compile(r'^([a-zA-Z][a-zA-Z0-9+.-]*):')
# Browsers ignore control characters and spaces when reading a scheme
_URL_IGNORED = re.compile(r'[\x00-\x20]')

_BLOCK_BREAKS = [
    ('</h3><br/>', '</h3>'),
    ('</h4><br/>', '</h4>'),
    ('</ul><br/>', '</ul>'),
    ('<br/><h3', '<h3'),
    ('<br/><h4', '<h4'),
    ('<br/><ul', '<ul'),
]


def escape_html(text):
    """Escape &, < and > (quotes are left alone; link targets go through safe_url)."""
    return text.replace('&', '&amp;').replace('<', '&lt;').replace('>', '&gt;')


def safe_url(url):
    """Link target with double quotes escaped, or None when its scheme is not allowed.

    Relative URLs and http(s)/mailto links pass; javascript:, data: and the
    like are rejected.
    """
    scheme = _URL_SCHEME.match(_URL_IGNORED.sub('', url))
    if scheme and scheme.group(1).lower() not in _SAFE_SCHEMES:
        return None
    return url.replace('"', '&quot;')


def _link(attributes):
    def render(match):
        text, url = match.group(1), safe_url(match.group(2))
        if url is None:
            return text
        return f'<a href="{url}" {attributes}>{text}</a>'
    return render


def _wrap_list(match):
    return '<ul class="md-list">' + match.group(0).replace('\n', '') + '</ul>'


def parse_markdown(text):
    """Convert description markdown to HTML.

    Supports **bold**, *italic*, ## / ### headings, "•"/"-" bullet lists,
    [links](url) and line breaks.
    """
    if not text:
        return ''

    html = escape_html(text)
    html = _BOLD.sub(r'<strong>\1</strong>', html)
    html = _ITALIC.sub(r'<em>\1</em>', html)
    html = _HEADING.sub(r'<h3 class="md-heading">\1</h3>', html)
    html = _SUBHEADING.sub(r'<h4 class="md-subheading">\1</h4>', html)
    html = _BULLET.sub(r'<li>\1</li>', html)
    html = _LIST_RUN.sub(_wrap_list, html)
    html = _LINK.sub(_link('target="_blank" rel="noopener noreferrer"'), html)
    html = html.replace('\n', '<br/>')

    for old, new in _BLOCK_BREAKS:
        html = html.replace(old, new)
    return html


# --- Admin preview flavour ---

_TABLE = re.compile(r'(\|[^\n]+\|\r?\n)((?:\|:?[-]+:?)+\|)(\r?\n(?:\|[^\n]+\|\r?\n?)+)')

_PREVIEW_RULES = [
    (re.compile(r'^### (.*$)', re.MULTILINE), r'<h3>\1</h3>'),
    (re.compile(r'^## (.*$)', re.MULTILINE), r'<h2>\1</h2>'),
    (re.compile(r'^# (.*$)', re.MULTILINE), r'<h1>\1</h1>'),
    (re.compile(r'\*\*(.*?)\*\*'), r'<strong>\1</strong>'),
    (re.compile(r'__(.*?)__'), r'<strong>\1</strong>'),
    (re.compile(r'\*(.*?)\*'), r'<em>\1</em>'),
    (re.compile(r'_(.*?)_'), r'<em>\1</em>'),
    (_LINK, _link('target="_blank"')),
    (re.compile(r'^\s*[\-\*] (.*$)', re.MULTILINE), r'<li>\1</li>'),
    (re.compile(r'((?:<li>.*</li>\s*)+)'), r'<ul>\1</ul>'),
    (re.compile(r'(</h[1-6]>|</ul>|</ol>|</table>|</blockquote>)\s*\n'), r'\1'),
]


def _render_table(match):
    header, body = match.group(1), match.group(3)
    headers = [cell.strip() for cell in header.strip().split('|') if cell.strip()]

    parts = ['<table class="preview-table"><thead><tr>']
    parts.extend(f'<th>{h}</th>' for h in headers)
    parts.append('</tr></thead><tbody>')

    for row in body.strip().split('\n'):
        cells = row.split('|')
        if cells and cells[0].strip() == '':
            cells.pop(0)
        if cells and cells[-1].strip() == '':
            cells.pop()
        parts.append('<tr>')
        parts.extend(f'<td>{c.strip()}</td>' for c in cells)
        parts.append('</tr>')

    parts.append('</tbody></table>')
    return ''.join(parts)


def parse_preview_markdown(markdown):
    """Convert editor markdown to HTML for the admin live preview.

    Supports pipe tables, # to ### headings, bold, italic, links,
    "-"/"*" bullet lists and paragraph/line breaks.
    """
    if not markdown:
        return ''

    html = escape_html(markdown)
    html = _TABLE.sub(_render_table, html)
    for pattern, replacement in _PREVIEW_RULES:
        html = pattern.sub(replacement, html)
    return html.replace('\n\n', '<br><br>').replace('\n', '<br>')
