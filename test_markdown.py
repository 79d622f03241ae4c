"""
Tests for the markdown renderers used by product descriptions and the editor preview.

Run: python3 -m pytest test_markdown.py -v
"""

import os
import sys
import unittest

# Ensure project root is on sys.path
_script_dir = os.path.dirname(os.path.abspath(__file__))
if _script_dir not in sys.path:
    sys.path.insert(0, _script_dir)

from markup import parse_markdown, parse_preview_markdown


class TestParseMarkdown(unittest.TestCase):

    def test_empty(self):
        self.assertEqual(parse_markdown(''), '')
        self.assertEqual(parse_markdown(None), '')

    def test_bold_and_italic(self):
        self.assertEqual(
            parse_markdown('**Kuat** dan *awet*'),
            '<strong>Kuat</strong> dan <em>awet</em>',
        )

    def test_html_is_escaped(self):
        self.assertEqual(parse_markdown('<script>x</script>'), '&lt;script&gt;x&lt;/script&gt;')

    def test_headings_swallow_adjacent_breaks(self):
        self.assertEqual(
            parse_markdown('## Fitur\nTeks'),
            '<h3 class="md-heading">Fitur</h3>Teks',
        )
        self.assertEqual(
            parse_markdown('Intro\n### Detail'),
            'Intro<h4 class="md-subheading">Detail</h4>',
        )

    def test_bullets_grouped_into_one_list(self):
        self.assertEqual(
            parse_markdown('Bahan:\n• Nilon\n- Jahitan ganda\nSelesai'),
            'Bahan:<ul class="md-list"><li>Nilon</li><li>Jahitan ganda</li></ul>Selesai',
        )

    def test_links_open_in_new_tab(self):
        self.assertEqual(
            parse_markdown('[Toko](https://example.com)'),
            '<a href="https://example.com" target="_blank" rel="noopener noreferrer">Toko</a>',
        )

    def test_line_breaks(self):
        self.assertEqual(parse_markdown('a\nb'), 'a<br/>b')

    def test_link_target_cannot_leave_the_attribute(self):
        self.assertEqual(
            parse_markdown('[x](https://a.test/" onmouseover="y)'),
            '<a href="https://a.test/&quot; onmouseover=&quot;y" target="_blank" rel="noopener noreferrer">x</a>',
        )

    def test_unsafe_link_schemes_render_as_text(self):
        self.assertEqual(parse_markdown('[klik](javascript:alert1)'), 'klik')
        self.assertEqual(parse_markdown('[klik](JaVa\tScript:alert1)'), 'klik')
        self.assertEqual(parse_markdown('[klik](data:text/html,x)'), 'klik')

    def test_relative_and_mailto_links(self):
        self.assertIn('href="/products"', parse_markdown('[Produk](/products)'))
        self.assertIn('href="mailto:sales@example.com"', parse_markdown('[Email](mailto:sales@example.com)'))


class TestParsePreviewMarkdown(unittest.TestCase):

    def test_empty(self):
        self.assertEqual(parse_preview_markdown(''), '')

    def test_headings(self):
        self.assertEqual(parse_preview_markdown('# Judul\nIsi'), '<h1>Judul</h1>Isi')
        self.assertEqual(parse_preview_markdown('## Sub'), '<h2>Sub</h2>')
        self.assertEqual(parse_preview_markdown('### Kecil'), '<h3>Kecil</h3>')

    def test_underscore_emphasis(self):
        self.assertEqual(
            parse_preview_markdown('__tebal__ dan _miring_'),
            '<strong>tebal</strong> dan <em>miring</em>',
        )

    def test_list(self):
        html = parse_preview_markdown('- satu\n- dua')
        self.assertTrue(html.startswith('<ul><li>satu</li>'))
        self.assertIn('<li>dua</li></ul>', html)

    def test_paragraphs(self):
        self.assertEqual(parse_preview_markdown('a\n\nb\nc'), 'a<br><br>b<br>c')

    def test_table(self):
        html = parse_preview_markdown('| Ukuran | Beban |\n|---|---|\n| M | 150 kg |')
        self.assertEqual(
            html,
            '<table class="preview-table"><thead><tr><th>Ukuran</th><th>Beban</th></tr></thead>'
            '<tbody><tr><td>M</td><td>150 kg</td></tr></tbody></table>',
        )

    def test_escapes_before_markup(self):
        self.assertEqual(parse_preview_markdown('**<b>**'), '<strong>&lt;b&gt;</strong>')

    def test_links(self):
        self.assertEqual(
            parse_preview_markdown('[Toko](https://example.com)'),
            '<a href="https://example.com" target="_blank">Toko</a>',
        )
        self.assertEqual(parse_preview_markdown('[x](javascript:alert1)'), 'x')
        self.assertIn('href="https://a.test/&quot;"', parse_preview_markdown('[x](https://a.test/")'))


if __name__ == '__main__':
    unittest.main()
