"""Markdown rendering for bilingual content fields."""

from markup.markdown import escape_html, parse_markdown, parse_preview_markdown
