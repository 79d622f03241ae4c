"""
Tests for the db package: schema initialization and table access functions.

Run: python3 -m pytest test_db.py -v
"""

import json
import os
import sqlite3
import sys
import tempfile
import unittest
from datetime import datetime, timezone

# Ensure project root is on sys.path
_script_dir = os.path.dirname(os.path.abspath(__file__))
if _script_dir not in sys.path:
    sys.path.insert(0, _script_dir)

from db import get_connection, init_database, get_schema_info


class DatabaseTestCase(unittest.TestCase):
    """Fresh schema in a temporary directory for every test."""

    def setUp(self):
        self._tmpdir = tempfile.TemporaryDirectory()
        self.db_path = os.path.join(self._tmpdir.name, 'test.db')
        init_database(self.db_path)
        self._conn_cm = get_connection(self.db_path)
        self.conn = self._conn_cm.__enter__()

    def tearDown(self):
        self._conn_cm.__exit__(None, None, None)
        self._tmpdir.cleanup()


# ============================================================
# Schema
# ============================================================

class TestSchema(unittest.TestCase):

    def test_init_creates_all_tables(self):
        with tempfile.TemporaryDirectory() as tmp:
            db_path = os.path.join(tmp, 'schema.db')
            init_database(db_path)
            with get_connection(db_path, row_factory=False) as conn:
                tables = {r[0] for r in conn.execute(
                    "SELECT name FROM sqlite_master WHERE type='table'"
                )}
            for name in get_schema_info()['tables']:
                self.assertIn(name, tables)

    def test_init_is_idempotent(self):
        with tempfile.TemporaryDirectory() as tmp:
            db_path = os.path.join(tmp, 'schema.db')
            init_database(db_path)
            init_database(db_path)
            with get_connection(db_path, row_factory=False) as conn:
                count = conn.execute("SELECT COUNT(*) FROM products").fetchone()[0]
            self.assertEqual(count, 0)

    def test_init_adds_missing_columns(self):
        with tempfile.TemporaryDirectory() as tmp:
            db_path = os.path.join(tmp, 'old.db')
            conn = sqlite3.connect(db_path)
            conn.execute(
                "CREATE TABLE products (id INTEGER PRIMARY KEY, slug TEXT, title_id TEXT, title_en TEXT)"
            )
            conn.commit()
            conn.close()

            init_database(db_path)

            with get_connection(db_path, row_factory=False) as conn:
                columns = {r[1] for r in conn.execute("PRAGMA table_info(products)")}
            self.assertIn('sort_order', columns)
            self.assertIn('price_numeric', columns)
            self.assertIn('thumbnails_base64', columns)

    def test_schema_info(self):
        info = get_schema_info()
        self.assertIn('slug', info['tables']['products'])
        self.assertIn('session_id', info['tables']['chat_memory'])
        self.assertGreater(info['indexes'], 0)

    def test_package_exports_only_public_names(self):
        import db
        self.assertTrue(hasattr(db, 'init_database'))
        self.assertFalse(hasattr(db, '_build_create_table_sql'))
        self.assertFalse(hasattr(db, '_migrate_add_missing_columns'))


# ============================================================
# Products
# ============================================================

def _product(slug, **overrides):
    values = {
        'slug': slug,
        'title_id': f'Produk {slug}',
        'title_en': f'Product {slug}',
        'price': 'Rp 100.000',
        'price_numeric': 100000,
    }
    values.update(overrides)
    return values


class TestProducts(DatabaseTestCase):

    def test_create_and_get(self):
        from db.products import create_product, get_product
        created = create_product(self.conn, _product('sling', thumbnails_base64=['a.jpg', 'b.jpg']))
        self.assertEqual(created['slug'], 'sling')
        self.assertEqual(created['thumbnails_base64'], ['a.jpg', 'b.jpg'])
        self.assertIs(created['is_active'], True)
        self.assertEqual(created['condition_id'], 'Baru')
        self.assertIsNotNone(created['created_at'])
        self.assertEqual(get_product(self.conn, created['id'])['title_en'], 'Product sling')

    def test_missing_thumbnails_decode_to_empty_list(self):
        from db.products import create_product
        created = create_product(self.conn, _product('plain'))
        self.assertEqual(created['thumbnails_base64'], [])

    def test_list_active_respects_flag_and_order(self):
        from db.products import create_product, list_active_products, list_products
        create_product(self.conn, _product('second', sort_order=2))
        create_product(self.conn, _product('first', sort_order=1))
        create_product(self.conn, _product('hidden', sort_order=0, is_active=False))

        self.assertEqual([p['slug'] for p in list_active_products(self.conn)], ['first', 'second'])
        self.assertEqual([p['slug'] for p in list_products(self.conn)], ['hidden', 'first', 'second'])

    def test_get_active_by_slug_ignores_inactive(self):
        from db.products import create_product, get_active_product_by_slug
        create_product(self.conn, _product('off', is_active=False))
        self.assertIsNone(get_active_product_by_slug(self.conn, 'off'))
        self.assertIsNone(get_active_product_by_slug(self.conn, 'nope'))

    def test_update_sets_updated_at(self):
        from db.products import create_product, update_product
        created = create_product(self.conn, _product('edit'))
        self.conn.execute("UPDATE products SET updated_at = '2000-01-01T00:00:00+00:00' WHERE id = ?",
                          (created['id'],))
        self.conn.commit()

        updated = update_product(self.conn, created['id'], {'title_en': 'Renamed', 'is_active': False})
        self.assertEqual(updated['title_en'], 'Renamed')
        self.assertIs(updated['is_active'], False)
        self.assertNotEqual(updated['updated_at'], '2000-01-01T00:00:00+00:00')

    def test_update_missing_returns_none(self):
        from db.products import update_product
        self.assertIsNone(update_product(self.conn, 999, {'title_en': 'x'}))

    def test_slug_exists(self):
        from db.products import create_product, slug_exists
        created = create_product(self.conn, _product('taken'))
        self.assertTrue(slug_exists(self.conn, 'taken'))
        self.assertFalse(slug_exists(self.conn, 'taken', exclude_id=created['id']))
        self.assertFalse(slug_exists(self.conn, 'free'))

    def test_duplicate_slug_rejected_by_schema(self):
        from db.products import create_product
        create_product(self.conn, _product('dup'))
        with self.assertRaises(sqlite3.IntegrityError):
            create_product(self.conn, _product('dup'))

    def test_delete(self):
        from db.products import create_product, delete_product, get_product
        created = create_product(self.conn, _product('gone'))
        self.assertTrue(delete_product(self.conn, created['id']))
        self.assertIsNone(get_product(self.conn, created['id']))
        self.assertFalse(delete_product(self.conn, created['id']))


# ============================================================
# Testimonials and videos
# ============================================================

class TestTestimonialsAndVideos(DatabaseTestCase):

    def test_testimonial_crud(self):
        from db.testimonials import (
            create_testimonial, delete_testimonial, list_active_testimonials, update_testimonial,
        )
        created = create_testimonial(self.conn, {'name': 'Sinta', 'comment_id': 'Bagus', 'rating': 4})
        self.assertEqual(created['rating'], 4)
        self.assertEqual(len(list_active_testimonials(self.conn)), 1)

        update_testimonial(self.conn, created['id'], {'is_active': False})
        self.assertEqual(list_active_testimonials(self.conn), [])
        self.assertIsNone(update_testimonial(self.conn, 999, {'name': 'x'}))
        self.assertTrue(delete_testimonial(self.conn, created['id']))

    def test_rating_constraint(self):
        from db.testimonials import create_testimonial
        with self.assertRaises(sqlite3.IntegrityError):
            create_testimonial(self.conn, {'name': 'Bad', 'rating': 6})

    def test_video_crud(self):
        from db.videos import create_video, list_active_videos, list_videos, update_video
        create_video(self.conn, {'youtube_id': 'b', 'title_id': 'B', 'title_en': 'B', 'sort_order': 2})
        first = create_video(self.conn, {'youtube_id': 'a', 'title_id': 'A', 'title_en': 'A', 'sort_order': 1})
        self.assertEqual([v['youtube_id'] for v in list_videos(self.conn)], ['a', 'b'])

        update_video(self.conn, first['id'], {'is_active': False})
        self.assertEqual([v['youtube_id'] for v in list_active_videos(self.conn)], ['b'])


# ============================================================
# Contact messages and settings
# ============================================================

class TestMessages(DatabaseTestCase):

    def test_newest_first(self):
        from db.messages import list_messages
        for name, created in [('old', '2026-01-01T00:00:00+00:00'), ('new', '2026-02-01T00:00:00+00:00')]:
            self.conn.execute(
                "INSERT INTO contact_messages (name, email, message, created_at) VALUES (?, ?, ?, ?)",
                (name, f'{name}@example.com', 'hi', created),
            )
        self.conn.commit()
        self.assertEqual([m['name'] for m in list_messages(self.conn)], ['new', 'old'])

    def test_mark_replied_also_marks_read(self):
        from db.messages import count_unread, create_message, get_message, mark_replied
        message = create_message(self.conn, 'Dani', 'dani@example.com', 'Halo')
        self.assertIs(message['is_read'], False)
        self.assertEqual(message['type'], 'contact')
        self.assertEqual(count_unread(self.conn), 1)

        self.assertTrue(mark_replied(self.conn, message['id']))
        stored = get_message(self.conn, message['id'])
        self.assertIs(stored['is_replied'], True)
        self.assertIs(stored['is_read'], True)
        self.assertEqual(count_unread(self.conn), 0)

    def test_mark_read_missing(self):
        from db.messages import mark_read
        self.assertFalse(mark_read(self.conn, 42))


class TestSettings(DatabaseTestCase):

    def test_upsert_overwrites(self):
        from db.settings import get_all_settings, get_setting, upsert_setting
        upsert_setting(self.conn, 'email', 'a@example.com')
        upsert_setting(self.conn, 'email', 'b@example.com')
        self.assertEqual(get_setting(self.conn, 'email'), 'b@example.com')
        self.assertEqual(get_all_settings(self.conn), {'email': 'b@example.com'})
        self.assertIsNone(get_setting(self.conn, 'missing'))


# ============================================================
# Chat transcripts
# ============================================================

class TestChat(DatabaseTestCase):

    def _insert(self, session_id, role, content, created_at, metadata=None):
        self.conn.execute(
            "INSERT INTO chat_memory (session_id, role, content, metadata, created_at) VALUES (?, ?, ?, ?, ?)",
            (session_id, role, content, json.dumps(metadata or {}), created_at),
        )
        self.conn.commit()

    def test_list_sessions(self):
        from db.chat import list_sessions
        self._insert('a', 'user', 'hello', '2026-10-01T10:00:00+00:00')
        self._insert('a', 'assistant', 'hi there', '2026-10-01T10:00:05+00:00')
        self._insert('a', 'user', 'x' * 150, '2026-10-01T10:01:00+00:00',
                     {'name': 'Budi', 'email': 'budi@example.com'})
        self._insert('b', 'user', 'later', '2026-10-02T09:00:00+00:00')

        sessions = list_sessions(self.conn)
        self.assertEqual([s['session_id'] for s in sessions], ['b', 'a'])

        latest, older = sessions
        self.assertEqual(latest['user_name'], 'Tidak diketahui')
        self.assertEqual(latest['user_email'], 'Tidak ada email')
        self.assertEqual(latest['latest_message'], 'later')

        self.assertEqual(older['user_name'], 'Budi')
        self.assertEqual(older['user_email'], 'budi@example.com')
        self.assertEqual(older['latest_message'], 'x' * 100 + '...')
        self.assertEqual(older['message_count'], 3)
        self.assertEqual(older['created_at'], '2026-10-01T10:01:00+00:00')

    def test_session_without_user_messages(self):
        from db.chat import list_sessions
        self._insert('c', 'assistant', 'Selamat datang', '2026-10-01T10:00:00+00:00')
        self.assertEqual(list_sessions(self.conn)[0]['latest_message'], 'Tidak ada pesan')

    def test_session_messages_ascending(self):
        from db.chat import list_session_messages, record_message
        record_message(self.conn, 's', 'user', 'first', {'name': 'Ana'})
        record_message(self.conn, 's', 'assistant', 'second')
        messages = list_session_messages(self.conn, 's')
        self.assertEqual([m['content'] for m in messages], ['first', 'second'])
        self.assertEqual(messages[0]['metadata'], {'name': 'Ana'})

    def test_dashboard_stats(self):
        from db.chat import get_dashboard_stats
        self._insert('a', 'user', 'q', '2026-10-18T23:00:00+00:00', {'email': 'one@example.com'})
        self._insert('a', 'user', 'q', '2026-10-19T08:00:00+00:00', {'email': 'one@example.com'})
        self._insert('b', 'user', 'q', '2026-10-19T09:00:00+00:00', {'email': 'two@example.com'})
        self._insert('c', 'user', 'q', '2026-10-19T10:00:00+00:00')

        stats = get_dashboard_stats(self.conn, now=datetime(2026, 10, 19, 12, tzinfo=timezone.utc))
        self.assertEqual(stats, {'total_conversations': 3, 'total_leads': 2, 'today_messages': 3})


# ============================================================
# Admin accounts
# ============================================================

class TestAdmins(DatabaseTestCase):

    def test_lookup_is_case_insensitive(self):
        from db.admins import create_admin, get_admin_by_email
        create_admin(self.conn, 'Admin@Example.com', 'salt:hash', 'Admin')
        self.assertEqual(get_admin_by_email(self.conn, 'admin@example.com')['display_name'], 'Admin')

    def test_updates(self):
        from db.admins import create_admin, get_admin, update_display_name, update_email
        admin = create_admin(self.conn, 'a@example.com', 'salt:hash')
        self.assertEqual(admin['role'], 'admin')
        update_display_name(self.conn, admin['id'], 'Ops')
        update_email(self.conn, admin['id'], 'ops@example.com')
        stored = get_admin(self.conn, admin['id'])
        self.assertEqual((stored['display_name'], stored['email']), ('Ops', 'ops@example.com'))


if __name__ == '__main__':
    unittest.main()
