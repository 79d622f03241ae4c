"""
Database CLI for the LifeAid storefront.

Usage:
    python manage_db.py init                                  # Initialize/upgrade schema
    python manage_db.py info                                  # Show schema information
    python manage_db.py create-admin admin@example.com        # Create an admin (prompts for password)
    python manage_db.py seed                                  # Copy the bundled catalog into the database
    python manage_db.py set-flag on|off                       # Toggle use_database_products
"""

import argparse
import getpass
import os
import sys
import sqlite3

# Ensure the script's directory is in Python path for local imports
_script_dir = os.path.dirname(os.path.abspath(__file__))
if _script_dir not in sys.path:
    sys.path.insert(0, _script_dir)

from db import get_connection, get_db_path, get_schema_info, init_database


def seed_database(conn):
    """Insert the bundled products and testimonials that are not in the database yet.

    Products are matched by slug, testimonials by name.

    Returns:
        Tuple of (products_added, testimonials_added)
    """
    from catalog.fallback import static_products, static_testimonials
    from db.products import create_product, slug_exists
    from db.testimonials import create_testimonial, list_testimonials

    products_added = 0
    for product in static_products():
        if slug_exists(conn, product['slug']):
            continue
        values = {k: v for k, v in product.items() if k not in ('id', 'image', 'thumbnails', 'source')}
        values['image_base64'] = product['image']
        values['thumbnails_base64'] = product['thumbnails']
        create_product(conn, values)
        products_added += 1

    existing_names = {t['name'] for t in list_testimonials(conn)}
    testimonials_added = 0
    for sort_order, testimonial in enumerate(static_testimonials(), start=1):
        if testimonial['name'] in existing_names:
            continue
        values = {k: v for k, v in testimonial.items() if k != 'source'}
        values['sort_order'] = sort_order
        create_testimonial(conn, values)
        testimonials_added += 1

    return products_added, testimonials_added


def _cmd_init(args):
    init_database(args.db)
    print(f"Database initialized: {args.db}")
    info = get_schema_info()
    for table, columns in info['tables'].items():
        print(f"  - {table}: {len(columns)} columns")
    print(f"  - {info['indexes']} indexes")


def _cmd_info(args):
    info = get_schema_info()
    for table, columns in info['tables'].items():
        print(f"{table}: {', '.join(columns)}")
    print(f"Indexes: {info['indexes']}")


def _cmd_create_admin(args):
    from api.auth import hash_password
    from db.admins import create_admin

    password = args.password or getpass.getpass('Password: ')
    if len(password) < 6:
        print("Error: password must be at least 6 characters")
        return 1
    init_database(args.db)
    with get_connection(args.db) as conn:
        try:
            admin = create_admin(conn, args.email, hash_password(password), args.display_name)
        except sqlite3.IntegrityError:
            print(f"Error: an admin with email {args.email} already exists")
            return 1
    print(f"Admin created: {admin['email']} (id {admin['id']})")
    return 0


def _cmd_seed(args):
    init_database(args.db)
    with get_connection(args.db) as conn:
        products_added, testimonials_added = seed_database(conn)
    print(f"Seeded {products_added} products, {testimonials_added} testimonials")


def _cmd_set_flag(args):
    from catalog.settings import USE_DATABASE_PRODUCTS
    from db.settings import upsert_setting

    init_database(args.db)
    value = 'true' if args.state == 'on' else 'false'
    with get_connection(args.db) as conn:
        upsert_setting(conn, USE_DATABASE_PRODUCTS, value)
    print(f"{USE_DATABASE_PRODUCTS} = {value}")


def main(argv=None):
    parser = argparse.ArgumentParser(description='Manage the LifeAid storefront database')
    parser.add_argument(
        '--db',
        default=get_db_path(),
        help=f'Database path (default: {get_db_path()})'
    )
    subparsers = parser.add_subparsers(dest='command')

    subparsers.add_parser('init', help='Create or upgrade the schema')
    subparsers.add_parser('info', help='Display schema information')

    admin_parser = subparsers.add_parser('create-admin', help='Create an admin account')
    admin_parser.add_argument('email')
    admin_parser.add_argument('--password', help='Password (prompted when omitted)')
    admin_parser.add_argument('--display-name', default=None)

    subparsers.add_parser('seed', help='Copy the bundled catalog into the database')

    flag_parser = subparsers.add_parser('set-flag', help='Serve catalog content from the database or not')
    flag_parser.add_argument('state', choices=['on', 'off'])

    args = parser.parse_args(argv)
    commands = {
        'init': _cmd_init,
        'info': _cmd_info,
        'create-admin': _cmd_create_admin,
        'seed': _cmd_seed,
        'set-flag': _cmd_set_flag,
    }
    handler = commands.get(args.command or 'init')
    return handler(args) or 0


if __name__ == '__main__':
    sys.exit(main())
