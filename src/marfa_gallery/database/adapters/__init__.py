"""Concrete Database port adapters.

Imported lazily by `marfa_gallery.database.di` so psycopg stays optional.
"""
