"""
Services: Supabase catalog/orders, money helpers, serviceability.

Submodules are imported directly (e.g. ``from freshcut.services.database
import get_database``) so the cart package can use the money helpers without
pulling in the Supabase client.
"""
