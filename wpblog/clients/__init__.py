# wpblog/clients/__init__.py

"""Upstream API clients; import from the client modules directly."""
