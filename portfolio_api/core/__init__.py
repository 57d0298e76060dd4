"""
Core utilities shared across the portfolio API.

Configuration, logging setup and small request helpers live here so routers and
services do not read os.environ or poke at request internals directly.
"""
