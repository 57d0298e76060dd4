"""
High-level use cases for the portfolio API.

Each service orchestrates a DocumentStorage to implement the rules for one
area (portfolio content, contact form, health). Routers call these services
instead of reading or writing the JSON documents themselves.
"""
