"""Bloglist Backend: blogs, users and token authentication over a REST API."""
