"""
XML sitemap service: canonical URLs from the site menu and published articles
"""

__version__ = "1.0.0"
