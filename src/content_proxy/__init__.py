# Storefront Content Proxy
"""
Serves blog content from the headless content store to the storefront:
- signature: app proxy request verification
- content_store: Sanity queries and typed records
- template_engine: block rendering and page assembly
- proxy: HTTP routes and CLI
"""

__version__ = "0.1.0"
