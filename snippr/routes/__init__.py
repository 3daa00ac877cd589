# Routes package init
"""
Snippr - API Routes Package
=============================

Route Inventory:
    - snippets.py:  GET  /snippets          (list, optional ?lang= filter)
                    GET  /snippets/{id}     (single snippet)
                    POST /snippets          (create)
    - health.py:    GET  /health            (service health check)

Routes stay thin: read the request, call SnippetStore, shape the response.
"""
