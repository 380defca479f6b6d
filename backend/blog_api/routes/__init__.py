# Routes package init
"""
Blog API — API Routes Package
==============================

Route Inventory:
    - posts.py:   GET    /posts            (list posts)
                  GET    /posts/{id}       (get one post)
                  POST   /posts            (create post)
                  PUT    /posts/{id}       (update post)
                  DELETE /posts/{id}       (delete post)
    - health.py:  GET    /health           (service health check)

Routes stay thin: they resolve dependencies, call PostService, and set
status codes. Validation and persistence live in the services package.
"""
